from app.payments.models.payment import Payment, PaymentMethod, PaymentStatus

__all__ = ["Payment", "PaymentMethod", "PaymentStatus"]
