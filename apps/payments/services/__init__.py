"""Services for payments business logic."""

from .exceptions import (
    PaymentsServiceError,
    PaymentEventNotFoundError,
    InvalidAmountError,
    PaymentProviderError,
    InvalidWebhookError,
)
from .stripe_payments import (
    amount_in_minor_units,
    get_publishable_key,
    create_payment_intent,
    handle_webhook,
)

__all__ = [
    # Exceptions
    'PaymentsServiceError',
    'PaymentEventNotFoundError',
    'InvalidAmountError',
    'PaymentProviderError',
    'InvalidWebhookError',
    # Services
    'amount_in_minor_units',
    'get_publishable_key',
    'create_payment_intent',
    'handle_webhook',
]
