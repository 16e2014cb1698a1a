"""Domain-specific exceptions for payments services."""

from apps.core.exceptions import (
    ApplicationError,
    BadRequestError,
    ExternalServiceError,
    NotFoundError,
)


class PaymentsServiceError(ApplicationError):
    """Base exception for payments services."""
    pass


class PaymentEventNotFoundError(PaymentsServiceError, NotFoundError):
    pass


class InvalidAmountError(PaymentsServiceError, BadRequestError):
    """Raised when the event price gives a non-positive charge."""
    pass


class PaymentProviderError(PaymentsServiceError, ExternalServiceError):
    """Raised when a Stripe API call fails."""
    pass


class InvalidWebhookError(PaymentsServiceError, BadRequestError):
    """Raised when a webhook payload or signature cannot be verified."""
    pass
