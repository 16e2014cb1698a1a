"""
Stripe payment service.

Creates the objects the mobile PaymentSheet needs (customer, ephemeral key
and payment intent) and verifies incoming webhooks. Payment results are only
logged; nothing is persisted.
"""

import logging

import stripe
from django.conf import settings

from apps.events.repository import EventRepository

from .exceptions import (
    PaymentEventNotFoundError,
    InvalidAmountError,
    PaymentProviderError,
    InvalidWebhookError,
)

logger = logging.getLogger(__name__)


def _configure_stripe() -> None:
    stripe.api_key = settings.STRIPE_SECRET_KEY


def amount_in_minor_units(price: float) -> int:
    """150.0 NOK -> 15000 øre"""
    return int(round((price or 0) * 100))


def get_publishable_key() -> str:
    return settings.STRIPE_PUBLISHABLE_KEY


def create_payment_intent(*, event_id: str) -> dict:
    """
    Create a customer, ephemeral key and payment intent for an event ticket.

    Returns:
        Dict with paymentIntent (client secret), ephemeralKey (secret),
        customer (id) and publishableKey

    Raises:
        PaymentEventNotFoundError: If the event does not exist
        InvalidAmountError: If the event price is not positive
        PaymentProviderError: If a Stripe call fails
    """
    event = EventRepository().get(event_id)
    if event is None:
        raise PaymentEventNotFoundError("Event not found")

    amount = amount_in_minor_units(event.price)
    if amount <= 0:
        logger.warning("Refusing payment intent for event %s: amount %d", event_id, amount)
        raise InvalidAmountError("Order total must be greater than 0")

    _configure_stripe()
    try:
        customer = stripe.Customer.create()
        ephemeral_key = stripe.EphemeralKey.create(
            customer=customer.id,
            stripe_version=settings.STRIPE_API_VERSION,
        )
        intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=settings.STRIPE_CURRENCY,
            customer=customer.id,
            metadata={'eventId': event_id},
            automatic_payment_methods={'enabled': True},
        )
    except stripe.StripeError as e:
        logger.error("Stripe error creating payment intent for event %s: %s", event_id, e)
        raise PaymentProviderError(f"Payment provider error: {e.user_message or 'request failed'}")

    logger.info(
        "Payment intent %s created for event %s (%d %s, customer %s)",
        intent.id, event_id, amount, settings.STRIPE_CURRENCY, customer.id,
    )
    return {
        'paymentIntent': intent.client_secret,
        'ephemeralKey': ephemeral_key.secret,
        'customer': customer.id,
        'publishableKey': get_publishable_key(),
    }


def _event_id_of(stripe_object) -> str | None:
    metadata = getattr(stripe_object, 'metadata', None)
    if metadata and 'eventId' in metadata:
        return metadata['eventId']
    return None


def handle_webhook(*, payload: bytes, signature: str | None) -> str:
    """
    Verify a Stripe webhook and log the event. Returns the event type.

    Raises:
        InvalidWebhookError: If the payload or signature is invalid
    """
    try:
        event = stripe.Webhook.construct_event(payload, signature, settings.STRIPE_ENDPOINT_SECRET)
    except ValueError as e:
        logger.warning("Invalid Stripe webhook payload: %s", e)
        raise InvalidWebhookError("Invalid payload")
    except stripe.SignatureVerificationError as e:
        logger.warning("Invalid Stripe webhook signature: %s", e)
        raise InvalidWebhookError("Invalid signature")

    event_type = event.type
    obj = event.data.object

    if event_type == 'payment_intent.succeeded':
        logger.info("Payment succeeded: %s (event %s)", obj.id, _event_id_of(obj))
    elif event_type == 'payment_intent.payment_failed':
        logger.warning("Payment failed: %s (event %s)", obj.id, _event_id_of(obj))
    elif event_type == 'payment_method.attached':
        logger.info("Payment method attached: %s", obj.id)
    else:
        logger.info("Unhandled Stripe event type: %s", event_type)

    return event_type
