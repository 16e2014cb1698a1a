import hashlib
import hmac
import json
import time
from unittest import mock

import pytest
from django.conf import settings

from apps.events.services import create_event


@pytest.fixture
def buyer_client(client_for):
    return client_for('buyer-uid')


@pytest.fixture
def paid_event():
    return create_event(
        creator_uid='host-uid', title='Concert', event_date='2025-10-10', free=False, price=149.5
    ).event


@pytest.fixture
def free_event():
    return create_event(creator_uid='host-uid', title='Picnic', event_date='2025-10-11').event


@pytest.fixture
def stripe_api():
    """Patch the Stripe resources used to build a payment sheet."""
    with mock.patch('stripe.Customer.create') as customer, \
            mock.patch('stripe.EphemeralKey.create') as ephemeral_key, \
            mock.patch('stripe.PaymentIntent.create') as payment_intent:
        customer.return_value = mock.Mock(id='cus_123')
        ephemeral_key.return_value = mock.Mock(secret='ek_test_secret')
        payment_intent.return_value = mock.Mock(id='pi_123', client_secret='pi_123_secret_abc')
        yield mock.Mock(customer=customer, ephemeral_key=ephemeral_key, payment_intent=payment_intent)


def sign_payload(payload: str, secret: str = None, timestamp: int = None) -> str:
    """Build a Stripe-Signature header value for a payload."""
    secret = secret or settings.STRIPE_ENDPOINT_SECRET
    timestamp = timestamp or int(time.time())
    signed = f'{timestamp}.{payload}'.encode()
    signature = hmac.new(secret.encode(), signed, hashlib.sha256).hexdigest()
    return f't={timestamp},v1={signature}'


@pytest.fixture
def webhook_payload():
    def _payload(event_type, obj):
        return json.dumps({
            'id': 'evt_123',
            'object': 'event',
            'type': event_type,
            'data': {'object': obj},
        })
    return _payload
