import pytest

from apps.payments.services import amount_in_minor_units, create_payment_intent, InvalidAmountError
from apps.events.services import create_event


class TestAmount:

    @pytest.mark.parametrize('price,expected', [
        (150.0, 15000),
        (149.99, 14999),
        (0.1, 10),
        (0.0, 0),
        (None, 0),
    ])
    def test_minor_units(self, price, expected):
        assert amount_in_minor_units(price) == expected


class TestCreatePaymentIntent:

    def test_rounds_to_zero(self, stripe_api):
        event = create_event(creator_uid='host-uid', title='Almost free', event_date='2025-01-01',
                             free=False, price=0.004).event

        with pytest.raises(InvalidAmountError):
            create_payment_intent(event_id=event.id)

        stripe_api.customer.assert_not_called()
