from rest_framework import serializers


class PaymentIntentRequestSerializer(serializers.Serializer):
    eventId = serializers.CharField(source='event_id', max_length=128)


class PaymentIntentResponseSerializer(serializers.Serializer):
    paymentIntent = serializers.CharField(help_text="PaymentIntent client secret")
    ephemeralKey = serializers.CharField(help_text="Ephemeral key secret for the customer")
    customer = serializers.CharField(help_text="Stripe customer id")
    publishableKey = serializers.CharField()


class KeysResponseSerializer(serializers.Serializer):
    publishableKey = serializers.CharField()


class WebhookResponseSerializer(serializers.Serializer):
    received = serializers.BooleanField()
