from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema

from apps.core.serializers import ErrorResponseSerializer

from .serializers import (
    PaymentIntentRequestSerializer,
    PaymentIntentResponseSerializer,
    KeysResponseSerializer,
    WebhookResponseSerializer,
)
from .services import (
    create_payment_intent,
    get_publishable_key,
    handle_webhook,
    InvalidWebhookError,
)


@extend_schema(
    request=PaymentIntentRequestSerializer,
    responses={
        200: PaymentIntentResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Create the Stripe objects needed to pay for an event ticket.",
    tags=['stripe'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def payment_intent(request):
    serializer = PaymentIntentRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    return Response(create_payment_intent(**serializer.validated_data))


@extend_schema(
    responses={200: KeysResponseSerializer},
    tags=['stripe'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def keys(request):
    return Response({'publishableKey': get_publishable_key()})


@extend_schema(
    request=OpenApiTypes.OBJECT,
    responses={200: WebhookResponseSerializer, 400: WebhookResponseSerializer},
    description="Stripe webhook endpoint. Authenticated by the Stripe-Signature header.",
    tags=['stripe'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def webhook(request):
    """Receive Stripe events; the raw body is needed for signature checks."""
    try:
        handle_webhook(
            payload=request.body,
            signature=request.META.get('HTTP_STRIPE_SIGNATURE', ''),
        )
    except InvalidWebhookError:
        return Response({'received': False}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'received': True})
