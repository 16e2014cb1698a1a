from django.http import JsonResponse
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@extend_schema(
    responses={200: inline_serializer('HealthResponse', {'status': serializers.CharField()})},
    description="Report that the API is up.",
    tags=['health'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """Public liveness probe."""
    return Response({'status': 'UP'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'NOT_FOUND',
        'message': 'Resource not found'
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'INTERNAL_ERROR',
        'message': 'An unexpected error occurred'
    }, status=500)
