"""Response shapes shared by every app, used in the OpenAPI schema."""

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Body rendered by `apps.core.exceptions.api_exception_handler`."""

    error = serializers.CharField()
    message = serializers.CharField()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
