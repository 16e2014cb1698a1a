from rest_framework import serializers

from .models import USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH


class UserSerializer(serializers.Serializer):
    """User profile as returned to the client."""

    uid = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    username = serializers.CharField(read_only=True)
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True, allow_null=True)
    phoneNumber = serializers.CharField(source='phone_number', read_only=True, allow_null=True)
    photoUrl = serializers.CharField(source='photo_url', read_only=True, allow_null=True)
    isEmailVerified = serializers.BooleanField(source='is_email_verified', read_only=True)
    createdAt = serializers.CharField(source='created_at', read_only=True, allow_null=True)
    updatedAt = serializers.CharField(source='updated_at', read_only=True, allow_null=True)


class UserRegistrationSerializer(serializers.Serializer):
    """Profile data posted after the client has signed up with Firebase Auth."""

    uid = serializers.CharField(max_length=128)
    email = serializers.EmailField()
    username = serializers.CharField(min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH)
    firstName = serializers.CharField(source='first_name', max_length=100)
    lastName = serializers.CharField(source='last_name', max_length=100, required=False, allow_null=True, allow_blank=True)
    phoneNumber = serializers.CharField(source='phone_number', max_length=30, required=False, allow_null=True, allow_blank=True)
    photoUrl = serializers.URLField(source='photo_url', required=False, allow_null=True)


class UserUpdateSerializer(serializers.Serializer):
    """All fields optional; only the ones sent are changed."""

    firstName = serializers.CharField(source='first_name', max_length=100, required=False)
    lastName = serializers.CharField(source='last_name', max_length=100, required=False, allow_null=True, allow_blank=True)
    phoneNumber = serializers.CharField(source='phone_number', max_length=30, required=False, allow_null=True, allow_blank=True)
    photoUrl = serializers.URLField(source='photo_url', required=False, allow_null=True)


class RegistrationResponseSerializer(serializers.Serializer):
    uid = serializers.CharField()
    email = serializers.EmailField()
    username = serializers.CharField()
    message = serializers.CharField()


class AvailabilitySerializer(serializers.Serializer):
    available = serializers.BooleanField()
