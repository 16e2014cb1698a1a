from rest_framework import serializers


class EventImageSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    path = serializers.CharField(read_only=True)
    eventId = serializers.CharField(source='event_id', read_only=True)
    uploadedBy = serializers.CharField(source='uploaded_by', read_only=True, allow_null=True)
    originalFilename = serializers.CharField(source='original_filename', read_only=True, allow_null=True)
    createdAt = serializers.CharField(source='created_at', read_only=True, allow_null=True)


class EventImageUploadSerializer(serializers.Serializer):
    file = serializers.FileField()
    eventId = serializers.CharField(source='event_id', max_length=128)


class ProfilePhotoUploadSerializer(serializers.Serializer):
    file = serializers.FileField()


class EventImageUploadResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    imageUrl = serializers.URLField()
    eventId = serializers.CharField()
    documentId = serializers.CharField()


class ProfilePhotoUploadResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    photoUrl = serializers.URLField()
