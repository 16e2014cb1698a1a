from rest_framework import serializers

from .models import EventUserStatus, EventUserRole


class IsoDateField(serializers.DateField):
    """Accepts YYYY-MM-DD and keeps it as that string."""

    def to_internal_value(self, value):
        return super().to_internal_value(value).isoformat()


class HourMinuteField(serializers.TimeField):
    """Accepts HH:mm and keeps it as that string."""

    def __init__(self, **kwargs):
        kwargs.setdefault('input_formats', ['%H:%M'])
        super().__init__(**kwargs)

    def to_internal_value(self, value):
        return super().to_internal_value(value).strftime('%H:%M')


class EventSerializer(serializers.Serializer):
    """Event fields as stored; the id is carried by the wrapper."""

    title = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    eventDate = serializers.CharField(source='event_date', read_only=True)
    eventTime = serializers.CharField(source='event_time', read_only=True, allow_null=True)
    location = serializers.CharField(read_only=True, allow_null=True)
    creatorUid = serializers.CharField(source='creator_uid', read_only=True)
    free = serializers.BooleanField(read_only=True)
    price = serializers.FloatField(read_only=True)
    shareCode = serializers.CharField(source='share_code', read_only=True, allow_null=True)
    createdAt = serializers.CharField(source='created_at', read_only=True, allow_null=True)
    updatedAt = serializers.CharField(source='updated_at', read_only=True, allow_null=True)


class EventWithMetadataSerializer(serializers.Serializer):
    """Event plus the requesting user's status and role."""

    id = serializers.CharField(read_only=True)
    event = EventSerializer(read_only=True)
    userStatus = serializers.ChoiceField(
        source='user_status', choices=EventUserStatus.choices, read_only=True, allow_null=True
    )
    userRole = serializers.ChoiceField(
        source='user_role', choices=EventUserRole.choices, read_only=True, allow_null=True
    )


class EventCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    description = serializers.CharField(max_length=5000, required=False, allow_null=True, allow_blank=True)
    eventDate = IsoDateField(source='event_date')
    eventTime = HourMinuteField(source='event_time', required=False, allow_null=True)
    location = serializers.CharField(max_length=300, required=False, allow_null=True, allow_blank=True)
    free = serializers.BooleanField(required=False, default=True)
    price = serializers.FloatField(min_value=0, required=False, default=0.0)


class EventUpdateSerializer(serializers.Serializer):
    """All fields optional; only the ones sent are changed."""

    title = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(max_length=5000, required=False, allow_null=True, allow_blank=True)
    eventDate = IsoDateField(source='event_date', required=False)
    eventTime = HourMinuteField(source='event_time', required=False, allow_null=True)
    location = serializers.CharField(max_length=300, required=False, allow_null=True, allow_blank=True)
    free = serializers.BooleanField(required=False)
    price = serializers.FloatField(min_value=0, required=False)


class EventUserSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    eventId = serializers.CharField(source='event_id', read_only=True)
    userId = serializers.CharField(source='user_id', read_only=True)
    status = serializers.ChoiceField(choices=EventUserStatus.choices, read_only=True)
    role = serializers.ChoiceField(choices=EventUserRole.choices, read_only=True)
    invitedAt = serializers.CharField(source='invited_at', read_only=True, allow_null=True)
    respondedAt = serializers.CharField(source='responded_at', read_only=True, allow_null=True)


class InviteUsersSerializer(serializers.Serializer):
    eventId = serializers.CharField(source='event_id')
    userIds = serializers.ListField(
        source='user_ids',
        child=serializers.CharField(max_length=128),
        allow_empty=False,
    )


class InviteResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    invitedCount = serializers.IntegerField()
    invitedUsers = EventUserSerializer(many=True)


class InvitationAnswerSerializer(serializers.Serializer):
    message = serializers.CharField()
    eventId = serializers.CharField()


class EventDeletedSerializer(serializers.Serializer):
    message = serializers.CharField()
    deletedEventUsers = serializers.IntegerField()
