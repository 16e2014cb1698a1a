from rest_framework import serializers

from .models import FriendshipStatus


class FriendshipSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    user1Id = serializers.CharField(source='user1_id', read_only=True)
    user2Id = serializers.CharField(source='user2_id', read_only=True)
    status = serializers.ChoiceField(choices=FriendshipStatus.choices, read_only=True)
    requestedBy = serializers.CharField(source='requested_by', read_only=True)
    requestedAt = serializers.CharField(source='requested_at', read_only=True, allow_null=True)
    respondedAt = serializers.CharField(source='responded_at', read_only=True, allow_null=True)


class FriendRequestSerializer(serializers.Serializer):
    toUserId = serializers.CharField(source='to_uid', max_length=128)
