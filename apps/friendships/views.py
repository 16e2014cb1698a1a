from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.serializers import ErrorResponseSerializer, MessageResponseSerializer

from .serializers import FriendshipSerializer, FriendRequestSerializer
from .services import (
    send_friend_request,
    accept_friend_request,
    decline_friend_request,
    remove_friend,
    get_pending_requests,
    get_sent_requests,
    get_friends,
)


@extend_schema(
    request=FriendRequestSerializer,
    responses={
        201: FriendshipSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Send a friend request to another user.",
    tags=['friendships'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def send_request(request):
    serializer = FriendRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    friendship = send_friend_request(from_uid=request.user.uid, **serializer.validated_data)
    return Response(FriendshipSerializer(friendship).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=None,
    responses={
        200: FriendshipSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    tags=['friendships'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def accept(request, friendship_id):
    friendship = accept_friend_request(friendship_id=friendship_id, uid=request.user.uid)
    return Response(FriendshipSerializer(friendship).data)


@extend_schema(
    request=None,
    responses={
        200: FriendshipSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    tags=['friendships'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def decline(request, friendship_id):
    friendship = decline_friend_request(friendship_id=friendship_id, uid=request.user.uid)
    return Response(FriendshipSerializer(friendship).data)


@extend_schema(
    responses={
        200: MessageResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Remove a friend, or withdraw a request you sent.",
    tags=['friendships'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def remove(request, friendship_id):
    remove_friend(friendship_id=friendship_id, uid=request.user.uid)
    return Response({'message': 'Friendship removed successfully'})


@extend_schema(
    responses={200: FriendshipSerializer(many=True)},
    description="Friend requests waiting for your answer.",
    tags=['friendships'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pending(request):
    return Response(FriendshipSerializer(get_pending_requests(uid=request.user.uid), many=True).data)


@extend_schema(
    responses={200: FriendshipSerializer(many=True)},
    description="Friend requests you sent that are not answered yet.",
    tags=['friendships'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def sent(request):
    return Response(FriendshipSerializer(get_sent_requests(uid=request.user.uid), many=True).data)


@extend_schema(
    responses={200: FriendshipSerializer(many=True)},
    description="Accepted friendships in either direction.",
    tags=['friendships'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def friends(request):
    return Response(FriendshipSerializer(get_friends(uid=request.user.uid), many=True).data)
