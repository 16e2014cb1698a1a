from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.core.serializers import ErrorResponseSerializer

from .serializers import (
    EventWithMetadataSerializer,
    EventCreateSerializer,
    EventUpdateSerializer,
    EventUserSerializer,
    InviteUsersSerializer,
    InviteResponseSerializer,
    InvitationAnswerSerializer,
    EventDeletedSerializer,
)
from .services import (
    get_events_for_user,
    get_event,
    create_event,
    update_event,
    delete_event,
    find_event_by_share_code,
    invite_users,
    accept_invitation,
    decline_invitation,
    get_event_attendees,
    get_my_events,
)


STATUS_PARAMETER = OpenApiParameter(
    'status', str, description='PENDING, ACCEPTED, DECLINED or CREATOR (case-insensitive)'
)


# =============================================================================
# Events
# =============================================================================

@extend_schema(
    methods=['GET'],
    responses={200: EventWithMetadataSerializer(many=True)},
    description="List every event you created or were invited to.",
    tags=['events'],
)
@extend_schema(
    methods=['POST'],
    request=EventCreateSerializer,
    responses={201: EventWithMetadataSerializer, 400: ErrorResponseSerializer},
    description="Create an event. You become its creator.",
    tags=['events'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def event_list(request):
    """List your events or create a new one."""
    if request.method == 'GET':
        events = get_events_for_user(uid=request.user.uid)
        return Response(EventWithMetadataSerializer(events, many=True).data)

    serializer = EventCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    event = create_event(creator_uid=request.user.uid, **serializer.validated_data)
    return Response(EventWithMetadataSerializer(event).data, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    responses={200: EventWithMetadataSerializer, 404: ErrorResponseSerializer},
    tags=['events'],
)
@extend_schema(
    methods=['PUT'],
    request=EventUpdateSerializer,
    responses={
        200: EventWithMetadataSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Update an event (creator only). Omitted fields are left unchanged.",
    tags=['events'],
)
@extend_schema(
    methods=['DELETE'],
    responses={
        200: EventDeletedSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Delete an event and all of its invitations (creator only).",
    tags=['events'],
)
@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def event_detail(request, event_id):
    """Get, update or delete an event."""
    uid = request.user.uid

    if request.method == 'GET':
        return Response(EventWithMetadataSerializer(get_event(event_id=event_id, uid=uid)).data)

    if request.method == 'DELETE':
        deleted = delete_event(event_id=event_id, uid=uid)
        return Response({
            'message': 'Event deleted successfully',
            'deletedEventUsers': deleted,
        })

    serializer = EventUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    event = update_event(event_id=event_id, uid=uid, **serializer.validated_data)
    return Response(EventWithMetadataSerializer(event).data)


@extend_schema(
    responses={200: EventWithMetadataSerializer, 404: ErrorResponseSerializer},
    description="Look up an event by share code. Joins you as a pending attendee.",
    tags=['events'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def event_by_share_code(request, share_code):
    event = find_event_by_share_code(share_code=share_code, uid=request.user.uid)
    return Response(EventWithMetadataSerializer(event).data)


# =============================================================================
# Event users (invitations)
# =============================================================================

@extend_schema(
    request=InviteUsersSerializer,
    responses={
        200: InviteResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Invite users to your event. Users already invited are skipped.",
    tags=['event-users'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def invite(request):
    serializer = InviteUsersSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    invited = invite_users(inviter_uid=request.user.uid, **serializer.validated_data)
    return Response({
        'message': 'Users invited successfully',
        'invitedCount': len(invited),
        'invitedUsers': EventUserSerializer(invited, many=True).data,
    })


@extend_schema(
    request=None,
    responses={
        200: InvitationAnswerSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    tags=['event-users'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def accept(request, event_user_id):
    event_id = accept_invitation(event_user_id=event_user_id, uid=request.user.uid)
    return Response({'message': 'Invitation accepted', 'eventId': event_id})


@extend_schema(
    request=None,
    responses={
        200: InvitationAnswerSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    tags=['event-users'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def decline(request, event_user_id):
    event_id = decline_invitation(event_user_id=event_user_id, uid=request.user.uid)
    return Response({'message': 'Invitation declined', 'eventId': event_id})


@extend_schema(
    parameters=[STATUS_PARAMETER],
    responses={200: EventUserSerializer(many=True), 404: ErrorResponseSerializer},
    description="List the invitations of an event.",
    tags=['event-users'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def event_attendees(request, event_id):
    attendees = get_event_attendees(event_id=event_id, status=request.query_params.get('status'))
    return Response(EventUserSerializer(attendees, many=True).data)


@extend_schema(
    parameters=[STATUS_PARAMETER],
    responses={200: EventWithMetadataSerializer(many=True)},
    description="List your events, optionally filtered by your invitation status.",
    tags=['event-users'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_events(request):
    events = get_my_events(uid=request.user.uid, status=request.query_params.get('status'))
    return Response(EventWithMetadataSerializer(events, many=True).data)
