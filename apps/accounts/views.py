from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.core.serializers import ErrorResponseSerializer

from .serializers import (
    UserSerializer,
    UserRegistrationSerializer,
    UserUpdateSerializer,
    RegistrationResponseSerializer,
    AvailabilitySerializer,
)
from .services import (
    register_user,
    get_user,
    list_users,
    update_user,
    is_username_available,
    is_email_available,
)


@extend_schema(
    parameters=[
        OpenApiParameter('search', str, description='Fuzzy match on username and name'),
    ],
    responses={200: UserSerializer(many=True)},
    description="List user profiles, optionally filtered by a search term.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_list(request):
    """List or search user profiles."""
    users = list_users(search=request.query_params.get('search'))
    return Response(UserSerializer(users, many=True).data)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: RegistrationResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Create the profile for an account already registered in Firebase Auth.",
    tags=['users'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a user profile."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = register_user(**serializer.validated_data)

    return Response({
        'uid': user.uid,
        'email': user.email,
        'username': user.username,
        'message': 'Profile created. You can now log in.',
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    responses={200: UserSerializer, 404: ErrorResponseSerializer},
    description="Get a user profile by UID.",
    tags=['users'],
)
@extend_schema(
    methods=['PUT'],
    request=UserUpdateSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Update your own profile. Omitted fields are left unchanged.",
    tags=['users'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def user_detail(request, uid):
    """Get or update a user profile."""
    if request.method == 'GET':
        return Response(UserSerializer(get_user(uid=uid)).data)

    serializer = UserUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = update_user(uid=uid, requesting_uid=request.user.uid, **serializer.validated_data)
    return Response(UserSerializer(user).data)


@extend_schema(
    responses={200: AvailabilitySerializer},
    description="Check whether a username (4-12 characters) is free.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def username_available(request, username):
    return Response({'available': is_username_available(username=username)})


@extend_schema(
    responses={200: AvailabilitySerializer},
    description="Check whether an email is free.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def email_available(request, email):
    return Response({'available': is_email_available(email=email)})
