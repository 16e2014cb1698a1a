from rest_framework import status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.serializers import ErrorResponseSerializer, MessageResponseSerializer

from .serializers import (
    EventImageSerializer,
    EventImageUploadSerializer,
    ProfilePhotoUploadSerializer,
    EventImageUploadResponseSerializer,
    ProfilePhotoUploadResponseSerializer,
)
from .services import (
    upload_event_image,
    upload_profile_photo,
    get_event_images,
    delete_image,
)


@extend_schema(
    request={'multipart/form-data': EventImageUploadSerializer},
    responses={
        201: EventImageUploadResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Upload an image to an event.",
    tags=['images'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
@parser_classes([MultiPartParser, FormParser])
def upload(request):
    serializer = EventImageUploadSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    image = upload_event_image(uid=request.user.uid, **serializer.validated_data)

    return Response({
        'message': 'Image uploaded successfully',
        'imageUrl': image.path,
        'eventId': image.event_id,
        'documentId': image.id,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request={'multipart/form-data': ProfilePhotoUploadSerializer},
    responses={
        201: ProfilePhotoUploadResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Upload a new profile photo, replacing the current one.",
    tags=['images'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
@parser_classes([MultiPartParser, FormParser])
def upload_profile(request):
    serializer = ProfilePhotoUploadSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    photo_url = upload_profile_photo(uid=request.user.uid, **serializer.validated_data)

    return Response({
        'message': 'Profile photo uploaded successfully',
        'photoUrl': photo_url,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: EventImageSerializer(many=True)},
    tags=['images'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def event_images(request, event_id):
    images = get_event_images(event_id=event_id)
    return Response(EventImageSerializer(images, many=True).data)


@extend_schema(
    responses={
        200: MessageResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Delete an image (uploader or event creator only).",
    tags=['images'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def image_detail(request, document_id):
    delete_image(document_id=document_id, uid=request.user.uid)
    return Response({'message': 'Image deleted successfully'})
