from apps.core.exceptions import error_body
from apps.core.serializers import ErrorResponseSerializer, MessageResponseSerializer


def test_error_response_matches_handler_body():
    serializer = ErrorResponseSerializer(data=error_body('NOT_FOUND', 'Event not found'))

    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data == {'error': 'NOT_FOUND', 'message': 'Event not found'}


def test_message_response():
    assert MessageResponseSerializer(data={'message': 'Friendship removed successfully'}).is_valid()
    assert not MessageResponseSerializer(data={}).is_valid()


def test_apps_share_core_response_shapes():
    from apps.events import views as event_views
    from apps.images import views as image_views
    from apps.payments import views as payment_views

    assert event_views.ErrorResponseSerializer is ErrorResponseSerializer
    assert image_views.MessageResponseSerializer is MessageResponseSerializer
    assert payment_views.ErrorResponseSerializer is ErrorResponseSerializer
