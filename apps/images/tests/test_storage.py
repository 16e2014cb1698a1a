from unittest import mock

import pytest
from cloudinary.exceptions import Error as CloudinaryError

from apps.core.exceptions import ExternalServiceError
from apps.images import storage


class TestIsCloudinaryUrl:

    @pytest.mark.parametrize('url,expected', [
        ('https://res.cloudinary.com/demo/image/upload/v1/user_images/a.jpg', True),
        ('https://example.com/avatars/a.jpg', False),
        ('https://lh3.googleusercontent.com/a/photo', False),
        ('', False),
        (None, False),
    ])
    def test_host_check(self, url, expected):
        assert storage.is_cloudinary_url(url) is expected


class TestPublicIdFromUrl:

    def test_strips_version_and_extension(self):
        url = 'https://res.cloudinary.com/demo/image/upload/v1700000000/user_images/xyz987.png'
        assert storage.public_id_from_url(url, 'user_images') == 'user_images/xyz987'

    def test_without_extension(self):
        url = 'https://res.cloudinary.com/demo/image/upload/event_images/plain'
        assert storage.public_id_from_url(url, 'event_images') == 'event_images/plain'


class TestUpload:

    def test_passes_transformation(self, cloudinary_upload, image_file):
        url = storage.upload_image(image_file, storage.EVENT_IMAGES_FOLDER)

        assert url.startswith('https://')
        _, kwargs = cloudinary_upload.call_args
        assert kwargs['folder'] == 'event_images'
        assert kwargs['width'] == 1920
        assert kwargs['height'] == 1080
        assert kwargs['crop'] == 'limit'
        assert kwargs['quality'] == 'auto:good'
        assert kwargs['fetch_format'] == 'auto'

    def test_failure_becomes_external_service_error(self, image_file):
        with mock.patch('cloudinary.uploader.upload', side_effect=CloudinaryError('boom')):
            with pytest.raises(ExternalServiceError):
                storage.upload_image(image_file, storage.EVENT_IMAGES_FOLDER)


class TestDelete:

    def test_ok(self, cloudinary_destroy):
        assert storage.delete_image('event_images/abc') is True
        cloudinary_destroy.assert_called_once_with('event_images/abc')

    def test_not_found_result(self, cloudinary_destroy):
        cloudinary_destroy.return_value = {'result': 'not found'}
        assert storage.delete_image('event_images/abc') is False

    def test_error_is_swallowed(self):
        with mock.patch('cloudinary.uploader.destroy', side_effect=CloudinaryError('down')):
            assert storage.delete_image('event_images/abc') is False
