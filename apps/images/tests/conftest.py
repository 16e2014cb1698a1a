from unittest import mock

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.events.services import create_event


UPLOADED_URL = 'https://res.cloudinary.com/demo/image/upload/v1700000000/event_images/abc123.jpg'


@pytest.fixture
def cloudinary_upload():
    """Patch the Cloudinary upload call; returns a fixed secure URL."""
    with mock.patch('cloudinary.uploader.upload') as patched:
        patched.return_value = {'secure_url': UPLOADED_URL, 'public_id': 'event_images/abc123'}
        yield patched


@pytest.fixture
def cloudinary_destroy():
    with mock.patch('cloudinary.uploader.destroy') as patched:
        patched.return_value = {'result': 'ok'}
        yield patched


@pytest.fixture
def image_file():
    return SimpleUploadedFile('party.jpg', b'\xff\xd8\xff\xe0fake-jpeg', content_type='image/jpeg')


@pytest.fixture
def text_file():
    return SimpleUploadedFile('notes.txt', b'hello', content_type='text/plain')


@pytest.fixture
def host(make_user):
    return make_user('host-uid', username='host')


@pytest.fixture
def guest(make_user):
    return make_user('guest-uid', username='guest')


@pytest.fixture
def event(host):
    return create_event(creator_uid=host.uid, title='Picnic', event_date='2025-06-01').event
