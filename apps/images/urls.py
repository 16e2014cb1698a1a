from django.urls import path
from . import views

app_name = 'images'

urlpatterns = [
    path('images/upload', views.upload, name='upload'),
    path('images/upload-profile', views.upload_profile, name='upload-profile'),
    path('images/event/<str:event_id>', views.event_images, name='event-images'),
    path('images/<str:document_id>', views.image_detail, name='image-detail'),
]
