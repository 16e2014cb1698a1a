from django.urls import path
from . import views

app_name = 'friendships'

urlpatterns = [
    path('friendships/request', views.send_request, name='request'),
    path('friendships/pending', views.pending, name='pending'),
    path('friendships/sent', views.sent, name='sent'),
    path('friendships/friends', views.friends, name='friends'),
    path('friendships/<str:friendship_id>/accept', views.accept, name='accept'),
    path('friendships/<str:friendship_id>/decline', views.decline, name='decline'),
    path('friendships/<str:friendship_id>', views.remove, name='remove'),
]
