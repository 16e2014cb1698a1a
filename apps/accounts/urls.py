from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('users', views.user_list, name='user-list'),
    path('users/register', views.register, name='register'),
    path('users/username-available/<str:username>', views.username_available, name='username-available'),
    path('users/email-available/<str:email>', views.email_available, name='email-available'),
    path('users/<str:uid>', views.user_detail, name='user-detail'),
]
