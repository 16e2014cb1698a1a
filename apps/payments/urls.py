from django.urls import path
from . import views

app_name = 'payments'

urlpatterns = [
    path('stripe/payment-intent', views.payment_intent, name='payment-intent'),
    path('stripe/keys', views.keys, name='keys'),
    path('stripe/webhook', views.webhook, name='webhook'),
]
