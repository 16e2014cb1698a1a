from django.urls import path
from . import views

app_name = 'events'

urlpatterns = [
    # Events
    # GET    /api/events                    - List my events
    # POST   /api/events                    - Create event
    # GET    /api/events/by-code/{code}     - Resolve share code (joins as pending)
    # GET    /api/events/{id}               - Event details
    # PUT    /api/events/{id}               - Update event (creator)
    # DELETE /api/events/{id}               - Delete event and invitations (creator)
    path('events', views.event_list, name='event-list'),
    path('events/by-code/<str:share_code>', views.event_by_share_code, name='event-by-code'),
    path('events/<str:event_id>', views.event_detail, name='event-detail'),

    # Invitations
    path('event-users/invite', views.invite, name='invite'),
    path('event-users/my-events', views.my_events, name='my-events'),
    path('event-users/event/<str:event_id>', views.event_attendees, name='event-attendees'),
    path('event-users/<str:event_user_id>/accept', views.accept, name='accept'),
    path('event-users/<str:event_user_id>/decline', views.decline, name='decline'),
]
