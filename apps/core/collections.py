"""Firestore collection names."""

USERS = 'users'
EVENTS = 'events'
EVENT_USERS = 'event_users'
FRIENDSHIPS = 'friendships'
EVENT_IMAGES = 'event_images'
