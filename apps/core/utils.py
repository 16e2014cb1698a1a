"""Small helpers shared by every app."""

from django.utils import timezone


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string, e.g. 2025-03-01T18:30:00+00:00."""
    return timezone.now().isoformat(timespec='seconds')
