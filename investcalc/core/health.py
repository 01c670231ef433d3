"""Health-check status used by the API."""


def get_health_status() -> str:
    """Return the service status string."""
    return "ok"
