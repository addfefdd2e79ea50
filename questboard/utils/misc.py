import datetime


def get_utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


def get_utc_iso_now() -> str:
    return get_utc_now().isoformat()


def get_greeting(hour: int | None = None) -> str:
    """Time-of-day greeting shown above the user card."""
    if hour is None:
        hour = datetime.datetime.now().hour

    if hour < 5:
        return "Night owl still awake? 🦉"
    if hour < 12:
        return "Good morning"
    if hour < 17:
        return "Good afternoon"
    if hour < 21:
        return "Good evening"
    return "Good night"


def format_relative_time(
    timestamp: datetime.datetime, now: datetime.datetime | None = None
) -> str:
    """Format a past timestamp as "5m ago", "3h ago", "2d ago" or "Mar 4"."""
    now = now or get_utc_now()
    minutes = int((now - timestamp).total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    return f"{timestamp:%b} {timestamp.day}"
