"""
Notification queue for editor feedback.

The editor pushes notifications as things succeed or fail; the view that
owns the request drains them into Django's messages framework:

    session.save()
    flush_to_messages(session.notifications, request)
"""
from collections import deque
from dataclasses import dataclass

from django.contrib import messages

SUCCESS = "success"
INFO = "info"
WARNING = "warning"
ERROR = "error"

MESSAGE_LEVELS = {
    SUCCESS: messages.SUCCESS,
    INFO: messages.INFO,
    WARNING: messages.WARNING,
    ERROR: messages.ERROR,
}


@dataclass(frozen=True)
class Notification:
    title: str
    description: str = ""
    level: str = INFO

    def __str__(self):
        if self.description:
            return f"{self.title}: {self.description}"
        return self.title


class NotificationQueue:
    """First-in first-out queue of notifications."""

    def __init__(self):
        self._items = deque()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def push(self, title, description="", level=INFO):
        if level not in MESSAGE_LEVELS:
            raise ValueError(f"Unknown notification level: {level}")
        notification = Notification(title=title, description=description, level=level)
        self._items.append(notification)
        return notification

    def success(self, description, title="Success"):
        return self.push(title, description, SUCCESS)

    def info(self, description, title="Info"):
        return self.push(title, description, INFO)

    def error(self, description, title="Error"):
        return self.push(title, description, ERROR)

    def drain(self):
        """Remove and return all queued notifications, oldest first."""
        items = list(self._items)
        self._items.clear()
        return items


def flush_to_messages(queue, request):
    """Move queued notifications into the request's messages storage."""
    count = 0
    for notification in queue.drain():
        messages.add_message(
            request,
            MESSAGE_LEVELS[notification.level],
            str(notification),
        )
        count += 1
    return count
