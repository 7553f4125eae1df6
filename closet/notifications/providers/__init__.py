from closet.notifications.providers.base import NotificationProvider
from closet.notifications.providers.log_only import LogNotificationProvider

__all__ = [
    "NotificationProvider",
    "LogNotificationProvider",
]
