from typing import Protocol
from closet.notifications.types import Notification


class NotificationProvider(Protocol):
    def send(self, notification: Notification) -> None:
        ...
