import logging

from closet.core.config import settings
from closet.notifications.providers import LogNotificationProvider, NotificationProvider
from closet.notifications.types import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, provider: NotificationProvider | None = None) -> None:
        if provider is not None:
            self.provider = provider
            return
        name = settings.NOTIFY_PROVIDER
        if name != "log":
            logger.warning("unknown notification provider %r, falling back to log", name)
        self.provider = LogNotificationProvider()

    def send(self, notification: Notification) -> None:
        self.provider.send(notification)
