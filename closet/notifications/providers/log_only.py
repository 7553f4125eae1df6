import logging
from closet.notifications.types import Notification


class LogNotificationProvider:
    def send(self, notification: Notification) -> None:
        logging.getLogger("closet.notifications").info(
            "notify %s %s | %s", notification.user_id, notification.title, notification.body
        )
