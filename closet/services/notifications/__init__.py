from closet.services.notifications.daily import build_daily_notification, send_daily_outfit
from closet.services.notifications.service import NotificationService

__all__ = ["NotificationService", "build_daily_notification", "send_daily_outfit"]
