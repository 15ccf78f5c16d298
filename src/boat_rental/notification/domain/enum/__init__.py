from .notification_role import NotificationRole as NotificationRole
