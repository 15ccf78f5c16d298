from .notification_sink import NotificationSink as NotificationSink
