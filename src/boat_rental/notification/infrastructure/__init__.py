from .logging_notification_sink import (
    LoggingNotificationSink as LoggingNotificationSink,
)
