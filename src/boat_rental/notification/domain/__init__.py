from .enum import NotificationRole as NotificationRole
from .service import NotificationSink as NotificationSink
