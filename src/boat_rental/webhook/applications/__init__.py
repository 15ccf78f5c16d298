from .handle_gateway_notification import WebhookHandler as WebhookHandler
