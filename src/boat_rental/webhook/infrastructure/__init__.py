from .secret_provider import get_webhook_secret as get_webhook_secret
