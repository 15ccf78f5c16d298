import boto3

from boat_rental.shared.config import Settings

_secret_cache: str | None = None


def get_webhook_secret(settings: Settings) -> str:
    """Webhook 署名用の共有シークレットを返す

    WEBHOOK_SECRET があればそれを使い、なければ Secrets Manager から取得して
    コンテナ内でキャッシュする。
    """
    global _secret_cache
    if settings.webhook_secret:
        return settings.webhook_secret
    if _secret_cache is None:
        if not settings.webhook_secret_arn:
            raise RuntimeError("WEBHOOK_SECRET or WEBHOOK_SECRET_ARN must be set")
        client = boto3.client("secretsmanager")
        response = client.get_secret_value(SecretId=settings.webhook_secret_arn)
        _secret_cache = response["SecretString"]
    return _secret_cache
