import base64
import hashlib
import hmac


def sign(secret: str, raw_body: bytes) -> str:
    """HMAC-SHA256(secret, raw_body) を Base64 で返す"""
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_signature(secret: str, raw_body: bytes, signature: str | None) -> bool:
    """署名を定数時間で比較する"""
    if not signature:
        return False
    return hmac.compare_digest(sign(secret, raw_body), signature)
