import base64
import hashlib
import hmac

from boat_rental.webhook.domain import sign, verify_signature

SECRET = "shared-secret"
BODY = b'{"transactionCode":"PSB_abc","status":3}'


class TestSignature:
    def test_sign_is_base64_hmac_sha256(self):
        expected = base64.b64encode(
            hmac.new(SECRET.encode(), BODY, hashlib.sha256).digest()
        ).decode()
        assert sign(SECRET, BODY) == expected

    def test_valid_signature(self):
        assert verify_signature(SECRET, BODY, sign(SECRET, BODY))

    def test_tampered_body_is_rejected(self):
        assert not verify_signature(SECRET, BODY + b" ", sign(SECRET, BODY))

    def test_wrong_secret_is_rejected(self):
        assert not verify_signature(SECRET, BODY, sign("other", BODY))

    def test_missing_signature_is_rejected(self):
        assert not verify_signature(SECRET, BODY, None)
        assert not verify_signature(SECRET, BODY, "")
