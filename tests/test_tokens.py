from datetime import datetime, timedelta, timezone

import jwt
import pytest

from storefront.errors import InvalidToken, TokenExpired
from user.models import Role
from user.tokens import Credential, TokenIssuer

PAYLOAD = {"id": 7, "username": "alice", "roles": ["user"]}


@pytest.fixture
def issuer():
    return TokenIssuer("unit-test-secret")


class TestIssue:
    def test_round_trips_payload_into_credential(self, issuer):
        credential = issuer.verify(issuer.issue(PAYLOAD))

        assert isinstance(credential, Credential)
        assert credential.user_id == 7
        assert credential.username == "alice"
        assert credential.roles == frozenset({Role.USER})

    def test_expiry_is_ttl_after_issuance(self, issuer):
        credential = issuer.verify(issuer.issue(PAYLOAD))

        assert credential.expires_at - credential.issued_at == timedelta(seconds=86400)

    def test_custom_ttl(self, issuer):
        credential = issuer.verify(issuer.issue(PAYLOAD, ttl_seconds=60))

        assert credential.expires_at - credential.issued_at == timedelta(seconds=60)

    def test_secret_is_required(self):
        with pytest.raises(ValueError):
            TokenIssuer("")


class TestVerify:
    def test_expired_token(self, issuer):
        two_days_ago = datetime.now(timezone.utc) - timedelta(days=2)
        token = TokenIssuer("unit-test-secret", clock=lambda: two_days_ago).issue(PAYLOAD)

        with pytest.raises(TokenExpired):
            issuer.verify(token)

    def test_expiry_follows_the_issuer_clock(self):
        now = {"at": datetime(2020, 1, 1, tzinfo=timezone.utc)}
        issuer = TokenIssuer("unit-test-secret", ttl_seconds=60, clock=lambda: now["at"])
        token = issuer.issue(PAYLOAD)

        # long past by wall-clock time, still fresh for the issuer
        assert issuer.verify(token).user_id == 7

        now["at"] += timedelta(seconds=59)
        assert issuer.verify(token).username == "alice"

        now["at"] += timedelta(seconds=2)
        with pytest.raises(TokenExpired):
            issuer.verify(token)

    def test_wrong_signature(self, issuer):
        token = TokenIssuer("another-secret").issue(PAYLOAD)

        with pytest.raises(InvalidToken):
            issuer.verify(token)

    def test_garbage(self, issuer):
        with pytest.raises(InvalidToken):
            issuer.verify("not-a-token")

    def test_unknown_role_is_rejected(self, issuer):
        token = issuer.issue({"id": 1, "username": "mallory", "roles": ["superadmin"]})

        with pytest.raises(InvalidToken):
            issuer.verify(token)

    def test_missing_claims_are_rejected(self, issuer):
        token = issuer.issue({"username": "nobody"})

        with pytest.raises(InvalidToken):
            issuer.verify(token)

    def test_token_without_expiry_is_rejected(self, issuer):
        token = jwt.encode({**PAYLOAD, "iat": 0}, "unit-test-secret", algorithm="HS256")

        with pytest.raises(InvalidToken):
            issuer.verify(token)
