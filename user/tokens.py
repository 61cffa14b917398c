"""
Signed bearer tokens.

Tokens are HS256 JWTs carrying the caller's id, username and roles. Verifying
one never touches the database, so a token for a deleted user keeps working
until it expires.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from storefront.errors import InvalidToken, TokenExpired

from .models import Role

DEFAULT_TTL_SECONDS = 86400


@dataclass(frozen=True)
class Credential:
    user_id: int
    username: str
    roles: frozenset
    issued_at: datetime
    expires_at: datetime

    # lets DRF treat the credential as request.user
    is_authenticated = True

    def has_role(self, role):
        return Role(role) in self.roles


class TokenIssuer:
    algorithm = "HS256"

    def __init__(self, secret, ttl_seconds=DEFAULT_TTL_SECONDS, clock=None):
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.ttl_seconds = ttl_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, payload, ttl_seconds=None):
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        issued_at = self._clock()
        claims = dict(payload)
        claims["iat"] = issued_at
        claims["exp"] = issued_at + timedelta(seconds=ttl)
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token):
        """
        Check the signature and decode the claims into a Credential.

        Expiry is judged against the issuer's clock, the same one ``issue``
        stamps tokens with.
        """
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidToken("Token is invalid") from exc

        try:
            credential = Credential(
                user_id=claims["id"],
                username=claims["username"],
                roles=frozenset(Role(r) for r in claims["roles"]),
                issued_at=datetime.fromtimestamp(claims["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError, OverflowError, OSError) as exc:
            raise InvalidToken("Token payload is malformed") from exc

        if self._clock() > credential.expires_at:
            raise TokenExpired("Token has expired")
        return credential
