"""
Bearer token validation.
"""

import logging
from typing import Mapping, Optional

import jwt

from ...core.config import AuthConfig
from ...core.errors import Unauthorized
from ..domain.interfaces import TokenValidator


def get_bearer_token(headers: Mapping[str, str]) -> str:
    """Extract the token from an 'Authorization: Bearer <token>' header"""
    authorization = headers.get("authorization") or headers.get("Authorization")
    if not authorization:
        raise Unauthorized("Authorization header is missing")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthorized("Malformed authorization header")
    return token.strip()


class JWTTokenValidator(TokenValidator):
    """HS256 JWTs whose subject is the user ID"""

    algorithm = "HS256"

    def __init__(self, auth_config: AuthConfig):
        self.secret = auth_config.jwt_secret
        self.issuer: Optional[str] = auth_config.jwt_issuer
        self.logger = logging.getLogger(__name__)

        if not self.secret:
            self.logger.warning("JWT secret is empty - every token will be rejected")

    def validate(self, token: str) -> str:
        if not self.secret:
            raise Unauthorized("Couldn't validate credentials")

        options = {"require": ["exp", "sub"]}
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm], issuer=self.issuer, options=options)
        except jwt.InvalidTokenError as e:
            self.logger.debug(f"Rejected token: {e}")
            raise Unauthorized("Couldn't validate credentials") from e

        return str(claims["sub"])
