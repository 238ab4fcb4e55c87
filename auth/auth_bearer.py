import logging
from typing import Annotated, Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from exceptions import Unauthorized
from schemas.user import TokenPayload
from util import decode_jwt

logger = logging.getLogger(__name__)


class JWTBearer(HTTPBearer):
    """
    Requires a valid `Authorization: Bearer <token>` header and returns the decoded token payload.

    Missing header, wrong scheme, bad signature, malformed payload and expired token all end in 401.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> dict:
        credentials: HTTPAuthorizationCredentials = await super().__call__(request)

        if not credentials:
            raise Unauthorized()

        if credentials.scheme.lower() != 'bearer':
            raise Unauthorized('Invalid authentication scheme')

        payload = self.verify_jwt(credentials.credentials, request.url.path)
        if payload is None:
            raise Unauthorized('Invalid or expired token')

        return payload

    @staticmethod
    def verify_jwt(token: str, path: str) -> Optional[dict]:
        try:
            payload = decode_jwt(token)
        except jwt.ExpiredSignatureError:
            logger.warning(f'Expired token rejected for {path}')
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f'Invalid token rejected for {path}: {e}')
            return None

        if not all(key in payload for key in ('id', 'username', 'role', 'exp')):
            logger.warning(f'Token with incomplete payload rejected for {path}')
            return None

        return payload


def get_current_user(payload: Annotated[dict, Depends(JWTBearer())]) -> TokenPayload:
    """
    Resolves the principal of the request from its already verified bearer token.
    """
    return TokenPayload(**payload)
