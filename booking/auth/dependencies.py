from fastapi import Depends
from fastapi.security import APIKeyHeader

from booking.dependencies import get_auth_service
from booking.services.auth_service import AuthService, Identity

# Clients send either the bare token or "Bearer <token>".
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def extract_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, credentials = authorization.strip().partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return authorization.strip()


def get_current_user(
    authorization: str | None = Depends(authorization_header),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity:
    return auth_service.verify(extract_token(authorization))
