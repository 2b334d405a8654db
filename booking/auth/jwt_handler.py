from datetime import datetime, timedelta, timezone

import jwt

from booking.core import config

def create_access_token(
    subject: str,
    role: str,
    expires_minutes: int | None = None,
    secret_key: str | None = None,
    algorithm: str | None = None,
) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=expire_minutes)
    payload = {"sub": subject, "role": role, "exp": expire, "iat": issued_at}
    return jwt.encode(
        payload,
        secret_key or config.JWT_SECRET_KEY,
        algorithm=algorithm or config.JWT_ALGORITHM,
    )


def decode_access_token(
    token: str,
    secret_key: str | None = None,
    algorithm: str | None = None,
) -> dict:
    return jwt.decode(
        token,
        secret_key or config.JWT_SECRET_KEY,
        algorithms=[algorithm or config.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
