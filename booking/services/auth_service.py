import logging
from dataclasses import dataclass

import jwt
from sqlalchemy.exc import IntegrityError

from booking.auth import jwt_handler, passwords
from booking.core import config
from booking.core.errors import NotFoundError, UnauthorizedError, ValidationError
from booking.models.user import Role, User
from booking.repositories import Store

logger = logging.getLogger(__name__)

VALID_ROLES = {role.value for role in Role}


@dataclass(frozen=True)
class Identity:
    """Who the caller is, as asserted by a verified token."""

    id: int
    role: str


@dataclass(frozen=True)
class TokenSettings:
    secret_key: str
    algorithm: str = 'HS256'
    expires_minutes: int = 60

    @classmethod
    def from_config(cls) -> 'TokenSettings':
        return cls(
            secret_key=config.JWT_SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            expires_minutes=config.JWT_EXPIRES_MINUTES,
        )


class AuthService:
    def __init__(self, users: Store[User], token_settings: TokenSettings, bcrypt_rounds: int):
        self.users = users
        self.token_settings = token_settings
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, username: str, password: str, role: str) -> User:
        if not (username or '').strip() or not password:
            raise ValidationError('Username and password are required.')

        if role not in VALID_ROLES:
            raise ValidationError('Role must be either "student" or "professor".')

        if self.users.find_one(username=username) is not None:
            logger.info('Registration refused, username taken: %s', username)
            raise ValidationError('Username is already taken.')

        try:
            user = self.users.create(
                username=username,
                hashed_password=passwords.hash_password(password, rounds=self.bcrypt_rounds),
                role=role,
            )
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same name.
            raise ValidationError('Username is already taken.') from exc

        logger.info('User registered: id=%s username=%s role=%s', user.id, user.username, user.role)
        return user

    def login(self, username: str, password: str) -> str:
        user = self.users.find_one(username=username)
        if user is None:
            logger.info('Login failed, user not found: %s', username)
            raise NotFoundError('User not found')

        if not passwords.verify_password(password or '', user.hashed_password):
            logger.warning('Login failed, invalid credentials for user: %s', username)
            raise UnauthorizedError('Invalid credentials')

        token = jwt_handler.create_access_token(
            subject=str(user.id),
            role=user.role,
            expires_minutes=self.token_settings.expires_minutes,
            secret_key=self.token_settings.secret_key,
            algorithm=self.token_settings.algorithm,
        )
        logger.info('Token issued for user: %s', username)
        return token

    def verify(self, token: str | None) -> Identity:
        if not token:
            raise UnauthorizedError('Unauthorized')

        try:
            payload = jwt_handler.decode_access_token(
                token,
                secret_key=self.token_settings.secret_key,
                algorithm=self.token_settings.algorithm,
            )
        except jwt.PyJWTError as exc:
            raise UnauthorizedError('Invalid token') from exc

        try:
            user_id = int(payload.get('sub'))
        except (TypeError, ValueError) as exc:
            raise UnauthorizedError('Invalid token subject') from exc

        role = payload.get('role')
        if role not in VALID_ROLES:
            raise UnauthorizedError('Invalid token role')

        return Identity(id=user_id, role=role)
