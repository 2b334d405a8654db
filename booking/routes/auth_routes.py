from datetime import datetime

from fastapi import APIRouter, Depends, status

from booking.core.schemas import ApiModel
from booking.dependencies import get_auth_service
from booking.services.auth_service import AuthService

router = APIRouter(tags=['auth'])


class RegisterRequest(ApiModel):
    username: str
    password: str
    role: str


class LoginRequest(ApiModel):
    username: str
    password: str


class UserResponse(ApiModel):
    id: int
    username: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TokenResponse(ApiModel):
    token: str
    token_type: str = 'bearer'


@router.post('/register', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    return auth_service.register(data.username, data.password, data.role)


@router.post('/login', response_model=TokenResponse)
def login(data: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    token = auth_service.login(data.username, data.password)
    return TokenResponse(token=token)
