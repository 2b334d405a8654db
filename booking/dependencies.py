from fastapi import Depends
from sqlalchemy.orm import Session

from booking.core import config
from booking.database import get_db
from booking.models.appointment import Appointment
from booking.models.availability import Availability
from booking.models.user import User
from booking.repositories import Store
from booking.services.auth_service import AuthService, TokenSettings
from booking.services.booking_service import BookingService


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(
        users=Store(db, User),
        token_settings=TokenSettings.from_config(),
        bcrypt_rounds=config.BCRYPT_ROUNDS,
    )


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    return BookingService(
        slots=Store(db, Availability),
        appointments=Store(db, Appointment),
    )
