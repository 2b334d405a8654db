from datetime import datetime

from fastapi import APIRouter, Depends, Path, status
from pydantic import Field

from booking.auth.dependencies import get_current_user
from booking.core.schemas import MAX_ID, ApiModel
from booking.dependencies import get_booking_service
from booking.services.auth_service import Identity
from booking.services.booking_service import BookingService

router = APIRouter(tags=['appointments'])


class CreateAppointmentRequest(ApiModel):
    professor_id: int = Field(le=MAX_ID)
    time_slot: str


class AppointmentResponse(ApiModel):
    id: int
    student_id: int
    professor_id: int
    time_slot: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@router.post('', response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def book_appointment(
    data: CreateAppointmentRequest,
    current_user: Identity = Depends(get_current_user),
    booking_service: BookingService = Depends(get_booking_service),
):
    return booking_service.book_appointment(
        caller_role=current_user.role,
        student_id=current_user.id,
        professor_id=data.professor_id,
        time_slot=data.time_slot,
    )


@router.delete('/{appointment_id}', status_code=status.HTTP_204_NO_CONTENT)
def cancel_appointment(
    appointment_id: int = Path(..., le=MAX_ID),
    current_user: Identity = Depends(get_current_user),
    booking_service: BookingService = Depends(get_booking_service),
):
    booking_service.cancel_appointment(caller_id=current_user.id, appointment_id=appointment_id)


@router.get('', response_model=list[AppointmentResponse])
def list_my_appointments(
    current_user: Identity = Depends(get_current_user),
    booking_service: BookingService = Depends(get_booking_service),
):
    return booking_service.list_my_appointments(current_user.id)
