from datetime import datetime

from fastapi import APIRouter, Depends, Path, status

from booking.auth.dependencies import get_current_user
from booking.core.schemas import MAX_ID, ApiModel
from booking.dependencies import get_booking_service
from booking.services.auth_service import Identity
from booking.services.booking_service import BookingService

router = APIRouter(tags=['availability'])


class CreateAvailabilityRequest(ApiModel):
    time_slot: str


class AvailabilitySlotResponse(ApiModel):
    id: int
    professor_id: int
    time_slot: str
    is_booked: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


@router.post('', response_model=AvailabilitySlotResponse, status_code=status.HTTP_201_CREATED)
def publish_availability(
    data: CreateAvailabilityRequest,
    current_user: Identity = Depends(get_current_user),
    booking_service: BookingService = Depends(get_booking_service),
):
    return booking_service.publish_availability(
        caller_role=current_user.role,
        professor_id=current_user.id,
        time_slot=data.time_slot,
    )


@router.get(
    '/{professor_id}',
    response_model=list[AvailabilitySlotResponse],
    dependencies=[Depends(get_current_user)],
)
def list_availability(
    professor_id: int = Path(..., le=MAX_ID),
    booking_service: BookingService = Depends(get_booking_service),
):
    return booking_service.list_availability(professor_id)
