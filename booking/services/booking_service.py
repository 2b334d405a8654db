"""Availability publishing and appointment booking.

A slot moves between two states: free (``is_booked`` false) and booked.
Booking claims exactly one free slot with a conditional update so that two
students racing for the same slot cannot both win. Cancelling frees every slot
the professor published under the same label.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from booking.core.errors import ForbiddenError, NotFoundError, ValidationError
from booking.models.appointment import Appointment
from booking.models.availability import Availability
from booking.models.user import Role
from booking.repositories import Store

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, slots: Store[Availability], appointments: Store[Appointment]):
        self.slots = slots
        self.appointments = appointments

    def publish_availability(self, caller_role: str, professor_id: int, time_slot: str) -> Availability:
        if caller_role != Role.PROFESSOR.value:
            logger.info('Refused to publish availability for role %s', caller_role)
            raise ForbiddenError('Only professors can publish availability.')

        # Labels are opaque: stored exactly as given so booking can match them.
        if not (time_slot or '').strip():
            raise ValidationError('Time slot is required.')

        slot = self.slots.create(professor_id=professor_id, time_slot=time_slot, is_booked=False)
        logger.info('Availability published: id=%s professor=%s slot=%s', slot.id, professor_id, time_slot)
        return slot

    def list_availability(self, professor_id: int) -> list[Availability]:
        return self.slots.find_all(professor_id=professor_id, is_booked=False)

    def _claim_slot(self, professor_id: int, time_slot: str) -> Availability | None:
        while True:
            candidate = self.slots.find_one(professor_id=professor_id, time_slot=time_slot, is_booked=False)
            if candidate is None:
                return None

            claimed = self.slots.update({'is_booked': True}, id=candidate.id, is_booked=False)
            if claimed == 1:
                return candidate
            logger.debug('Slot %s was claimed concurrently, retrying', candidate.id)

    def book_appointment(
        self,
        caller_role: str,
        student_id: int,
        professor_id: int,
        time_slot: str,
    ) -> Appointment:
        if caller_role != Role.STUDENT.value:
            logger.info('Refused to book appointment for role %s', caller_role)
            raise ForbiddenError('Only students can book appointments.')

        slot = self._claim_slot(professor_id, time_slot)
        if slot is None:
            logger.info('Slot not available: professor=%s slot=%s', professor_id, time_slot)
            raise NotFoundError('Slot not available')

        try:
            appointment = self.appointments.create(
                student_id=student_id,
                professor_id=professor_id,
                time_slot=time_slot,
            )
        except SQLAlchemyError:
            self.slots.update({'is_booked': False}, id=slot.id)
            raise

        logger.info(
            'Appointment booked: id=%s student=%s professor=%s slot=%s',
            appointment.id,
            student_id,
            professor_id,
            time_slot,
        )
        return appointment

    def cancel_appointment(self, caller_id: int, appointment_id: int) -> None:
        appointment = self.appointments.find_by_key(appointment_id)
        if appointment is None:
            logger.info('Appointment not found: %s', appointment_id)
            raise NotFoundError('Appointment not found')

        if appointment.professor_id != caller_id:
            logger.warning('User %s may not cancel appointment %s', caller_id, appointment_id)
            raise ForbiddenError('Only the professor of this appointment can cancel it.')

        booked_slots = self.slots.find_all(
            professor_id=appointment.professor_id,
            time_slot=appointment.time_slot,
            is_booked=True,
        )
        booked_ids = [slot.id for slot in booked_slots]
        freed = self.slots.update(
            {'is_booked': False},
            professor_id=appointment.professor_id,
            time_slot=appointment.time_slot,
        )
        try:
            self.appointments.destroy(appointment)
        except SQLAlchemyError:
            for slot_id in booked_ids:
                self.slots.update({'is_booked': True}, id=slot_id)
            raise
        logger.info('Appointment cancelled: id=%s, %s slot(s) freed', appointment_id, freed)

    def list_my_appointments(self, student_id: int) -> list[Appointment]:
        return self.appointments.find_all(student_id=student_id)
