import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from db.models import AppointmentStatus
from exceptions import NotFound, AlreadyDecided
from repository.appointment_repository import AppointmentRepository
from schemas.appointment import AppointmentBase, AdminAppointmentOutput, BookAppointmentInput
from schemas.base import MessageOutputBase
from schemas.notification import DashboardOutput
from schemas.user import TokenPayload
from service.notification_service import NotificationService

logger = logging.getLogger(__name__)


class AppointmentService:
    def __init__(self, session: Session):
        self.session = session
        self.repository = AppointmentRepository(session)
        self.notification_service = NotificationService(session)

    def book(self, current_user: TokenPayload, new_appointment: BookAppointmentInput) -> AppointmentBase:
        appointment = self.repository.create(user_id=current_user.id,
                                             service_type=new_appointment.service_type,
                                             appointment_time=new_appointment.appointment_time)
        logger.info(f"Appointment {appointment.id} booked by '{current_user.username}'")

        return appointment

    def book_appointment(self, current_user: TokenPayload,
                         new_appointment: BookAppointmentInput) -> MessageOutputBase:
        self.book(current_user, new_appointment)
        return MessageOutputBase(message='Appointment booked, awaiting approval')

    def get_dashboard(self, current_user: TokenPayload) -> DashboardOutput:
        return DashboardOutput(
            appointments=self.repository.get_by_user_id(current_user.id),
            notifications=self.notification_service.list_unread(current_user.id)
        )

    def get_pending(self) -> List[Optional[AdminAppointmentOutput]]:
        return self.repository.get_by_status(AppointmentStatus.PENDING)

    def transition(self, appointment_id: int, new_status: AppointmentStatus) -> AdminAppointmentOutput:
        appointment = self.repository.get_by_id(appointment_id)

        if not appointment:
            raise NotFound('Appointment not found')

        if appointment.status != AppointmentStatus.PENDING.value:
            raise AlreadyDecided(appointment_id, appointment.status)

        # status change and notification are committed together
        try:
            self.repository.set_status(appointment, new_status)
            self.notification_service.stage(appointment.user_id, f'Your appointment is {new_status.value}')
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(appointment)
        logger.info(f'Appointment {appointment_id} is {new_status.value}')

        return AdminAppointmentOutput(**appointment.__dict__)
