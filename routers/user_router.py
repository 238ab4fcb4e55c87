from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from auth.auth_bearer import get_current_user
from db.database import get_db
from schemas import appointment, base, notification, user
from service.appointment_service import AppointmentService

user_router = APIRouter(
    prefix='/user',
    tags=['User']
)


@user_router.post('/appointments', response_model=base.MessageOutputBase, name='Book appointment', responses={
    200: {
        "content": {
            "application/json": {
                "example": {"message": "Appointment booked, awaiting approval"}
            }
        }
    },
    401: {
        "description": "Missing, invalid or expired token",
        "content": {
            "application/json": {
                "example": {"detail": "Not authenticated"}
            }
        }
    }
})
def book_appointment(current_user: Annotated[user.TokenPayload, Depends(get_current_user)],
                     book_appointment_request: appointment.BookAppointmentInput,
                     db: Session = Depends(get_db)):
    """
    Books an appointment for the current user. The appointment waits as `PENDING` until an administrator decides it.
    """
    appointment_service = AppointmentService(db)
    return appointment_service.book_appointment(current_user, book_appointment_request)


@user_router.get('/dashboard', response_model=notification.DashboardOutput, name='Dashboard')
def get_dashboard(current_user: Annotated[user.TokenPayload, Depends(get_current_user)],
                  db: Session = Depends(get_db)):
    """
    Returns the current user's appointments and unread notifications.
    Listed notifications are marked as read, so they are not returned again.
    """
    appointment_service = AppointmentService(db)
    return appointment_service.get_dashboard(current_user)
