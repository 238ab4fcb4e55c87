from typing import List

from fastapi import APIRouter, Depends
from fastapi.params import Path
from sqlalchemy.orm import Session
from starlette import status

from auth.permissions import require_role
from db.database import get_db
from db.models import Role
from schemas import appointment, base, salon_service, user
from service.admin_service import AdminService
from service.catalog_service import CatalogService

admin_router = APIRouter(
    prefix='/admin',
    tags=['Admin'],
    dependencies=[Depends(require_role(Role.ADMIN))],
    responses={
        401: {
            "description": "Missing, invalid or expired token",
            "content": {
                "application/json": {
                    "example": {"detail": "Not authenticated"}
                }
            }
        },
        403: {
            "description": "The current user is not an ADMIN",
            "content": {
                "application/json": {
                    "example": {"detail": "Only ADMIN can access this resource"}
                }
            }
        }
    }
)


@admin_router.get('/users', response_model=List[user.UserBase], name='List users')
def get_users(db: Session = Depends(get_db)):
    admin_service = AdminService(db)
    return admin_service.list_users()


@admin_router.put('/users/{user_id}/grant-access', response_model=user.UserBase, name='Grant access', responses={
    404: {
        "description": "No user with `user_id`",
        "content": {
            "application/json": {
                "example": {"detail": "User with 1 not found"}
            }
        }
    }
})
def grant_access(grant_access_request: user.GrantAccessInput,
                 db: Session = Depends(get_db),
                 user_id: int = Path(..., description='`id` of the user whose role changes')):
    """
    Overwrites the role of a user. The role must be `USER` or `ADMIN`.
    """
    admin_service = AdminService(db)
    return admin_service.grant_access(user_id, grant_access_request.role)


@admin_router.put('/appointments/{appointment_id}/approve', response_model=base.MessageOutputBase,
                  name='Decide appointment', responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"message": "Appointment updated"}
                }
            }
        },
        404: {
            "description": "No appointment with `appointment_id`",
            "content": {
                "application/json": {
                    "example": {"detail": "Appointment not found"}
                }
            }
        },
        409: {
            "description": "The appointment is already APPROVED or REJECTED",
            "content": {
                "application/json": {
                    "example": {"detail": "Appointment 1 is already APPROVED"}
                }
            }
        }
    })
def decide_appointment(decision: appointment.AppointmentDecisionInput,
                       db: Session = Depends(get_db),
                       appointment_id: int = Path(..., description='`id` of the appointment to decide')):
    """
    Approves or rejects a pending appointment and notifies its owner.
    """
    admin_service = AdminService(db)
    return admin_service.decide_appointment(appointment_id, decision)


@admin_router.get('/appointments/pending', response_model=List[appointment.AdminAppointmentOutput],
                  name='Pending appointments')
def get_pending_appointments(db: Session = Depends(get_db)):
    admin_service = AdminService(db)
    return admin_service.list_pending_appointments()


@admin_router.post('/services', response_model=salon_service.SalonServiceBase, status_code=status.HTTP_201_CREATED,
                   name='Create service', responses={
        409: {
            "description": "A service with the given `name` already exists",
            "content": {
                "application/json": {
                    "example": {"detail": "Service's name must be unique. 'Haircut' already exists"}
                }
            }
        }
    })
def create_service(create_service_request: salon_service.CreateSalonService, db: Session = Depends(get_db)):
    """
    Adds a service to the catalog. Names must be unique.
    """
    catalog_service = CatalogService(db)
    return catalog_service.create_service(create_service_request)
