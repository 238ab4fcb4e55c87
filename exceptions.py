from fastapi import HTTPException
from starlette import status


class DuplicateIdentity(HTTPException):
    def __init__(self, username: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=f"User '{username}' already exists")


class DuplicateService(HTTPException):
    def __init__(self, name: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT,
                         detail=f"Service's name must be unique. '{name}' already exists")


class InvalidCredentials(HTTPException):
    def __init__(self):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail='The username or password is not right')


class Unauthorized(HTTPException):
    def __init__(self, detail: str = 'Not authenticated'):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail,
                         headers={'WWW-Authenticate': 'Bearer'})


class Forbidden(HTTPException):
    def __init__(self, detail: str = 'Not enough permissions'):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class AlreadyDecided(HTTPException):
    """
    Raised when an administrator tries to approve or reject an appointment that is no longer PENDING.
    """

    def __init__(self, appointment_id: int, current_status: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT,
                         detail=f'Appointment {appointment_id} is already {current_status}')
