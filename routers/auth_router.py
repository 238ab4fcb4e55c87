from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db.database import get_db
from schemas import base, user
from service.user_service import UserService

auth_router = APIRouter(
    prefix='/auth',
    tags=['Auth']
)


@auth_router.post('/register/user', response_model=base.MessageOutputBase, name='Register user', responses={
    409: {
        "description": "A user with the given `username` already exists",
        "content": {
            "application/json": {
                "example": {"detail": "User 'alice' already exists"}
            }
        }
    }
})
def register_user(new_user: user.RegisterUser, db: Session = Depends(get_db)):
    """
    Registers a new customer with the `USER` role.
    """
    user_service = UserService(db)
    return user_service.register_user(new_user)


@auth_router.post('/register/admin', response_model=base.MessageOutputBase, name='Register admin', responses={
    409: {
        "description": "A user with the given `username` already exists",
        "content": {
            "application/json": {
                "example": {"detail": "User 'admin' already exists"}
            }
        }
    }
})
def register_admin(new_user: user.RegisterUser, db: Session = Depends(get_db)):
    """
    Registers a new administrator with the `ADMIN` role.
    """
    user_service = UserService(db)
    return user_service.register_admin(new_user)


@auth_router.post('/login', response_model=user.LoginOutput, name='Login', responses={
    200: {
        "description": "JWT token",
        "content": {
            "application/json": {
                "example": {"token": "token"}
            }
        }
    },
    401: {
        "description": "Wrong username or password",
        "content": {
            "application/json": {
                "example": {"detail": "The username or password is not right"}
            }
        }
    }
})
def login(login_user: user.LoginUser, db: Session = Depends(get_db)):
    """
    Logs in with `username` and `password`.
    Returns a jwt token on success. The token is valid for 24 hours from issue unless configured otherwise.
    """
    user_service = UserService(db)
    return user_service.login(login_user)
