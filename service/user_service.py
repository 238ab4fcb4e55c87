import logging

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from db.models import Role
from exceptions import DuplicateIdentity, InvalidCredentials
from repository.user_repository import UserRepository
from schemas.base import MessageOutputBase
from schemas.user import UserBase, LoginUser, LoginOutput, RegisterUser
from util import encode_jwt

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=['pbkdf2_sha256'], deprecated='auto')


def _hash_password(password: str) -> str:
    """
    Hashes a user's password. Only the hash is ever stored.
    """
    return pwd_context.hash(password)


def _verify_password(password: str, hashed_password: str) -> bool:
    return pwd_context.verify(password, hashed_password)


class UserService:
    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def register(self, new_user: RegisterUser, role: Role) -> UserBase:
        if self.repository.exist_by_username(new_user.username):
            raise DuplicateIdentity(new_user.username)

        user = self.repository.create(username=new_user.username,
                                      hashed_password=_hash_password(new_user.password),
                                      role=role.value,
                                      email=new_user.email)
        logger.info(f"Registered '{user.username}' as {user.role}")

        return user

    def register_user(self, new_user: RegisterUser) -> MessageOutputBase:
        self.register(new_user, Role.USER)
        return MessageOutputBase(message='User registered successfully')

    def register_admin(self, new_user: RegisterUser) -> MessageOutputBase:
        self.register(new_user, Role.ADMIN)
        return MessageOutputBase(message='Admin registered successfully')

    def find_by_username(self, username: str):
        return self.repository.get_by_username(username)

    def login(self, login_user: LoginUser) -> LoginOutput:
        user = self.repository.get_by_username(login_user.username)

        if not user:
            # same hashing cost as a wrong password, so timing does not reveal usernames
            pwd_context.dummy_verify()
            logger.warning(f"Failed login for '{login_user.username}'")
            raise InvalidCredentials()

        if not _verify_password(login_user.password, user.password):
            logger.warning(f"Failed login for '{login_user.username}'")
            raise InvalidCredentials()

        token = encode_jwt(user.id, user.username, user.role)
        return LoginOutput(token=token)
