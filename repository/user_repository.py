from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from db.models import User
from exceptions import DuplicateIdentity
from schemas.user import UserBase
from typing import List, Optional, Type


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Optional[UserBase]]:
        users = self.session.query(User).order_by(User.id).all()
        return [UserBase(**user.__dict__) for user in users]

    def get_by_id(self, _id: int) -> Optional[Type[User]]:
        return self.session.query(User).filter_by(id=_id).first()

    def get_by_username(self, username: str) -> Optional[Type[User]]:
        return self.session.query(User).filter_by(username=username).first()

    def exist_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def create(self, username: str, hashed_password: str, role: str, email: Optional[str] = None) -> UserBase:
        user = User(username=username, password=hashed_password, role=role, email=email)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            # lost a race with a concurrent registration of the same username
            self.session.rollback()
            raise DuplicateIdentity(username)
        self.session.refresh(user)

        return UserBase(**user.__dict__)

    def update_role(self, user: Type[User], role: str) -> UserBase:
        user.role = role
        self.session.commit()
        self.session.refresh(user)

        return UserBase(**user.__dict__)
