from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from db.models import Role


class UserBase(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    username: str
    email: Optional[str] = None
    role: str


class RegisterUser(BaseModel):
    model_config = ConfigDict(extra='ignore')

    username: str = Field(min_length=1, description='Login name. Must be unique', examples=['alice'])
    password: str = Field(min_length=1, description='Plain password. Only its hash is stored', examples=['pw1'])
    email: Optional[str] = Field(default=None, examples=['alice@example.com'])


class LoginUser(BaseModel):
    model_config = ConfigDict(extra='ignore')

    username: str
    password: str


class LoginOutput(BaseModel):
    model_config = ConfigDict(extra='ignore')

    token: str


class TokenPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    username: str
    role: str
    exp: int


class GrantAccessInput(BaseModel):
    model_config = ConfigDict(extra='ignore')

    role: Role = Field(description='New role of the user', examples=['ADMIN'])
