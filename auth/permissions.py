"""
Role based access checks.

`authorize` answers with an explicit `Allowed` / `Denied` value; `require_role` turns it into a FastAPI
dependency that stops the request with 403 before the route handler runs.
"""
import logging
from dataclasses import dataclass
from typing import Annotated, Union

from fastapi import Depends

from db.models import Role
from exceptions import Forbidden
from schemas.user import TokenPayload
from auth.auth_bearer import get_current_user

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allowed:
    principal: TokenPayload


@dataclass(frozen=True)
class Denied:
    reason: str


Decision = Union[Allowed, Denied]


def authorize(principal: TokenPayload, required_role: Role) -> Decision:
    if principal.role != required_role.value:
        return Denied(reason=f'Only {required_role.value} can access this resource')

    return Allowed(principal=principal)


def require_role(required_role: Role):
    def check_role(current_user: Annotated[TokenPayload, Depends(get_current_user)]) -> TokenPayload:
        decision = authorize(current_user, required_role)

        if isinstance(decision, Denied):
            logger.warning(f"User '{current_user.username}' denied: {decision.reason}")
            raise Forbidden(decision.reason)

        return decision.principal

    return check_role
