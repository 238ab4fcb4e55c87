from auth.permissions import authorize, Allowed, Denied
from db.models import Role
from schemas.user import TokenPayload


class TestAuthorize:
    def test_authorize_should_allow_matching_role(self):
        principal = TokenPayload(id=2, username='admin', role='ADMIN', exp=0)

        decision = authorize(principal, Role.ADMIN)

        assert decision == Allowed(principal=principal)

    def test_authorize_should_deny_other_role(self):
        principal = TokenPayload(id=1, username='alice', role='USER', exp=0)

        decision = authorize(principal, Role.ADMIN)

        assert isinstance(decision, Denied)
        assert decision.reason == 'Only ADMIN can access this resource'
