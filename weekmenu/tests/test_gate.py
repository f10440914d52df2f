import pytest

from weekmenu.domain.errors import AuthenticationError, AuthorizationError
from weekmenu.domain.User import User
from weekmenu.logic.auth.gate import CREATE, DELETE, UPDATE, AuthorizationGate

gate = AuthorizationGate()

OWNER = "owner-1"
OTHER = "someone-else"


def _user(role, user_id=OWNER, active=True):
    return User(id=user_id, username=f"{role}_x", role=role, is_active=active)


@pytest.mark.parametrize("role, action, owner, allowed", [
    ("user", CREATE, None, False),
    ("user", UPDATE, OWNER, False),
    ("chef", CREATE, None, True),
    ("chef", UPDATE, OWNER, True),
    ("chef", UPDATE, OTHER, False),
    ("chef", DELETE, OWNER, True),
    ("chef", DELETE, OTHER, False),
    ("nutritionist", CREATE, None, True),
    ("nutritionist", UPDATE, OTHER, True),
    ("nutritionist", DELETE, OTHER, True),
    ("admin", CREATE, None, False),
    ("admin", UPDATE, OTHER, True),
    ("admin", DELETE, OTHER, True),
])
def test_capability_matrix(role, action, owner, allowed):
    assert gate.can(_user(role), action, owner_id=owner) is allowed


def test_require_returns_user_when_allowed():
    user = _user("chef")
    assert gate.require(user, UPDATE, owner_id=OWNER) is user


def test_require_without_user_is_authentication_error():
    with pytest.raises(AuthenticationError):
        gate.require(None, CREATE)


def test_inactive_account_is_refused():
    with pytest.raises(AuthorizationError):
        gate.require(_user("nutritionist", active=False), CREATE)


def test_refusal_raises_authorization_error():
    with pytest.raises(AuthorizationError):
        gate.require(_user("chef"), DELETE, owner_id=OTHER)


def test_is_author():
    assert gate.is_author(_user("chef"))
    assert gate.is_author(_user("nutritionist"))
    assert not gate.is_author(_user("admin"))
    assert not gate.is_author(None)
