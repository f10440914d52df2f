"""Authorization gate.

One capability table replaces per-handler role comparisons. A capability is
an (action, scope) pair; scope "own" lets a caller act on resources they
created, scope "any" on every resource.
"""
import logging
from typing import Dict, FrozenSet, Optional, Tuple

from weekmenu.domain.errors import AuthenticationError, AuthorizationError
from weekmenu.domain.User import User
from weekmenu.utilities.constants import (
    ERROR_MESSAGES, ROLE_ADMIN, ROLE_CHEF, ROLE_NUTRITIONIST, ROLE_USER,
)

logger = logging.getLogger(__name__)

CREATE = "create"
UPDATE = "update"
DELETE = "delete"

OWN = "own"
ANY = "any"

Capability = Tuple[str, str]

ROLE_CAPABILITIES: Dict[str, FrozenSet[Capability]] = {
    ROLE_USER: frozenset(),
    ROLE_CHEF: frozenset({(CREATE, ANY), (UPDATE, OWN), (DELETE, OWN)}),
    ROLE_NUTRITIONIST: frozenset({(CREATE, ANY), (UPDATE, ANY), (DELETE, ANY)}),
    ROLE_ADMIN: frozenset({(UPDATE, ANY), (DELETE, ANY)}),
}


class AuthorizationGate:
    def __init__(self, capabilities: Optional[Dict[str, FrozenSet[Capability]]] = None):
        self.capabilities = capabilities if capabilities is not None else ROLE_CAPABILITIES

    def can(self, user: User, action: str, owner_id: Optional[str] = None) -> bool:
        granted = self.capabilities.get(user.role, frozenset())
        if (action, ANY) in granted:
            return True
        if owner_id is None:
            # creation has no owner yet
            return False
        return (action, OWN) in granted and owner_id == user.id

    def require(self, user: Optional[User], action: str, owner_id: Optional[str] = None) -> User:
        """Return the user if allowed, otherwise raise AuthenticationError/AuthorizationError."""
        if user is None:
            raise AuthenticationError()
        if not user.is_active:
            raise AuthorizationError(ERROR_MESSAGES["ACCOUNT_DISABLED"])
        if not self.can(user, action, owner_id):
            logger.warning("Refused %s for user=%s role=%s owner=%s", action, user.id, user.role, owner_id)
            raise AuthorizationError()
        return user

    def is_author(self, user: Optional[User]) -> bool:
        """True for roles that may author content (nutritionist, chef)."""
        return user is not None and user.role in (ROLE_NUTRITIONIST, ROLE_CHEF)


DEFAULT_GATE = AuthorizationGate()

__all__ = ['AuthorizationGate', 'DEFAULT_GATE', 'ROLE_CAPABILITIES', 'CREATE', 'UPDATE', 'DELETE', 'OWN', 'ANY']
