"""Permission vocabulary and caller resolution.

The identity provider only tells us who the caller is. What they may change
is decided here, from the Employee record that matches their email.
"""

import enum
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional


class Permission(str, enum.Enum):
    CLIENTS = "clients"
    TEACHERS = "teachers"
    SCHEDULE = "schedule"
    PAYMENTS = "payments"
    SETTINGS = "settings"
    EMPLOYEES = "employees"
    # Stored token meaning "everything"; never checked directly.
    ALL = "all"


GRANTABLE = frozenset(p for p in Permission if p is not Permission.ALL)

# Managers get everything except managing other employees unless it is listed.
MANAGER_DEFAULTS = GRANTABLE - {Permission.EMPLOYEES}

# Token roles that act for the studio itself.
OWNER_ROLES = frozenset({"owner", "service_role"})


@dataclass(frozen=True)
class Caller:
    """An authenticated principal and the permissions it was granted."""

    user_id: str
    permissions: FrozenSet[Permission] = field(default_factory=frozenset)
    email: Optional[str] = None

    def can(self, permission: Permission) -> bool:
        return permission in self.permissions


SYSTEM_CALLER = Caller(user_id="system", permissions=GRANTABLE)


def resolve_permissions(
    role: str, tokens: Iterable[str], *, active: bool = True
) -> FrozenSet[Permission]:
    """Expand an employee's role and stored tokens into granted permissions."""
    if not active:
        return frozenset()

    granted = {Permission(t) for t in tokens if t in Permission._value2member_map_}
    if Permission.ALL in granted:
        return GRANTABLE

    if role == "manager":
        granted |= MANAGER_DEFAULTS
    return frozenset(granted & GRANTABLE)
