"""Map an authenticated identity onto studio permissions."""

from libs.auth.models import AuthUser
from libs.auth.permissions import (
    GRANTABLE,
    OWNER_ROLES,
    Caller,
    resolve_permissions,
)
from libs.common.logging import get_logger
from services.employees_service.models.enums import EmployeeStatus

logger = get_logger(__name__)


async def resolve_caller(employee_store, user: AuthUser) -> Caller:
    """
    Owners and service tokens hold every permission. Anyone else gets what
    their Employee record grants; an unknown email gets nothing.
    """
    if user.role in OWNER_ROLES:
        return Caller(user_id=user.user_id, permissions=GRANTABLE, email=user.email)

    if not user.email:
        return Caller(user_id=user.user_id)

    email = user.email.lower()
    for employee in await employee_store.list():
        if employee.email.lower() == email:
            permissions = resolve_permissions(
                employee.role.value,
                [p.value for p in employee.permissions],
                active=employee.status == EmployeeStatus.ACTIVE,
            )
            return Caller(
                user_id=user.user_id, permissions=permissions, email=user.email
            )

    logger.info("No employee record for %s; read-only access", user.user_id)
    return Caller(user_id=user.user_id, email=user.email)
