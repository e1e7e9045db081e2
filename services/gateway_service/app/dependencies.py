from typing import Optional

from fastapi import Depends, Header, Request
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.auth.permissions import Caller
from libs.common.errors import ValidationFailure
from libs.common.logging import bind_caller
from services.employees_service.access import resolve_caller
from services.gateway_service.app.backends import StorageBackend
from services.gateway_service.app.database import StudioDatabase


def get_backend(request: Request) -> StorageBackend:
    return request.app.state.backend


async def get_caller(
    request: Request,
    current_user: AuthUser = Depends(get_current_user),
    backend: StorageBackend = Depends(get_backend),
) -> Caller:
    """
    Resolve the token's identity into studio permissions and tag the
    request's logs with the caller.
    """
    caller = await resolve_caller(backend.employees, current_user)
    request.state.caller_id = caller.user_id
    bind_caller(caller.user_id)
    return caller


async def get_studio_db(
    backend: StorageBackend = Depends(get_backend),
    caller: Caller = Depends(get_caller),
) -> StudioDatabase:
    return StudioDatabase(backend, caller)


def get_expected_version(
    if_match: Optional[str] = Header(None, alias="If-Match"),
) -> Optional[int]:
    """
    Read the record version a client last saw from If-Match.
    Accepts ``3``, ``"3"`` and ``W/"3"``.
    """
    if if_match is None:
        return None
    raw = if_match.strip()
    if raw.startswith("W/"):
        raw = raw[2:]
    raw = raw.strip('"')
    try:
        return int(raw)
    except ValueError:
        raise ValidationFailure(
            "invalid_input", f"If-Match must be a record version, got {if_match!r}"
        )
