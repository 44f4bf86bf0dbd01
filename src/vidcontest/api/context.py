"""Request-scoped identity and role checks.

Authentication happens upstream; the gateway forwards the authenticated
user as ``X-User-Id`` and ``X-User-Role`` headers. Handlers receive an
explicit RequestContext instead of reading global session state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from fastapi import Depends, Header, HTTPException, status

JUDGE_ROLES = ("judge", "admin")
ADMIN_ROLES = ("admin", "super_admin")


@dataclass(frozen=True)
class RequestContext:
    """Authenticated caller of the current request."""

    user_id: str
    role: str


def get_request_context(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> RequestContext | None:
    """Build the caller context from forwarded headers, or None if anonymous."""
    if not x_user_id:
        return None
    return RequestContext(user_id=x_user_id, role=(x_user_role or "user").lower())


def require_role(*allowed_roles: str) -> Callable[..., RequestContext]:
    """Dependency factory that admits only the given roles.

    Returns 401 for anonymous callers and 403 for other roles.
    """

    def dependency(
        context: RequestContext | None = Depends(get_request_context),
    ) -> RequestContext:
        if context is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required"
            )
        if context.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions"
            )
        return context

    return dependency


require_judge = require_role(*JUDGE_ROLES)
require_admin = require_role(*ADMIN_ROLES)
