"""Request-level dependencies shared by the routers."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Depends, Header, HTTPException, Query, Request, status

from remark.domain.service import AuthService
from remark.domain.value import Caller


def get_tenant_id(
    request: Request,
    x_tenant_id: Annotated[str | None, Header()] = None,
    tenant_id: Annotated[str | None, Query()] = None,
) -> str:
    """Tenant of the request: header, then query parameter, then default."""
    return x_tenant_id or tenant_id or request.app.state.default_tenant


@inject
async def get_caller(
    auth_service: FromDishka[AuthService],
    authorization: Annotated[str | None, Header()] = None,
) -> Caller:
    """Authenticate the bearer token of the request.

    Raises:
        AuthenticationError: If the token is missing or rejected
    """
    return await auth_service.authenticate(authorization)


async def get_admin(caller: Annotated[Caller, Depends(get_caller)]) -> Caller:
    """Authenticated caller that holds an admin scope."""
    if not caller.is_admin:
        logfire.warn("Admin access denied", user_id=caller.user_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return caller


TenantDep = Annotated[str, Depends(get_tenant_id)]
CallerDep = Annotated[Caller, Depends(get_caller)]
AdminDep = Annotated[Caller, Depends(get_admin)]
