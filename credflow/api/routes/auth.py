from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse

from config import ApplicationConfig
from credflow.adapter.services.cookie_session_store import CookieSessionStore
from credflow.app.services.clock import Clock
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.app.use_cases.auth import (
    AuthFlow,
    AuthRequest,
    OperationHandler,
    RedirectOptions,
)
from credflow.depends import get_auth_flow, get_clock, get_session_token, get_unit_of_work

router = APIRouter(tags=["Authentication"])

FLASH_COOKIE_NAME = "flash"


def redirect_options(operation: str) -> RedirectOptions:
    """Configured redirect targets for an operation (REDIRECTS in env.yaml)"""
    return RedirectOptions(**ApplicationConfig.REDIRECTS.get(operation, {}))


async def run_handler(
    handler: OperationHandler,
    auth_request: AuthRequest,
    uow: UnitOfWork,
    clock: Clock,
    session_token: Optional[str],
) -> RedirectResponse:
    """
    Run an auth handler and translate its Outcome into a redirect.

    The session cookie is set or cleared from what the handler did to the
    session store; with FLASH enabled the outcome message rides along in a
    short-lived cookie.
    """
    session = CookieSessionStore(
        uow,
        clock,
        current_token=session_token,
        ttl_hours=ApplicationConfig.SESSION_TTL_HOURS,
    )
    outcome = await handler(auth_request, uow, session)

    response = RedirectResponse(outcome.redirect_target, status_code=status.HTTP_303_SEE_OTHER)
    if session.issued_token:
        response.set_cookie(
            ApplicationConfig.SESSION_COOKIE_NAME,
            session.issued_token,
            max_age=int((session.expires_at - clock.now()).total_seconds()),
            httponly=True,
            samesite="lax",
        )
    elif session.destroyed:
        response.delete_cookie(ApplicationConfig.SESSION_COOKIE_NAME)

    if ApplicationConfig.FLASH:
        category = "info" if outcome.is_success else "error"
        response.set_cookie(FLASH_COOKIE_NAME, f"{category}:{outcome.message}", max_age=60)

    return response


def client_ip(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


@router.post("/signin", status_code=status.HTTP_303_SEE_OTHER)
async def signin(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    uow: UnitOfWork = Depends(get_unit_of_work),
    flow: AuthFlow = Depends(get_auth_flow),
    clock: Clock = Depends(get_clock),
    session_token: Optional[str] = Depends(get_session_token),
):
    """
    User Signin

    Redirects to the success target with a session cookie, or to the
    failure target. Unknown user and wrong password look the same.
    """
    auth_request = AuthRequest(
        path=request.url.path,
        ip_address=client_ip(request),
        username=username,
        password=password,
    )
    handler = flow.signin(redirect_options("signin"))
    return await run_handler(handler, auth_request, uow, clock, session_token)


@router.post("/signup", status_code=status.HTTP_303_SEE_OTHER)
async def signup(
    request: Request,
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    password_confirm: str = Form(""),
    uow: UnitOfWork = Depends(get_unit_of_work),
    flow: AuthFlow = Depends(get_auth_flow),
    clock: Clock = Depends(get_clock),
    session_token: Optional[str] = Depends(get_session_token),
):
    """
    User Signup

    Creates the account and signs it in.
    """
    auth_request = AuthRequest(
        path=request.url.path,
        ip_address=client_ip(request),
        username=username,
        email=email,
        password=password,
        password_confirm=password_confirm,
    )
    handler = flow.signup(redirect_options("signup"))
    return await run_handler(handler, auth_request, uow, clock, session_token)


@router.post("/signout", status_code=status.HTTP_303_SEE_OTHER)
async def signout(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    flow: AuthFlow = Depends(get_auth_flow),
    clock: Clock = Depends(get_clock),
    session_token: Optional[str] = Depends(get_session_token),
):
    """User Signout - always succeeds and clears the session cookie"""
    auth_request = AuthRequest(path=request.url.path, ip_address=client_ip(request))
    handler = flow.signout(redirect_options("signout"))
    return await run_handler(handler, auth_request, uow, clock, session_token)


@router.post("/forgot", status_code=status.HTTP_303_SEE_OTHER)
async def forgot(
    request: Request,
    email: str = Form(""),
    uow: UnitOfWork = Depends(get_unit_of_work),
    flow: AuthFlow = Depends(get_auth_flow),
    clock: Clock = Depends(get_clock),
    session_token: Optional[str] = Depends(get_session_token),
):
    """
    Forgot Password

    Issues a 24-hour reset token and mails the reset link, quoting the
    requesting IP address.
    """
    auth_request = AuthRequest(
        path=request.url.path,
        ip_address=client_ip(request),
        email=email,
    )
    handler = flow.forgot(redirect_options("forgot"))
    return await run_handler(handler, auth_request, uow, clock, session_token)


@router.post("/reset", status_code=status.HTTP_303_SEE_OTHER)
async def reset(
    request: Request,
    reset_token: str = Form(""),
    password: str = Form(""),
    password_confirm: str = Form(""),
    uow: UnitOfWork = Depends(get_unit_of_work),
    flow: AuthFlow = Depends(get_auth_flow),
    clock: Clock = Depends(get_clock),
    session_token: Optional[str] = Depends(get_session_token),
):
    """
    Reset Password

    Redeems the reset token once and sets the new password.
    """
    auth_request = AuthRequest(
        path=request.url.path,
        ip_address=client_ip(request),
        reset_token=reset_token,
        password=password,
        password_confirm=password_confirm,
    )
    handler = flow.reset(redirect_options("reset"))
    return await run_handler(handler, auth_request, uow, clock, session_token)
