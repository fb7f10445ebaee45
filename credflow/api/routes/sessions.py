from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from credflow.libs.result import Error
from credflow.api.error import ClientError, error_to_exception
from credflow.app.services.clock import Clock
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.app.use_cases.sessions import LoadSessionUseCase, SessionUserResponse
from credflow.depends import get_clock, get_current_session_id, get_unit_of_work

router = APIRouter(tags=["Sessions"])


@router.get("/session", status_code=status.HTTP_200_OK, response_model=SessionUserResponse)
async def current_session(
    session_id: Optional[UUID] = Depends(get_current_session_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Current Session

    Returns the user bound to the session cookie.

    Raises:
        - 401 Unauthorized: Missing, forged, revoked or expired session
        - 500 Internal Server Error: Server error
    """
    if session_id is None:
        raise ClientError(
            Error("NOT_AUTHENTICATED", "No active session"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    use_case = LoadSessionUseCase(uow, clock)
    result = await use_case.execute(session_id)

    if result.is_err():
        raise error_to_exception(result.error)

    return result.value
