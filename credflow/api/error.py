from fastapi import status

from credflow.libs.result import Error
from credflow.domain.entities import ErrorKind

# Status returned for each error kind on JSON endpoints
ERROR_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.NOT_FOUND: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.MISMATCH: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    """Failure caused by the caller; rendered with its code and message"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Failure of a dependency; only the code is rendered, the reason is logged"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def error_to_exception(error: Error) -> Exception:
    """Map a use case Error onto ClientError (known kinds) or ServerError"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        return ServerError(error)
    return ClientError(error, status_code=status_code)
