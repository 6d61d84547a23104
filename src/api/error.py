from fastapi import status

from src.libs.result import Error

# Domain error code -> HTTP status, applied once at the API boundary
CLIENT_ERROR_STATUS = {
    "MISSING_FIELD": status.HTTP_400_BAD_REQUEST,
    "WEAK_PASSWORD": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_EMAIL": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_400_BAD_REQUEST,
    "PASSWORD_UNCHANGED": status.HTTP_400_BAD_REQUEST,
    "NOT_AUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_OR_EXPIRED_TOKEN": status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> None:
    """Raise the API exception matching a use case error"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
