from fastapi import status

from videogen_auth.app.use_cases.errors import ErrorKind, kind_of, status_of
from videogen_auth.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def http_error(error: Error) -> Exception:
    """Map a use case Error to the exception the handlers render."""
    if kind_of(error) == ErrorKind.internal:
        return ServerError(error)
    return ClientError(error, status_code=status_of(error))
