from fastapi import Request
from fastapi.responses import JSONResponse


class DirectoryError(Exception):
    """Базовая ошибка справочника пользователей"""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(DirectoryError):
    status_code = 400


class AuthError(DirectoryError):
    status_code = 401


class NotFoundError(DirectoryError):
    status_code = 404


class ConflictError(DirectoryError):
    status_code = 409


async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
