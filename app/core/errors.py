from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal error"

    def __init__(self, detail: str = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


# =====================================================
# LOGIN / DIRECTORY
# =====================================================

class DirectoryLookupFailed(AppError):
    status_code = status.HTTP_502_BAD_GATEWAY
    detail = "Login failed"


class ShopNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Shop not found"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid password"


# =====================================================
# SESSION
# =====================================================

class NotAuthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Not authenticated"


class AlreadyAuthenticated(AppError):
    status_code = status.HTTP_409_CONFLICT
    detail = "A shop session is already active, logout first"


class LoginInProgress(AppError):
    status_code = status.HTTP_409_CONFLICT
    detail = "Authentication already in progress"


class SessionSuperseded(AppError):
    status_code = status.HTTP_409_CONFLICT
    detail = "Session was closed while logging in"


class TenantNotInitialized(AppError):
    """Raised when a handle is requested before any resolve succeeded.

    This is a wiring bug, not a data condition: feature routers are only
    reachable once the session context is authenticated.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Shop DB not initialized"


# =====================================================
# FEATURE MODULES
# =====================================================

class RemoteOperationFailed(AppError):
    status_code = status.HTTP_502_BAD_GATEWAY
    detail = "Operation failed"


class RecordNotFound(RemoteOperationFailed):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Record not found"


class RecordAlreadyExists(RemoteOperationFailed):
    status_code = status.HTTP_409_CONFLICT
    detail = "Record already exists"


class InvalidImage(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Unsupported or corrupt image"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
