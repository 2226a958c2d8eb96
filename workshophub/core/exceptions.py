"""Domain errors raised by the component layer.

Each error carries the HTTP status it maps to at the API boundary; the
handlers registered in ``main.create_app`` render them as ``{"message": ...}``.
"""

from fastapi import status


class WorkshopHubError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailed(WorkshopHubError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthenticated(WorkshopHubError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidToken(Unauthenticated):
    pass


class Forbidden(WorkshopHubError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(WorkshopHubError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(WorkshopHubError):
    status_code = status.HTTP_409_CONFLICT


class AlreadyRegistered(Conflict):
    pass


class WorkshopFull(Conflict):
    pass
