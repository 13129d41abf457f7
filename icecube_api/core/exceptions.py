# icecube_api/core/exceptions.py

class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class UserUpdateError(NotFoundError):
    """Update por id que não afetou nenhuma linha."""

    def __init__(self, message: str = "Cannot update user") -> None:
        super().__init__(message)
