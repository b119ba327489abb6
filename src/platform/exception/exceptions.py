class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class LoginError(CustomBaseError):
    """Bad credentials; the login endpoint answers 400 rather than 401"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class TokenValidationError(CustomBaseError):
    """Token check endpoint verdict: answered as {valid: false, message} with 400"""

    def __init__(self, message: str = 'Invalid or expired token') -> None:
        super().__init__(message, 400)
