"""Domain errors raised by the service layer.

Routers never build HTTP errors for these themselves: ``nakanostay.main``
registers handlers that translate each kind into a status code and a
``{"detail": ...}`` body.
"""


class NakanoStayError(Exception):
    """Base class for errors raised by the booking core."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(NakanoStayError):
    """The requested entity does not exist."""


class ValidationError(NakanoStayError):
    """Malformed or out-of-range input; the caller can fix it and retry."""


class ConflictError(NakanoStayError):
    """The request clashes with current state (overlap, duplicate, illegal transition)."""


class BookingCodeGenerationError(NakanoStayError):
    """No unused booking code was found within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"No se pudo generar un código único después de {attempts} intentos")
        self.attempts = attempts
