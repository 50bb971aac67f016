"""Booking status state machine.

PENDING -> CONFIRMED -> COMPLETED, with CANCELLED reachable from PENDING or
CONFIRMED. COMPLETED and CANCELLED are terminal.
"""

import enum

from nakanostay.exceptions import ConflictError
from nakanostay.models.booking import BookingStatus


class BookingAction(str, enum.Enum):
    CANCEL = "cancel"
    CONFIRM = "confirm"
    COMPLETE = "complete"


_TARGETS: dict[BookingAction, BookingStatus] = {
    BookingAction.CANCEL: BookingStatus.CANCELLED,
    BookingAction.CONFIRM: BookingStatus.CONFIRMED,
    BookingAction.COMPLETE: BookingStatus.COMPLETED,
}

# Every (action, current status) pair that is refused, with its message.
_FORBIDDEN: dict[tuple[BookingAction, BookingStatus], str] = {
    (BookingAction.CANCEL, BookingStatus.CANCELLED): "La reserva ya está cancelada",
    (BookingAction.CANCEL, BookingStatus.COMPLETED): "No se puede cancelar una reserva completada",
    (BookingAction.CONFIRM, BookingStatus.CONFIRMED): "La reserva ya está confirmada",
    (BookingAction.CONFIRM, BookingStatus.CANCELLED): "No se puede confirmar una reserva cancelada",
    (BookingAction.CONFIRM, BookingStatus.COMPLETED): "No se puede confirmar una reserva completada",
    (BookingAction.COMPLETE, BookingStatus.COMPLETED): "La reserva ya está completada",
    (BookingAction.COMPLETE, BookingStatus.PENDING): "No se puede completar una reserva no confirmada",
    (BookingAction.COMPLETE, BookingStatus.CANCELLED): "No se puede completar una reserva cancelada",
}


def next_status(current: BookingStatus | str, action: BookingAction) -> BookingStatus:
    """Return the status a booking moves to when ``action`` is applied.

    Raises:
        ConflictError: If the transition is not allowed from ``current``.
    """
    current = BookingStatus(current)
    message = _FORBIDDEN.get((action, current))
    if message is not None:
        raise ConflictError(message)
    return _TARGETS[action]
