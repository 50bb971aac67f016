"""Unit tests for the booking status state machine."""

import pytest

from nakanostay.exceptions import ConflictError
from nakanostay.models.booking import BookingStatus
from nakanostay.services.booking_status import BookingAction, next_status


class TestAllowedTransitions:
    @pytest.mark.parametrize(
        ("current", "action", "expected"),
        [
            (BookingStatus.PENDING, BookingAction.CANCEL, BookingStatus.CANCELLED),
            (BookingStatus.CONFIRMED, BookingAction.CANCEL, BookingStatus.CANCELLED),
            (BookingStatus.PENDING, BookingAction.CONFIRM, BookingStatus.CONFIRMED),
            (BookingStatus.CONFIRMED, BookingAction.COMPLETE, BookingStatus.COMPLETED),
        ],
    )
    def test_transition(self, current, action, expected):
        assert next_status(current, action) is expected

    def test_accepts_stored_string_status(self):
        assert next_status("PENDING", BookingAction.CONFIRM) is BookingStatus.CONFIRMED


class TestForbiddenTransitions:
    @pytest.mark.parametrize(
        ("current", "action", "message"),
        [
            (BookingStatus.CANCELLED, BookingAction.CANCEL, "La reserva ya está cancelada"),
            (BookingStatus.COMPLETED, BookingAction.CANCEL, "No se puede cancelar una reserva completada"),
            (BookingStatus.CONFIRMED, BookingAction.CONFIRM, "La reserva ya está confirmada"),
            (BookingStatus.CANCELLED, BookingAction.CONFIRM, "No se puede confirmar una reserva cancelada"),
            (BookingStatus.COMPLETED, BookingAction.CONFIRM, "No se puede confirmar una reserva completada"),
            (BookingStatus.COMPLETED, BookingAction.COMPLETE, "La reserva ya está completada"),
            (BookingStatus.PENDING, BookingAction.COMPLETE, "No se puede completar una reserva no confirmada"),
            (BookingStatus.CANCELLED, BookingAction.COMPLETE, "No se puede completar una reserva cancelada"),
        ],
    )
    def test_rejected_with_message(self, current, action, message):
        with pytest.raises(ConflictError) as exc_info:
            next_status(current, action)
        assert exc_info.value.message == message

    def test_terminal_states_have_no_exit(self):
        for terminal in (BookingStatus.CANCELLED, BookingStatus.COMPLETED):
            for action in BookingAction:
                with pytest.raises(ConflictError):
                    next_status(terminal, action)
