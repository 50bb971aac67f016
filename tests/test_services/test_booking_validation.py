"""Unit tests for booking field, date and conflict validation."""

import uuid
from datetime import date, timedelta
from decimal import Decimal

import pytest

from nakanostay.exceptions import ValidationError
from nakanostay.models.booking import Booking, BookingDetail
from nakanostay.services.booking_validation import (
    validate_booking_dates,
    validate_booking_fields,
    validate_guest_phone,
)

TODAY = date(2025, 6, 1)


def _booking(**overrides) -> Booking:
    values = {
        "booking_code": "NKS-AB12CD250601",
        "guest_name": "Ana Torres",
        "guest_dni": "1710034065",
        "guest_email": "ana.torres@example.com",
        "guest_phone": None,
        "check_in": TODAY + timedelta(days=10),
        "check_out": TODAY + timedelta(days=12),
        "booking_details": [BookingDetail(guests=2, price_at_booking=Decimal("300.00"))],
    }
    values.update(overrides)
    return Booking(**values)


def _message(booking: Booking) -> str:
    with pytest.raises(ValidationError) as exc_info:
        validate_booking_fields(booking)
    return exc_info.value.message


class TestBookingFields:
    def test_valid_booking_passes(self):
        validate_booking_fields(_booking())

    def test_blank_code(self):
        assert _message(_booking(booking_code="  ")) == "El código de reserva es requerido"

    def test_code_too_long(self):
        assert _message(_booking(booking_code="X" * 17)) == "El código de reserva no puede tener más de 16 caracteres"

    def test_blank_name(self):
        assert _message(_booking(guest_name=" ")) == "El nombre del huésped es requerido"

    def test_one_char_name_rejected(self):
        assert _message(_booking(guest_name="A")) == "El nombre del huésped debe tener al menos 2 caracteres"

    def test_two_char_name_accepted(self):
        validate_booking_fields(_booking(guest_name="Al"))

    def test_hundred_char_name_accepted(self):
        validate_booking_fields(_booking(guest_name="A" * 100))

    def test_name_too_long(self):
        assert _message(_booking(guest_name="A" * 101)) == "El nombre del huésped no puede tener más de 100 caracteres"

    def test_blank_dni(self):
        assert _message(_booking(guest_dni="")) == "El DNI del huésped es requerido"

    def test_dni_with_bad_checksum(self):
        assert _message(_booking(guest_dni="1710034066")) == "La cédula debe ser valida"

    def test_blank_email(self):
        assert _message(_booking(guest_email=" ")) == "El email del huésped es requerido"

    def test_malformed_email(self):
        assert _message(_booking(guest_email="ana@invalid")) == "El formato del email es inválido"

    def test_hundred_char_email_accepted(self):
        email = "a" * 94 + "@x.com"
        assert len(email) == 100
        validate_booking_fields(_booking(guest_email=email))

    def test_email_too_long(self):
        email = "a" * 95 + "@x.com"
        assert _message(_booking(guest_email=email)) == "El email no puede tener más de 100 caracteres"

    def test_no_rooms(self):
        assert _message(_booking(booking_details=[])) == "La reserva debe tener al menos una habitación"

    def test_zero_guests(self):
        details = [BookingDetail(guests=0, price_at_booking=Decimal("100"))]
        assert _message(_booking(booking_details=details)) == "El número de huéspedes debe ser mayor a 0"

    def test_eleven_guests(self):
        details = [BookingDetail(guests=11, price_at_booking=Decimal("100"))]
        assert (
            _message(_booking(booking_details=details))
            == "El número de huéspedes no puede ser mayor a 10 por habitación"
        )

    def test_ten_guests_accepted(self):
        validate_booking_fields(_booking(booking_details=[BookingDetail(guests=10, price_at_booking=Decimal("1"))]))

    def test_same_room_twice_rejected(self):
        room_id = uuid.uuid4()
        details = [
            BookingDetail(room_id=room_id, guests=1, price_at_booking=Decimal("100")),
            BookingDetail(room_id=room_id, guests=2, price_at_booking=Decimal("100")),
        ]
        assert (
            _message(_booking(booking_details=details))
            == "Una habitación no puede aparecer más de una vez en la reserva"
        )

    def test_distinct_rooms_accepted(self):
        details = [
            BookingDetail(room_id=uuid.uuid4(), guests=1, price_at_booking=Decimal("100")),
            BookingDetail(room_id=uuid.uuid4(), guests=2, price_at_booking=Decimal("100")),
        ]
        validate_booking_fields(_booking(booking_details=details))

    def test_name_checked_before_dni(self):
        assert _message(_booking(guest_name="A", guest_dni="123")) == (
            "El nombre del huésped debe tener al menos 2 caracteres"
        )


class TestGuestPhone:
    @pytest.mark.parametrize(
        "phone",
        [None, "", "   ", "099123456", "0991234567", "+593 991234567", "099-123-4567", "+59399123456789"],
    )
    def test_accepted(self, phone):
        validate_guest_phone(phone)

    @pytest.mark.parametrize("phone", ["12345678", "+593991234567890", "+5939912345678901", "099123456x"])
    def test_malformed(self, phone):
        with pytest.raises(ValidationError) as exc_info:
            validate_guest_phone(phone)
        assert exc_info.value.message == "El teléfono debe ser valido"

    @pytest.mark.parametrize("phone", ["099\u00a0123\u00a0456", "099\u2003123\u2003456"])
    def test_non_ascii_whitespace_rejected(self, phone):
        with pytest.raises(ValidationError) as exc_info:
            validate_guest_phone(phone)
        assert exc_info.value.message == "El teléfono debe ser valido"

    def test_too_few_digits(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_guest_phone("+593 99-123")
        assert exc_info.value.message == "El teléfono debe contener al menos 9 dígitos"


class TestBookingDates:
    def test_check_in_today_accepted(self):
        validate_booking_dates(_booking(check_in=TODAY, check_out=TODAY + timedelta(days=1)), TODAY)

    def test_check_in_yesterday_rejected(self):
        booking = _booking(check_in=TODAY - timedelta(days=1), check_out=TODAY + timedelta(days=1))
        with pytest.raises(ValidationError) as exc_info:
            validate_booking_dates(booking, TODAY)
        assert exc_info.value.message == "La fecha de check-in no puede ser en el pasado"

    def test_same_day_check_out_rejected(self):
        booking = _booking(check_in=TODAY, check_out=TODAY)
        with pytest.raises(ValidationError) as exc_info:
            validate_booking_dates(booking, TODAY)
        assert exc_info.value.message == "La fecha de check-out debe ser posterior a la fecha de check-in"

    def test_thirty_nights_accepted(self):
        validate_booking_dates(_booking(check_in=TODAY, check_out=TODAY + timedelta(days=30)), TODAY)

    def test_thirty_one_nights_rejected(self):
        booking = _booking(check_in=TODAY, check_out=TODAY + timedelta(days=31))
        with pytest.raises(ValidationError) as exc_info:
            validate_booking_dates(booking, TODAY)
        assert exc_info.value.message == "La estadía no puede ser mayor a 30 días"
