"""Unit tests for Ecuadorian cédula validation."""

import pytest

from nakanostay.services.dni import is_valid_ecuadorian_dni


class TestValidDni:
    @pytest.mark.parametrize("dni", ["1710034065", "0926687856", "1713175071"])
    def test_accepts_known_good_numbers(self, dni: str):
        assert is_valid_ecuadorian_dni(dni) is True

    def test_accepts_province_30_for_ecuadorians_abroad(self):
        assert is_valid_ecuadorian_dni("3000000004") is True

    @pytest.mark.parametrize(
        ("dni", "checksum"),
        [("1000000008", 2), ("1900000009", 11), ("1800000000", 10)],
    )
    def test_check_digit_completes_next_multiple_of_ten(self, dni: str, checksum: int):
        assert (checksum + int(dni[9])) % 10 == 0
        assert is_valid_ecuadorian_dni(dni) is True


class TestInvalidDni:
    @pytest.mark.parametrize("check_digit", [d for d in "0123456789" if d != "5"])
    def test_every_wrong_check_digit_rejected(self, check_digit: str):
        assert is_valid_ecuadorian_dni("171003406" + check_digit) is False

    @pytest.mark.parametrize("dni", ["171003406", "17100340655", "", "17100340a5", " 1710034065"])
    def test_not_ten_digits(self, dni: str):
        assert is_valid_ecuadorian_dni(dni) is False

    def test_trailing_newline_rejected(self):
        assert is_valid_ecuadorian_dni("1710034065\n") is False

    def test_province_zero_rejected_even_with_valid_checksum(self):
        assert is_valid_ecuadorian_dni("0000000000") is False

    def test_province_25_rejected_even_with_valid_checksum(self):
        assert is_valid_ecuadorian_dni("2500000001") is False

    def test_province_31_rejected(self):
        # 3->6, 1 odd -> 7 -> expected 3
        assert is_valid_ecuadorian_dni("3100000003") is False
