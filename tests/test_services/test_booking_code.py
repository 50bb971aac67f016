"""Unit tests for booking code generation."""

import random
import re
from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from nakanostay.exceptions import BookingCodeGenerationError
from nakanostay.services import booking_code
from nakanostay.services.booking_code import (
    MAX_ATTEMPTS,
    generate_booking_code,
    generate_unique_booking_code,
)

CODE_PATTERN = re.compile(r"NKS-[A-Z0-9]{6}[0-9]{6}")
NOW = datetime(2025, 6, 1, 14, 30)


class TestGenerateBookingCode:
    def test_format(self):
        code = generate_booking_code(random.Random(1), NOW)
        assert CODE_PATTERN.fullmatch(code)
        assert len(code) == 16

    def test_date_suffix_is_generation_date(self):
        code = generate_booking_code(random.Random(1), NOW)
        assert code.endswith("250601")

    def test_same_seed_same_code(self):
        assert generate_booking_code(random.Random(7), NOW) == generate_booking_code(random.Random(7), NOW)

    def test_random_part_varies(self):
        rng = random.Random(3)
        codes = {generate_booking_code(rng, NOW) for _ in range(20)}
        assert len(codes) > 1


class TestGenerateUniqueBookingCode:
    async def test_returns_first_unused_code(self, monkeypatch: pytest.MonkeyPatch):
        exists = AsyncMock(side_effect=[True, True, False])
        monkeypatch.setattr(booking_code, "booking_code_exists", exists)

        expected_rng = random.Random(11)
        expected = [generate_booking_code(expected_rng, NOW) for _ in range(3)]

        code = await generate_unique_booking_code(None, rng=random.Random(11), now=NOW)

        assert code == expected[2]
        assert exists.await_count == 3

    async def test_gives_up_after_max_attempts(self, monkeypatch: pytest.MonkeyPatch):
        exists = AsyncMock(return_value=True)
        monkeypatch.setattr(booking_code, "booking_code_exists", exists)

        with pytest.raises(BookingCodeGenerationError) as exc_info:
            await generate_unique_booking_code(None, rng=random.Random(5), now=NOW, max_attempts=4)

        assert exc_info.value.attempts == 4
        assert exists.await_count == 4
        assert "4 intentos" in exc_info.value.message

    async def test_default_budget_is_fifty(self, monkeypatch: pytest.MonkeyPatch):
        exists = AsyncMock(return_value=True)
        monkeypatch.setattr(booking_code, "booking_code_exists", exists)

        with pytest.raises(BookingCodeGenerationError):
            await generate_unique_booking_code(None, rng=random.Random(5), now=NOW)

        assert MAX_ATTEMPTS == 50
        assert exists.await_count == 50

    async def test_checks_against_persisted_bookings(self, db_session):
        code = await generate_unique_booking_code(db_session, rng=random.Random(2), now=NOW)
        assert CODE_PATTERN.fullmatch(code)
