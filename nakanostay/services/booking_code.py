"""Booking code generation: short, shareable reservation identifiers."""

import logging
import random
import string
from datetime import datetime

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.exceptions import BookingCodeGenerationError
from nakanostay.models.booking import Booking

logger = logging.getLogger(__name__)

PREFIX = "NKS"
RANDOM_PART_LENGTH = 6
CHARACTERS = string.ascii_uppercase + string.digits
MAX_ATTEMPTS = 50

_system_random = random.SystemRandom()


def generate_booking_code(rng: random.Random, now: datetime) -> str:
    """Build one candidate code such as ``NKS-7K2P9Q250601``.

    The trailing six digits are the generation date (``yyMMdd``), not the
    stay date.
    """
    random_part = "".join(rng.choice(CHARACTERS) for _ in range(RANDOM_PART_LENGTH))
    return f"{PREFIX}-{random_part}{now:%y%m%d}"


async def booking_code_exists(db: AsyncSession, code: str) -> bool:
    result = await db.execute(select(exists().where(Booking.booking_code == code)))
    return bool(result.scalar())


async def generate_unique_booking_code(
    db: AsyncSession,
    rng: random.Random | None = None,
    now: datetime | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> str:
    """Return a booking code not yet used by any persisted booking.

    Args:
        db: Session used to check existing codes.
        rng: Random source. Defaults to a shared ``SystemRandom``.
        now: Generation time for the date suffix. Defaults to ``datetime.now()``.
        max_attempts: Candidates to try before giving up.

    Raises:
        BookingCodeGenerationError: If every candidate was already taken.
    """
    rng = rng or _system_random
    for _ in range(max_attempts):
        code = generate_booking_code(rng, now or datetime.now())
        if not await booking_code_exists(db, code):
            return code
        logger.debug("Booking code %s already taken, retrying", code)

    logger.error("Could not generate a unique booking code after %d attempts", max_attempts)
    raise BookingCodeGenerationError(max_attempts)
