"""Seed the database with sample Ecuadorian hotels, rooms and bookings.

Bookings are created through the booking service, so they get real codes,
fixed prices and the same validation as the API. Prints an admin token for
the protected routes at the end.

Run from the project root:
    python -m scripts.seed_data
"""

import asyncio
import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Add project root to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, select

from nakanostay.auth.jwt import create_admin_token
from nakanostay.database import async_session_factory, engine
from nakanostay.models.booking import Booking, BookingDetail
from nakanostay.models.hotel import Hotel
from nakanostay.models.room import Room
from nakanostay.services import booking_service
from nakanostay.services.booking_service import RoomRequest

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

HOTELS = [
    {
        "name": "NakanoStay Quito Centro",
        "address": "Av. Amazonas N24-03 y Wilson",
        "city": "Quito",
        "stars": 4,
        "email": "quito@nakanostay.com",
        "rooms": [
            ("101", "Simple", Decimal("55.00")),
            ("102", "Doble", Decimal("80.00")),
            ("201", "Suite", Decimal("140.00")),
        ],
    },
    {
        "name": "NakanoStay Cuenca",
        "address": "Calle Larga 4-56 y Borrero",
        "city": "Cuenca",
        "stars": 3,
        "email": "cuenca@nakanostay.com",
        "rooms": [
            ("1A", "Doble", Decimal("65.00")),
            ("1B", "Familiar", Decimal("95.50")),
        ],
    },
    {
        "name": "NakanoStay Montañita",
        "address": "Calle 10 de Agosto, frente al malecón",
        "city": "Montañita",
        "stars": None,
        "email": "montanita@nakanostay.com",
        "rooms": [
            ("P1", "Cabaña", Decimal("45.00")),
        ],
    },
]

# (hotel email, room number, guest, dni, email, start offset, nights, guests)
BOOKINGS = [
    ("quito@nakanostay.com", "102", "Ana Torres", "1710034065", "ana.torres@example.com", 7, 3, 2),
    ("quito@nakanostay.com", "201", "Luis Pérez", "0926687856", "luis.perez@example.com", 14, 5, 2),
    ("cuenca@nakanostay.com", "1B", "María Andrade", "1713175071", "maria.andrade@example.com", 3, 2, 4),
]


async def seed() -> None:
    """Populate the database with sample data.

    Idempotent: hotels with a seed email are deleted, together with their
    rooms and any bookings on those rooms, before re-creating everything.
    """
    emails = [hotel["email"] for hotel in HOTELS]

    async with async_session_factory() as session:
        existing = (await session.execute(select(Hotel).where(Hotel.email.in_(emails)))).scalars().all()
        if existing:
            print(f"⚠️  {len(existing)} seed hotel(s) already exist. Deleting and re-seeding...")
            room_ids = select(Room.id).where(Room.hotel_id.in_([hotel.id for hotel in existing]))
            booking_ids = select(BookingDetail.booking_id).where(BookingDetail.room_id.in_(room_ids))
            await session.execute(delete(Booking).where(Booking.id.in_(booking_ids)))
            await session.execute(delete(Room).where(Room.id.in_(room_ids)))
            await session.execute(delete(Hotel).where(Hotel.email.in_(emails)))
            await session.flush()

        # ------------------------------------------------------------------
        # 1. Hotels and rooms
        # ------------------------------------------------------------------
        rooms: dict[tuple[str, str], Room] = {}
        for hotel_data in HOTELS:
            room_rows = hotel_data["rooms"]
            hotel = Hotel(**{k: v for k, v in hotel_data.items() if k != "rooms"})
            session.add(hotel)
            await session.flush()
            print(f"   🏨 {hotel.name} - {hotel.city}")

            for room_number, room_type, price in room_rows:
                room = Room(hotel_id=hotel.id, room_number=room_number, room_type=room_type, price_per_night=price)
                session.add(room)
                rooms[(hotel.email, room_number)] = room
            await session.flush()

        print(f"✅ Created {len(HOTELS)} hotels and {len(rooms)} rooms")

        # ------------------------------------------------------------------
        # 2. Bookings
        # ------------------------------------------------------------------
        today = date.today()
        for hotel_email, room_number, name, dni, email, start, nights, guests in BOOKINGS:
            check_in = today + timedelta(days=start)
            booking = await booking_service.create_booking(
                session,
                guest_name=name,
                guest_dni=dni,
                guest_email=email,
                check_in=check_in,
                check_out=check_in + timedelta(days=nights),
                rooms=[RoomRequest(room_id=rooms[(hotel_email, room_number)].id, guests=guests)],
            )
            print(f"   📅 {booking.booking_code} - {name} ({dni}), total ${booking.total}")

        await session.commit()

    await engine.dispose()

    print()
    print("=" * 60)
    print("📊 Seed Summary")
    print("=" * 60)
    print(f"   Hotels:   {len(HOTELS)}")
    print(f"   Rooms:    {len(rooms)}")
    print(f"   Bookings: {len(BOOKINGS)}")
    print("=" * 60)
    print("🔑 Admin token (send as 'Authorization: Bearer <token>'):")
    print(create_admin_token("admin"))


if __name__ == "__main__":
    asyncio.run(seed())
