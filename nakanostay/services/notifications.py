"""Booking notifications: templated messages to the guest and the hotel.

Delivery is simulated: messages are rendered and logged. A failure while
composing or sending is logged and reported in the returned status; it
never propagates to the caller, so the booking change that triggered the
notification still commits.
"""

import enum
import logging

from nakanostay.config import settings
from nakanostay.models.booking import Booking

logger = logging.getLogger(__name__)


class NotificationEvent(str, enum.Enum):
    CREATED = "created"
    CANCELLED = "cancelled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"


_STAY_SUMMARY = (
    "Código de reserva: {booking_code}\n"
    "Hotel: {hotel_name}\n"
    "Check-in: {check_in}\n"
    "Check-out: {check_out}\n"
    "Noches: {nights}\n"
    "Huéspedes: {total_guests}\n"
    "Total: ${total}\n"
)

GUEST_TEMPLATES = {
    NotificationEvent.CREATED: {
        "subject": "Confirmación de Reserva - NakanoStay",
        "body": (
            "Hola {guest_name},\n\n"
            "Hemos recibido tu reserva.\n\n" + _STAY_SUMMARY + "\n"
            "Guarda tu código de reserva y tu cédula para consultar o cancelar la reserva.\n\n"
            "NakanoStay"
        ),
    },
    NotificationEvent.CANCELLED: {
        "subject": "Reserva Cancelada - NakanoStay",
        "body": (
            "Hola {guest_name},\n\n"
            "Tu reserva {booking_code} en {hotel_name} ({check_in} a {check_out}) "
            "ha sido cancelada.\n\n"
            "NakanoStay"
        ),
    },
    NotificationEvent.CONFIRMED: {
        "subject": "Reserva Confirmada - NakanoStay",
        "body": (
            "Hola {guest_name},\n\n"
            "El hotel ha confirmado tu reserva.\n\n" + _STAY_SUMMARY + "\n"
            "Te esperamos.\n\n"
            "NakanoStay"
        ),
    },
    NotificationEvent.COMPLETED: {
        "subject": "Gracias por tu estadía - NakanoStay",
        "body": (
            "Hola {guest_name},\n\n"
            "Tu estadía en {hotel_name} ha finalizado. ¡Gracias por elegirnos!\n\n"
            "NakanoStay"
        ),
    },
}

HOTEL_TEMPLATES = {
    NotificationEvent.CREATED: {
        "subject": "Nueva Reserva Recibida - NakanoStay",
        "body": (
            "Nueva reserva de {guest_name} ({guest_email}).\n\n" + _STAY_SUMMARY + "\n"
            "Estado: {status}\n"
        ),
    },
    NotificationEvent.CANCELLED: {
        "subject": "Reserva Cancelada - NakanoStay",
        "body": (
            "La reserva {booking_code} de {guest_name} ({check_in} a {check_out}) "
            "ha sido cancelada por el huésped.\n"
        ),
    },
}


def _template_vars(booking: Booking) -> dict[str, str]:
    if not booking.booking_details:
        raise ValueError("La reserva no tiene detalles de habitaciones")
    hotel = booking.booking_details[0].room.hotel

    return {
        "booking_code": booking.booking_code,
        "guest_name": booking.guest_name,
        "guest_email": booking.guest_email,
        "hotel_name": hotel.name,
        "hotel_email": hotel.email,
        "check_in": booking.check_in.isoformat(),
        "check_out": booking.check_out.isoformat(),
        "nights": str(booking.nights),
        "total_guests": str(sum(detail.guests for detail in booking.booking_details)),
        "total": str(booking.total),
        "status": str(booking.status),
    }


def _render(template: dict[str, str], recipient: str, template_vars: dict[str, str]) -> dict[str, str]:
    return {
        "from": settings.mail_from,
        "to": recipient,
        "subject": template["subject"].format(**template_vars),
        "body": template["body"].format(**template_vars),
    }


def send_booking_notification(event: NotificationEvent, booking: Booking) -> dict:
    """Compose and send the messages for ``event`` on ``booking``.

    Returns:
        Dict with ``status`` ("simulated", "disabled" or "failed") and the
        composed ``messages``; failed sends carry an ``error`` instead.
    """
    if not settings.notifications_enabled:
        return {"status": "disabled", "messages": []}

    try:
        template_vars = _template_vars(booking)
        messages = [_render(GUEST_TEMPLATES[event], booking.guest_email, template_vars)]
        if event in HOTEL_TEMPLATES:
            messages.append(_render(HOTEL_TEMPLATES[event], template_vars["hotel_email"], template_vars))

        for message in messages:
            logger.info(
                "Notification sent [%s] for booking %s to %s: %s",
                event.value,
                booking.booking_code,
                message["to"],
                message["subject"],
            )
        return {"status": "simulated", "messages": messages}
    except Exception as e:
        logger.exception("Notification [%s] failed for booking %s", event.value, booking.booking_code)
        return {"status": "failed", "error": str(e), "messages": []}
