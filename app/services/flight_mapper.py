"""
Skyroute Backend - Flight Offer Mapper
Translates raw Amadeus flight offers into FlightRecord
"""

import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from app.core.constants import DEFAULT_AVAILABLE_SEATS, FlightSource
from app.core.exceptions import OfferTranslationError
from app.schemas.flight import FlightRecord, FlightSegmentRecord


_ISO_DURATION = re.compile(
    r"^P(?:(?P<days>\d+)D)?(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:\d+(?:\.\d+)?S)?)?$"
)


# ================================================================
# FIELD FORMATTERS
# ================================================================

def parse_duration(value: str) -> Tuple[int, int]:
    """
    Parse an ISO-8601 duration such as PT2H30M or P1DT2H.

    Returns:
        (hours, minutes), with days folded into hours

    Raises:
        ValueError: If the value is not a day/hour/minute duration
    """
    if not isinstance(value, str):
        raise ValueError(f"Unrecognised duration: {value!r}")

    match = _ISO_DURATION.match(value.strip()) if value else None
    if not match or value.strip() in ("P", "PT"):
        raise ValueError(f"Unrecognised duration: {value!r}")

    days = int(match.group("days") or 0)
    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes") or 0)
    return days * 24 + hours, minutes


def format_duration(value: str) -> str:
    """PT2H30M -> '2h 30m', PT3H -> '3h', PT45M -> '45m'"""
    hours, minutes = parse_duration(value)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes or not hours:
        parts.append(f"{minutes}m")
    return " ".join(parts)


def stops_label(segment_count: int) -> str:
    """Stop label derived from the number of segments in an itinerary"""
    stops = segment_count - 1
    if stops <= 0:
        return "Non-stop"
    if stops == 1:
        return "1 Stop"
    return f"{stops} Stops"


def round_price(total: Any) -> int:
    """Round a provider price string to the nearest whole unit, halves up"""
    try:
        amount = Decimal(str(total))
    except InvalidOperation as e:
        raise ValueError(f"Unrecognised price: {total!r}") from e
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_clock(timestamp: str) -> str:
    """'2024-05-01T14:30:00' -> '02:30 PM' (local time at the airport)"""
    return datetime.fromisoformat(timestamp).strftime("%I:%M %p")


def display_city(text: str) -> str:
    """First letter uppercased, the rest lowercased"""
    text = text.strip()
    return text[:1].upper() + text[1:].lower()


# ================================================================
# OFFER TRANSLATION
# ================================================================

def _first_fare_details(offer: Dict[str, Any]) -> Dict[str, Any]:
    try:
        fare = offer["travelerPricings"][0]["fareDetailsBySegment"][0]
    except (KeyError, IndexError, TypeError):
        return {}
    return fare if isinstance(fare, dict) else {}


def translate_offer(
    offer: Dict[str, Any],
    requested_from: str,
    requested_to: str,
    carriers: Optional[Dict[str, str]] = None,
    from_code: Optional[str] = None,
    to_code: Optional[str] = None
) -> FlightRecord:
    """
    Translate one flight offer.

    Only the outbound itinerary is described; the first segment gives
    the flight number and departure, the last gives the arrival.

    Args:
        offer: Raw offer from the flight-offers response
        requested_from: Origin text as the user typed it
        requested_to: Destination text as the user typed it
        carriers: Carrier code to airline name dictionary
        from_code: Resolved origin code, defaults to the first segment's airport
        to_code: Resolved destination code, defaults to the last segment's airport

    Returns:
        FlightRecord with source "amadeus"

    Raises:
        OfferTranslationError: If the offer lacks required data
    """
    if not isinstance(offer, dict):
        raise OfferTranslationError(None, f"offer is not an object: {type(offer).__name__}")

    offer_id = offer.get("id")
    carriers = carriers or {}

    try:
        itinerary = offer["itineraries"][0]
        segments: List[Dict[str, Any]] = itinerary["segments"]
        first, last = segments[0], segments[-1]
    except (KeyError, IndexError, TypeError):
        raise OfferTranslationError(offer_id, "missing itinerary segments")

    fare = _first_fare_details(offer)
    if not fare.get("cabin") or not fare.get("class"):
        raise OfferTranslationError(offer_id, "missing cabin or booking class")

    try:
        carrier_code = first["carrierCode"]
        departure_at = first["departure"]["at"]
        arrival_at = last["arrival"]["at"]

        return FlightRecord(
            id=f"amadeus_{offer_id}",
            flight_number=f"{carrier_code}{first.get('number', '')}",
            airline=carriers.get(carrier_code, carrier_code),
            origin=display_city(requested_from),
            destination=display_city(requested_to),
            from_code=from_code or first["departure"].get("iataCode", ""),
            to_code=to_code or last["arrival"].get("iataCode", ""),
            departure_time=format_clock(departure_at),
            arrival_time=format_clock(arrival_at),
            departure_date=departure_at,
            duration=format_duration(itinerary["duration"]),
            price=round_price(offer["price"]["total"]),
            currency=offer["price"]["currency"],
            stops=stops_label(len(segments)),
            available_seats=offer.get("numberOfBookableSeats") or DEFAULT_AVAILABLE_SEATS,
            cabin_class=fare["cabin"],
            booking_class=fare["class"],
            source=FlightSource.AMADEUS,
            segments=[
                FlightSegmentRecord(
                    departure=seg.get("departure") or {},
                    arrival=seg.get("arrival") or {},
                    carrier_code=seg.get("carrierCode", ""),
                    flight_number=seg.get("number", ""),
                    aircraft=(seg.get("aircraft") or {}).get("code"),
                )
                for seg in segments
            ],
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise OfferTranslationError(offer_id, f"malformed offer: {e}")


def translate_offers(
    offers: List[Dict[str, Any]],
    requested_from: str,
    requested_to: str,
    carriers: Optional[Dict[str, str]] = None,
    from_code: Optional[str] = None,
    to_code: Optional[str] = None
) -> List[FlightRecord]:
    """Translate a batch of offers, dropping and logging any that fail"""
    flights = []
    for offer in offers:
        try:
            flights.append(
                translate_offer(offer, requested_from, requested_to, carriers, from_code, to_code)
            )
        except OfferTranslationError as e:
            logger.warning(f"Skipping flight offer: {e}")
    return flights
