"""
Supported cities and their airport codes.

Lookup is exact on the trimmed, lowercased name. Any three-letter
alphabetic input is taken as an airport code as-is.
"""

from typing import Dict, List, Optional


CITY_TO_IATA: Dict[str, str] = {
    # Pakistan
    "lahore": "LHE",
    "karachi": "KHI",
    "islamabad": "ISB",
    "peshawar": "PEW",
    "quetta": "UET",
    "multan": "MUX",
    "faisalabad": "LYP",
    "sialkot": "SKT",
    "gwadar": "GWD",
    "rawalpindi": "ISB",

    # International
    "dubai": "DXB",
    "london": "LHR",
    "new york": "JFK",
    "toronto": "YYZ",
    "jeddah": "JED",
    "riyadh": "RUH",
    "doha": "DOH",
    "abu dhabi": "AUH",
    "istanbul": "IST",
    "bangkok": "BKK",
    "kuala lumpur": "KUL",
    "singapore": "SIN",
    "manchester": "MAN",
    "birmingham": "BHX",
    "paris": "CDG",
    "tokyo": "NRT",
    "beijing": "PEK",
    "sydney": "SYD",
    "melbourne": "MEL",
    "cairo": "CAI",
    "muscat": "MCT",
    "kuwait": "KWI",
    "bahrain": "BAH",
    "sharjah": "SHJ",
    "medina": "MED",
    "makkah": "JED",  # no airport, served by Jeddah
    "delhi": "DEL",
    "mumbai": "BOM",
    "dhaka": "DAC",
}


def get_iata_code(city: Optional[str]) -> Optional[str]:
    """Resolve a city name or airport code, or None if unknown."""
    if not city:
        return None

    key = city.strip().lower()

    if len(key) == 3 and key.isascii() and key.isalpha():
        return key.upper()

    return CITY_TO_IATA.get(key)


def supported_cities() -> List[str]:
    return list(CITY_TO_IATA.keys())


def city_catalog() -> List[Dict[str, str]]:
    """City list for display: first letter capitalised, as the frontend expects."""
    return [
        {"name": city[:1].upper() + city[1:], "code": code}
        for city, code in CITY_TO_IATA.items()
    ]
