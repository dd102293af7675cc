"""Static airport-code table: IATA code -> (city, country). No network lookups."""

from typing import Optional

_AIRPORTS = {
    # --- North America ---
    "ATL": ("Atlanta", "United States"),
    "AUS": ("Austin", "United States"),
    "BOS": ("Boston", "United States"),
    "BUR": ("Los Angeles", "United States"),
    "DCA": ("Washington DC", "United States"),
    "DEN": ("Denver", "United States"),
    "DFW": ("Dallas", "United States"),
    "EWR": ("New York", "United States"),
    "IAD": ("Washington DC", "United States"),
    "JFK": ("New York", "United States"),
    "LAS": ("Las Vegas", "United States"),
    "LAX": ("Los Angeles", "United States"),
    "LGA": ("New York", "United States"),
    "MIA": ("Miami", "United States"),
    "MSP": ("Minneapolis", "United States"),
    "ORD": ("Chicago", "United States"),
    "PHL": ("Philadelphia", "United States"),
    "SAN": ("San Diego", "United States"),
    "SEA": ("Seattle", "United States"),
    "SFO": ("San Francisco", "United States"),
    "OAK": ("Oakland", "United States"),
    "SJC": ("San Jose", "United States"),
    "HNL": ("Honolulu", "United States"),
    "YUL": ("Montreal", "Canada"),
    "YVR": ("Vancouver", "Canada"),
    "YYZ": ("Toronto", "Canada"),
    "MEX": ("Mexico City", "Mexico"),
    "CUN": ("Cancun", "Mexico"),
    # --- Caribbean ---
    "SXM": ("Philipsburg", "Sint Maarten"),
    "SFG": ("Grand Case", "Saint Martin"),
    "SJU": ("San Juan", "Puerto Rico"),
    # --- Europe ---
    "AMS": ("Amsterdam", "Netherlands"),
    "BCN": ("Barcelona", "Spain"),
    "MAD": ("Madrid", "Spain"),
    "CDG": ("Paris", "France"),
    "ORY": ("Paris", "France"),
    "NCE": ("Nice", "France"),
    "LYS": ("Lyon", "France"),
    "LHR": ("London", "United Kingdom"),
    "LGW": ("London", "United Kingdom"),
    "LCY": ("London", "United Kingdom"),
    "STN": ("London", "United Kingdom"),
    "EDI": ("Edinburgh", "United Kingdom"),
    "DUB": ("Dublin", "Ireland"),
    "FRA": ("Frankfurt", "Germany"),
    "MUC": ("Munich", "Germany"),
    "BER": ("Berlin", "Germany"),
    "FCO": ("Rome", "Italy"),
    "MXP": ("Milan", "Italy"),
    "LIN": ("Milan", "Italy"),
    "VCE": ("Venice", "Italy"),
    "LIS": ("Lisbon", "Portugal"),
    "ZRH": ("Zurich", "Switzerland"),
    "GVA": ("Geneva", "Switzerland"),
    "VIE": ("Vienna", "Austria"),
    "CPH": ("Copenhagen", "Denmark"),
    "ARN": ("Stockholm", "Sweden"),
    "KEF": ("Reykjavik", "Iceland"),
    "IST": ("Istanbul", "Turkey"),
    "ATH": ("Athens", "Greece"),
    # --- Asia / Pacific ---
    "NRT": ("Tokyo", "Japan"),
    "HND": ("Tokyo", "Japan"),
    "KIX": ("Osaka", "Japan"),
    "ICN": ("Seoul", "South Korea"),
    "HKG": ("Hong Kong", "Hong Kong"),
    "SIN": ("Singapore", "Singapore"),
    "BKK": ("Bangkok", "Thailand"),
    "PEK": ("Beijing", "China"),
    "PVG": ("Shanghai", "China"),
    "DEL": ("New Delhi", "India"),
    "BOM": ("Mumbai", "India"),
    "DXB": ("Dubai", "United Arab Emirates"),
    "TLV": ("Tel Aviv", "Israel"),
    "SYD": ("Sydney", "Australia"),
    "MEL": ("Melbourne", "Australia"),
    "AKL": ("Auckland", "New Zealand"),
    # --- South America / Africa ---
    "GRU": ("Sao Paulo", "Brazil"),
    "GIG": ("Rio de Janeiro", "Brazil"),
    "EZE": ("Buenos Aires", "Argentina"),
    "LIM": ("Lima", "Peru"),
    "JNB": ("Johannesburg", "South Africa"),
    "CPT": ("Cape Town", "South Africa"),
    "CAI": ("Cairo", "Egypt"),
    "RAK": ("Marrakech", "Morocco"),
}


def is_airport_code(code: str) -> bool:
    """Three ASCII letters, any case."""
    return bool(code) and len(code) == 3 and code.isascii() and code.isalpha()


def iata_to_city(code: str) -> Optional[str]:
    entry = _AIRPORTS.get((code or "").strip().upper())
    return entry[0] if entry else None


def iata_to_country(code: str) -> Optional[str]:
    entry = _AIRPORTS.get((code or "").strip().upper())
    return entry[1] if entry else None
