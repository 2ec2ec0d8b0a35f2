"""
Bundled demonstration dataset.

Ten Brazilian airports, ten enroute fixes, five navaids and four airways
around the Sao Paulo / Rio de Janeiro corridor. Coordinates are
illustrative and must not be used for navigation.
"""

from typing import Dict, List

import pandas as pd

from src.airway_router.schemas.reference import ReferenceTables

AIRPORT_ROWS: List[dict] = [
    {"icao": "SBGR", "name": "Aeroporto Internacional de São Paulo/Guarulhos",
     "lat": -23.4356, "lng": -46.4731, "elevation": 750, "country": "Brasil", "city": "Guarulhos"},
    {"icao": "SBRJ", "name": "Aeroporto Santos Dumont",
     "lat": -22.9111, "lng": -43.1631, "elevation": 3, "country": "Brasil", "city": "Rio de Janeiro"},
    {"icao": "SBSP", "name": "Aeroporto de Congonhas",
     "lat": -23.6261, "lng": -46.6564, "elevation": 802, "country": "Brasil", "city": "São Paulo"},
    {"icao": "SBGL", "name": "Aeroporto Internacional do Rio de Janeiro/Galeão",
     "lat": -22.8089, "lng": -43.2436, "elevation": 28, "country": "Brasil", "city": "Rio de Janeiro"},
    {"icao": "SBBR", "name": "Aeroporto Internacional de Brasília",
     "lat": -15.8711, "lng": -47.9186, "elevation": 1060, "country": "Brasil", "city": "Brasília"},
    {"icao": "SBCF", "name": "Aeroporto Internacional de Belo Horizonte/Confins",
     "lat": -19.6336, "lng": -43.9686, "elevation": 827, "country": "Brasil", "city": "Confins"},
    {"icao": "SBPA", "name": "Aeroporto Internacional de Porto Alegre",
     "lat": -29.9939, "lng": -51.1711, "elevation": 3, "country": "Brasil", "city": "Porto Alegre"},
    {"icao": "SBRF", "name": "Aeroporto Internacional do Recife/Guararapes",
     "lat": -8.1264, "lng": -34.9236, "elevation": 10, "country": "Brasil", "city": "Recife"},
    {"icao": "SBSV", "name": "Aeroporto Internacional de Salvador",
     "lat": -12.9086, "lng": -38.3225, "elevation": 20, "country": "Brasil", "city": "Salvador"},
    {"icao": "SBFL", "name": "Aeroporto Internacional de Florianópolis",
     "lat": -27.6703, "lng": -48.5478, "elevation": 5, "country": "Brasil", "city": "Florianópolis"},
]

FIX_ROWS: List[dict] = [
    {"ident": "AMBET", "lat": -23.1500, "lng": -45.8333},
    {"ident": "DORLU", "lat": -22.7833, "lng": -44.5833},
    {"ident": "GIKPO", "lat": -22.6167, "lng": -44.0000},
    {"ident": "MABSI", "lat": -22.4500, "lng": -43.5000},
    {"ident": "KEBLE", "lat": -23.0000, "lng": -46.0000},
    {"ident": "UVUPU", "lat": -22.8333, "lng": -45.5000},
    {"ident": "POSGA", "lat": -22.6667, "lng": -45.0000},
    {"ident": "RUXER", "lat": -22.5000, "lng": -44.5000},
    {"ident": "NAXOV", "lat": -22.3333, "lng": -44.0000},
    {"ident": "BOBKI", "lat": -22.1667, "lng": -43.5000},
]

NAVAID_ROWS: List[dict] = [
    {"ident": "GRU", "lat": -23.4356, "lng": -46.4731},
    {"ident": "SDU", "lat": -22.9111, "lng": -43.1631},
    {"ident": "CGH", "lat": -23.6261, "lng": -46.6564},
    {"ident": "GIG", "lat": -22.8089, "lng": -43.2436},
    {"ident": "BSB", "lat": -15.8711, "lng": -47.9186},
]

AIRWAY_PATHS: Dict[str, List[str]] = {
    "UZ1": ["AMBET", "DORLU", "GIKPO", "MABSI"],
    "UZ2": ["KEBLE", "UVUPU", "POSGA", "RUXER", "NAXOV", "BOBKI"],
    "UZ3": ["AMBET", "KEBLE", "UVUPU", "DORLU"],
    "UZ4": ["POSGA", "GIKPO", "RUXER", "NAXOV", "MABSI", "BOBKI"],
}


def airway_points_frame(paths: Dict[str, List[str]]) -> pd.DataFrame:
    """
    Flatten ``{airway: [fix, ...]}`` into AirwayPointSchema rows.

    Examples:
        >>> airway_points_frame({"UZ9": ["A", "B"]})
          airway  seq fix
        0    UZ9    0   A
        1    UZ9    1   B
    """
    rows = [
        {"airway": airway, "seq": seq, "fix": fix}
        for airway, points in paths.items()
        for seq, fix in enumerate(points)
    ]
    return pd.DataFrame(rows, columns=["airway", "seq", "fix"])


def load_bundled_tables() -> ReferenceTables:
    """Return fresh, unvalidated DataFrames for the bundled dataset."""
    return ReferenceTables(
        airports=pd.DataFrame(AIRPORT_ROWS),
        fixes=pd.DataFrame(FIX_ROWS),
        navaids=pd.DataFrame(NAVAID_ROWS),
        airway_points=airway_points_frame(AIRWAY_PATHS),
    )
