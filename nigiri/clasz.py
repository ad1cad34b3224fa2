"""Transport classes and bit masks over them."""

from __future__ import annotations

import enum

from nigiri.log import LogLevel, log


class Clasz(enum.IntEnum):
    """Category of a transport, ordered roughly from fastest to slowest."""

    AIR = 0
    HIGH_SPEED = 1
    LONG_DISTANCE = 2
    COACH = 3
    NIGHT = 4
    REGIONAL_FAST = 5
    REGIONAL = 6
    METRO = 7
    SUBWAY = 8
    TRAM = 9
    BUS = 10
    SHIP = 11
    OTHER = 12


_NAMES: dict[Clasz, tuple[str, ...]] = {
    Clasz.AIR: (
        "Flug", "Air", "International Air", "Domestic Air",
        "Intercontinental Air", "Domestic Scheduled Air", "Shuttle Air",
        "Intercontinental Charter Air", "International Charter Air",
        "Round-Trip Charter Air", "Sightseeing Air", "Helicopter Air",
        "Domestic Charter Air", "Schengen-Area Air", "Airship", "All Airs",
    ),
    Clasz.HIGH_SPEED: ("High Speed Rail", "ICE", "THA", "TGV", "RJ", "RJX"),
    Clasz.LONG_DISTANCE: (
        "Long Distance Trains", "Inter Regional Rail", "Eurocity", "EC", "IC",
        "EX", "EXT", "D", "InterRegio", "Intercity",
    ),
    Clasz.COACH: (
        "Coach", "International Coach", "National Coach", "Shuttle Coach",
        "Regional Coach", "Special Coach", "Sightseeing Coach",
        "Tourist Coach", "Commuter Coach", "All Coachs", "EXB",
    ),
    Clasz.NIGHT: (
        "Sleeper Rail", "CNL", "EN", "Car Transport Rail",
        "Lorry Transport Rail", "Vehicle Transport Rail", "AZ", "NJ",
    ),
    Clasz.REGIONAL_FAST: (
        "RE", "REX", "IR", "IRE", "X", "DPX", "E", "Sp", "RegioExpress",
        "TER", "TE2", "Cross-Country Rail",
    ),
    Clasz.REGIONAL: (
        "Railway Service", "Regional Rail", "Tourist Railway",
        "Rail Shuttle (Within Complex)", "Replacement Rail", "Special Rail",
        "Rack and Pinion Railway", "Additional Rail", "All Rails", "DPN", "R",
        "DPF", "RB", "Os", "Regionalzug", "RZ", "CC", "PE",
    ),
    Clasz.METRO: ("S", "S-Bahn", "SB", "Metro", "Schnelles Nachtnetz", "SN"),
    Clasz.SUBWAY: ("U", "STB", "M"),
    Clasz.TRAM: ("Tram", "STR", "Str", "T"),
    Clasz.BUS: ("Bus", "B", "BN", "BP", "CAR", "KB"),
    Clasz.SHIP: (
        "Schiff", "Fähre", "BAT", "KAT", "Ferry", "Water Transport",
        "International Car Ferry", "National Car Ferry",
        "Regional Car Ferry", "Local Car Ferry",
        "International Passenger Ferry", "National Passenger Ferry",
        "Regional Passenger Ferry", "Local Passenger Ferry", "Post Boat",
        "Train Ferry", "Road-Link Ferry", "Airport-Link Ferry",
        "Car High-Speed Ferry", "Passenger High-Speed Ferry",
        "Sightseeing Boat", "School Boat", "Cable-Drawn Boat", "River Bus",
        "Scheduled Ferry", "Shuttle Ferry", "All Water Transports",
    ),
    Clasz.OTHER: (
        "ZahnR", "Schw-B", "EZ", "Taxi", "ALT", "AST", "RFB", "RT",
        "Communal Taxi", "Water Taxi", "Rail Taxi", "Bike Taxi",
        "Licensed Taxi", "Private Hire Vehicle", "All Taxis", "Self Drive",
        "Hire Car", "Hire Van", "Hire Motorbike", "Hire Cycle",
        "All Self-Drive Vehicles", "Car train", "GB", "PB", "FUN",
        "Funicular", "Telecabin", "Cable Car", "Chair Lift", "Drag Lift",
        "Small Telecabin", "All Telecabins", "All Funicular", "Drahtseilbahn",
        "Standseilbahn", "Sesselbahn", "Gondola", "Aufzug", "Elevator", "ASC",
    ),
}

_BY_NAME: dict[str, Clasz] = {
    name: clasz for clasz, names in _NAMES.items() for name in names
}

_MASK_BITS = 16


def get_clasz(s: str) -> Clasz:
    """Map a category name to its class; unknown names log an error and give OTHER."""
    try:
        return _BY_NAME[s]
    except KeyError:
        log(LogLevel.ERROR, "loader.hrd.clasz", "cannot assign {}", s)
        return Clasz.OTHER


def all_clasz_allowed() -> int:
    """Mask with every class allowed."""
    return (1 << _MASK_BITS) - 1


def to_mask(c: Clasz) -> int:
    """Mask with only ``c`` allowed."""
    return 1 << int(c)


def is_allowed(mask: int, c: Clasz) -> bool:
    """Whether ``mask`` allows class ``c``."""
    bit = to_mask(c)
    return mask & bit == bit