# agrisat/divisions.py
from typing import Dict

from .errors import UnknownDivisionError
from .schemas import Coordinates, DivisionDescriptor

# Static reference data; not derived from the sensor files.
DIVISIONS: Dict[str, DivisionDescriptor] = {
    "rajshahi": DivisionDescriptor(
        name="Rajshahi",
        country="Bangladesh",
        coordinates=Coordinates(lat=24.3745, lon=88.6042),
        climate="Subtropical monsoon",
        main_crop="Wheat",
    ),
    "barishal": DivisionDescriptor(
        name="Barishal",
        country="Bangladesh",
        coordinates=Coordinates(lat=22.7010, lon=90.3535),
        climate="Tropical monsoon",
        main_crop="Rice",
    ),
    "khulna": DivisionDescriptor(
        name="Khulna",
        country="Bangladesh",
        coordinates=Coordinates(lat=22.8456, lon=89.5403),
        climate="Tropical monsoon",
        main_crop="Shrimp & Rice",
    ),
    "sylhet": DivisionDescriptor(
        name="Sylhet",
        country="Bangladesh",
        coordinates=Coordinates(lat=24.8910, lon=91.8697),
        climate="Subtropical highland",
        main_crop="Tea",
    ),
    "chittagong": DivisionDescriptor(
        name="Chittagong",
        country="Bangladesh",
        coordinates=Coordinates(lat=22.3569, lon=91.7832),
        climate="Tropical monsoon",
        main_crop="Rice",
    ),
    "rangpur": DivisionDescriptor(
        name="Rangpur",
        country="Bangladesh",
        coordinates=Coordinates(lat=25.7439, lon=89.2752),
        climate="Subtropical",
        main_crop="Potato & Wheat",
    ),
}

SUPPORTED_DIVISIONS = tuple(DIVISIONS)


def normalize_division(division: str) -> str:
    """Lower-case ``division`` and check it against the supported set."""
    key = (division or "").lower()
    if key not in DIVISIONS:
        raise UnknownDivisionError(
            f"Division '{division}' not found. Available divisions: {', '.join(SUPPORTED_DIVISIONS)}"
        )
    return key


def division_dirname(division: str) -> str:
    # data directories are named after the capitalized division
    return division[:1].upper() + division[1:]
