# agrisat/flood.py
from typing import Dict

# Static placeholder until a terrain + rainfall model is wired in.
# These numbers are NOT derived from the satellite files.
FLOOD_RISK: Dict[str, float] = {
    "barishal": 0.8,    # coastal
    "khulna": 0.7,      # coastal
    "chittagong": 0.6,  # hilly but coastal
    "sylhet": 0.9,      # floodplain
    "rajshahi": 0.5,    # floodplain, drier
    "rangpur": 0.6,     # floodplain
}

DEFAULT_FLOOD_RISK = 0.5


def flood_risk(division: str) -> float:
    """Flood probability in [0, 1]; unknown divisions get DEFAULT_FLOOD_RISK."""
    return FLOOD_RISK.get((division or "").lower(), DEFAULT_FLOOD_RISK)
