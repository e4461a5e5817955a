# agrisat/aggregator.py
"""Division Data Aggregator: the one entry point callers use.

Runs the three analyzers concurrently and merges them with the static
location and flood-risk tables. All-or-nothing: the first analyzer failure
fails the whole call.
"""
import asyncio
import logging
from typing import List, Optional

from . import analyzers, config
from .divisions import DIVISIONS, SUPPORTED_DIVISIONS, normalize_division
from .flood import FLOOD_RISK, flood_risk
from .schemas import Analysis, DivisionData, Indicators

logger = logging.getLogger(__name__)


def _check_tables() -> None:
    # every supported division needs a descriptor and a flood entry
    missing = set(DIVISIONS) ^ set(FLOOD_RISK)
    if missing:
        raise RuntimeError(f"Division tables out of sync: {sorted(missing)}")


_check_tables()


def available_divisions() -> List[str]:
    return list(SUPPORTED_DIVISIONS)


async def get_division_data(division: str, data_dir: Optional[str] = None) -> DivisionData:
    key = normalize_division(division)  # raises before any file is touched
    data_dir = data_dir or config.DATA_DIR
    logger.info("fetching division data for %s from %s", key, data_dir)

    # pandas reads block, so each analyzer runs in its own worker thread
    soil, temp, veg = await asyncio.gather(
        asyncio.to_thread(analyzers.analyze_soil_moisture, key, data_dir),
        asyncio.to_thread(analyzers.analyze_temperature, key, data_dir),
        asyncio.to_thread(analyzers.analyze_vegetation, key, data_dir),
    )

    return DivisionData(
        location=DIVISIONS[key],
        nasa_data=Indicators(
            soil_moisture_anomaly=soil.normalized_output,
            temperature_anomaly_c=temp.normalized_output,
            vegetation_index=veg.normalized_output,
            flood_risk_probability=flood_risk(key),
        ),
        analysis=Analysis(soil_moisture=soil, temperature=temp, vegetation=veg),
    )


async def get_rajshahi_data(data_dir: Optional[str] = None) -> DivisionData:
    """Backward-compatible single-division form."""
    return await get_division_data(config.LEGACY_DIVISION, data_dir)
