# agrisat/analyzers.py
"""Signal analyzers: soil moisture (SMAP), land-surface temperature (MODIS LST)
and vegetation (MODIS NDVI).

All three share one shape: read the division's statistics file, drop invalid
readings, take mean/max/min of the ``Mean`` column and classify the mean on a
fixed threshold ladder. Each ladder tier carries the status label, a message
and the normalized value the game consumes.
"""
import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional, Tuple

import numpy as np

from . import config, ingest
from .errors import InsufficientDataError
from .schemas import AnalyzerResult

logger = logging.getLogger(__name__)

KELVIN_OFFSET = 273.15


def _round(x: float, digits: int) -> float:
    # half-up on the exact binary value, so 300.25 -> 300.3 rather than 300.2
    return float(Decimal(x).quantize(Decimal(1).scaleb(-digits), ROUND_HALF_UP))


@dataclass(frozen=True)
class Tier:
    status: str
    message: str
    cutoff: Optional[float] = None  # None marks the fallback tier
    output: Optional[float] = None


@dataclass(frozen=True)
class AnalyzerSpec:
    name: str
    filename: str
    companions: Tuple[str, ...]
    tiers: Tuple[Tier, ...]  # most favorable first
    fallback: Tier
    higher_is_better: bool
    digits: int
    is_valid: Callable[[float], bool]
    quality_labeler: Optional[Callable[[int], str]] = None
    output_is_mean: bool = False
    celsius: bool = False


# ---------------------------
# Quality flag labels
# ---------------------------
def soil_moisture_quality(flag_code: int) -> str:
    if flag_code == 8:
        return "Excellent"
    if flag_code == 9:
        return "Good"
    if flag_code == 7:
        return "Moderate"
    if flag_code in (13, 15):
        return "Poor"
    return "Moderate"


def temperature_quality(flag_code: int) -> str:
    if flag_code in (17, 1, 0):
        return "Excellent"
    if flag_code in (65, 81, 97):
        return "Good"
    if flag_code in (129, 145):
        return "Moderate"
    if flag_code in (2, 161):
        return "Poor"
    return "Moderate"


def _fraction(v: float) -> bool:
    return 0.0 <= v <= 1.0


def _finite(v: float) -> bool:
    return math.isfinite(v)


# ---------------------------
# Ladders (wheat)
# ---------------------------
# cm³/cm³, higher is wetter
SOIL_MOISTURE = AnalyzerSpec(
    name="soil moisture",
    filename=config.SOIL_MOISTURE_FILE,
    companions=config.SOIL_MOISTURE_COMPANIONS,
    tiers=(
        Tier("Optimal", "Perfect soil moisture for wheat growth ({mean:.3f} cm³/cm³)", 0.30, 0.1),
        Tier("Good", "Good soil moisture conditions ({mean:.3f} cm³/cm³)", 0.25, 0.0),
        Tier("Moderate Stress", "Moderate drought stress - consider irrigation ({mean:.3f} cm³/cm³)", 0.20, -0.15),
        Tier("High Stress", "High drought stress - irrigation needed ({mean:.3f} cm³/cm³)", 0.15, -0.3),
    ),
    fallback=Tier("Critical", "Critical drought - immediate irrigation required ({mean:.3f} cm³/cm³)", output=-0.4),
    higher_is_better=True,
    digits=3,
    is_valid=_fraction,
    quality_labeler=soil_moisture_quality,
)

# Kelvin, cooler is better; output is the anomaly in °C
TEMPERATURE = AnalyzerSpec(
    name="temperature",
    filename=config.TEMPERATURE_FILE,
    companions=config.TEMPERATURE_COMPANIONS,
    tiers=(
        Tier("Optimal", "Perfect temperature for wheat growth ({celsius:.1f}°C)", 293.0, 0.0),
        Tier("Good", "Good conditions for wheat ({celsius:.1f}°C)", 298.0, 1.0),
        Tier("Moderate Stress", "Moderate heat stress - monitor closely ({celsius:.1f}°C)", 303.0, 2.5),
        Tier("High Stress", "High heat stress - irrigation needed ({celsius:.1f}°C)", 308.0, 4.0),
    ),
    fallback=Tier("Critical", "Critical heat stress - crop damage likely ({celsius:.1f}°C)", output=5.0),
    higher_is_better=False,
    digits=1,
    is_valid=_finite,
    quality_labeler=temperature_quality,
    celsius=True,
)

# NDVI; the published value is the NDVI mean itself
VEGETATION = AnalyzerSpec(
    name="vegetation",
    filename=config.VEGETATION_FILE,
    companions=config.VEGETATION_COMPANIONS,
    tiers=(
        Tier("Excellent", "Excellent crop health and vigor", 0.65),
        Tier("Good", "Good crop health", 0.50),
        Tier("Moderate", "Moderate crop health - monitor for stress", 0.35),
        Tier("Fair", "Fair crop health - consider intervention", 0.20),
    ),
    fallback=Tier("Poor", "Poor vegetation health - critical intervention needed"),
    higher_is_better=True,
    digits=3,
    is_valid=_finite,
    output_is_mean=True,
)

ANALYZERS = (SOIL_MOISTURE, TEMPERATURE, VEGETATION)


def classify(spec: AnalyzerSpec, value: float) -> Tier:
    """First tier whose cutoff ``value`` satisfies, else the fallback tier."""
    for tier in spec.tiers:
        if spec.higher_is_better and value >= tier.cutoff:
            return tier
        if not spec.higher_is_better and value <= tier.cutoff:
            return tier
    return spec.fallback


def analyze(spec: AnalyzerSpec, division: str, data_dir: str) -> AnalyzerResult:
    records = ingest.load_records(data_dir, division, spec.filename, spec.quality_labeler)
    # Companion QA/lookup files must parse, but they do not feed the filter yet.
    for companion in spec.companions:
        ingest.read_division_csv(data_dir, division, companion)

    values = np.array(
        [r.mean for r in records if r.mean is not None and spec.is_valid(r.mean)],
        dtype="float64",
    )
    if values.size == 0:
        raise InsufficientDataError(f"No valid {spec.name} data found for {division}")

    mean = float(values.mean())
    tier = classify(spec, mean)
    celsius = mean - KELVIN_OFFSET
    output = _round(mean, spec.digits) if spec.output_is_mean else tier.output

    logger.debug("%s %s: mean=%.4f n=%d -> %s", division, spec.name, mean, values.size, tier.status)
    return AnalyzerResult(
        mean_value=_round(mean, spec.digits),
        max_value=_round(float(values.max()), spec.digits),
        min_value=_round(float(values.min()), spec.digits),
        status_tier=tier.status,
        human_message=tier.message.format(mean=_round(mean, 3), celsius=_round(celsius, 1)),
        normalized_output=output,
        valid_record_count=int(values.size),
        mean_celsius=_round(celsius, 1) if spec.celsius else None,
    )


def analyze_soil_moisture(division: str, data_dir: str) -> AnalyzerResult:
    return analyze(SOIL_MOISTURE, division, data_dir)


def analyze_temperature(division: str, data_dir: str) -> AnalyzerResult:
    return analyze(TEMPERATURE, division, data_dir)


def analyze_vegetation(division: str, data_dir: str) -> AnalyzerResult:
    return analyze(VEGETATION, division, data_dir)
