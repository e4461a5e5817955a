from __future__ import annotations

from pathlib import Path

import pytest

from agrisat import config
from agrisat.analyzers import (
    SOIL_MOISTURE,
    TEMPERATURE,
    VEGETATION,
    analyze_soil_moisture,
    analyze_temperature,
    analyze_vegetation,
    classify,
    temperature_quality,
)
from agrisat.errors import DataFileNotFoundError, DataParseError, InsufficientDataError
from agrisat.ingest import load_records

from .conftest import write_stats


@pytest.mark.parametrize(
    "value,status,output",
    [
        (0.30, "Optimal", 0.1),
        (0.299999, "Good", 0.0),
        (0.25, "Good", 0.0),
        (0.249999, "Moderate Stress", -0.15),
        (0.20, "Moderate Stress", -0.15),
        (0.15, "High Stress", -0.3),
        (0.149999, "Critical", -0.4),
        (0.0, "Critical", -0.4),
    ],
)
def test_soil_moisture_ladder(value: float, status: str, output: float) -> None:
    tier = classify(SOIL_MOISTURE, value)
    assert tier.status == status
    assert tier.output == output


@pytest.mark.parametrize(
    "kelvin,status,output",
    [
        (280.0, "Optimal", 0.0),
        (293.0, "Optimal", 0.0),
        (293.01, "Good", 1.0),
        (298.0, "Good", 1.0),
        (303.0, "Moderate Stress", 2.5),
        (308.0, "High Stress", 4.0),
        (308.01, "Critical", 5.0),
    ],
)
def test_temperature_ladder(kelvin: float, status: str, output: float) -> None:
    tier = classify(TEMPERATURE, kelvin)
    assert tier.status == status
    assert tier.output == output


@pytest.mark.parametrize(
    "ndvi,status",
    [
        (0.65, "Excellent"),
        (0.649, "Good"),
        (0.50, "Good"),
        (0.35, "Moderate"),
        (0.20, "Fair"),
        (0.199, "Poor"),
    ],
)
def test_vegetation_ladder(ndvi: float, status: str) -> None:
    assert classify(VEGETATION, ndvi).status == status


def test_classification_is_deterministic() -> None:
    first = [classify(spec, 0.3) for spec in (SOIL_MOISTURE, TEMPERATURE, VEGETATION)]
    second = [classify(spec, 0.3) for spec in (SOIL_MOISTURE, TEMPERATURE, VEGETATION)]
    assert first == second


def test_soil_moisture_drops_out_of_range(make_division) -> None:
    root = make_division(soil=(0.32, 0.28, -0.1, 0.31))

    result = analyze_soil_moisture("rajshahi", str(root))

    assert result.valid_record_count == 3
    assert result.mean_value == pytest.approx(0.303, abs=1e-9)
    assert result.status_tier == "Optimal"
    assert result.normalized_output == 0.1
    assert result.min_value == 0.28
    assert result.max_value == 0.32
    assert "0.303" in result.human_message
    assert result.mean_celsius is None


def test_soil_moisture_above_one_is_dropped(make_division) -> None:
    root = make_division(soil=(1.5, 0.2, 2.0))
    result = analyze_soil_moisture("rajshahi", str(root))
    assert result.valid_record_count == 1
    assert result.max_value == 0.2


def test_soil_moisture_all_invalid(make_division) -> None:
    root = make_division(soil=(-1.0, 1.2, -9999))
    with pytest.raises(InsufficientDataError):
        analyze_soil_moisture("rajshahi", str(root))


def test_temperature_critical_with_celsius(make_division) -> None:
    root = make_division(temp=(310.0, 312.5, 315.0))

    result = analyze_temperature("rajshahi", str(root))

    assert result.status_tier == "Critical"
    assert result.normalized_output == 5.0
    assert result.mean_value == 312.5
    assert result.mean_celsius == pytest.approx(312.5 - 273.15, abs=0.1)
    assert "39.4°C" in result.human_message


def test_temperature_header_only_is_insufficient(make_division) -> None:
    root = make_division(temp=())
    with pytest.raises(InsufficientDataError):
        analyze_temperature("rajshahi", str(root))


def test_vegetation_output_is_rounded_mean(make_division) -> None:
    root = make_division(veg=(0.41234, 0.41234))

    result = analyze_vegetation("rajshahi", str(root))

    assert result.status_tier == "Moderate"
    assert result.normalized_output == 0.412
    assert result.human_message == "Moderate crop health - monitor for stress"


def test_min_mean_max_ordering(make_division) -> None:
    root = make_division(
        soil=(0.11, 0.47, 0.2, 0.33, 0.05),
        temp=(290.1, 301.7, 299.9),
        veg=(0.1, 0.9, 0.45, 0.3),
    )
    for fn in (analyze_soil_moisture, analyze_temperature, analyze_vegetation):
        r = fn("rajshahi", str(root))
        assert r.min_value <= r.mean_value <= r.max_value


def test_non_numeric_means_do_not_count(make_division) -> None:
    root = make_division(veg=("abc", 0.7, ""))
    result = analyze_vegetation("rajshahi", str(root))
    assert result.valid_record_count == 1
    assert result.status_tier == "Excellent"


def test_missing_companion_file_fails(make_division) -> None:
    root = make_division(skip=(config.TEMPERATURE_COMPANIONS[1],))
    with pytest.raises(DataFileNotFoundError):
        analyze_temperature("rajshahi", str(root))


def test_malformed_companion_file_fails(make_division) -> None:
    root = make_division()
    path = Path(root) / "Rajshahi" / config.VEGETATION_COMPANIONS[0]
    path.write_text("", encoding="utf-8")
    with pytest.raises(DataParseError):
        analyze_vegetation("rajshahi", str(root))


def test_poor_quality_flags_still_count(make_division) -> None:
    """Known gap: quality flags are parsed and labelled but never filter records.

    A reading flagged "Poor" contributes to the statistics like any other.
    """
    root = make_division()
    stats = Path(root) / "Rajshahi" / config.TEMPERATURE_FILE
    write_stats(stats, (300.0, 320.0), flags=(17, 161))

    records = load_records(str(root), "rajshahi", config.TEMPERATURE_FILE, temperature_quality)
    assert [r.quality_label for r in records] == ["Excellent", "Poor"]

    result = analyze_temperature("rajshahi", str(root))
    assert result.valid_record_count == 2
    assert result.mean_value == 310.0


def test_exact_ties_round_half_up(make_division) -> None:
    root = make_division(temp=(300.0, 300.5), veg=(0.0625,))

    temp = analyze_temperature("rajshahi", str(root))
    veg = analyze_vegetation("rajshahi", str(root))

    assert temp.mean_value == 300.3
    assert temp.mean_celsius == 27.1
    assert "27.1°C" in temp.human_message
    assert veg.mean_value == 0.063
    assert veg.normalized_output == 0.063
