from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

from agrisat import config
from agrisat.divisions import division_dirname

COMPANION_BODY = "Value,Count\n8,12\n13,3\n"


def write_stats(path: Path, values: Iterable, flags: Optional[Iterable] = None) -> None:
    lines = ["Date,Mean,FlagCode" if flags is not None else "Date,Mean"]
    flags = list(flags) if flags is not None else None
    for i, v in enumerate(values):
        row = f"2024-01-{i + 1:02d},{v}"
        if flags is not None:
            row += f",{flags[i]}"
        lines.append(row)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def make_division(tmp_path: Path) -> Callable[..., Path]:
    """Write a full data directory for one division under tmp_path."""

    def _make(
        division: str = "rajshahi",
        soil: Iterable = (0.32, 0.28, 0.31),
        temp: Iterable = (295.0, 296.0, 297.0),
        veg: Iterable = (0.55, 0.6, 0.5),
        skip: Iterable[str] = (),
    ) -> Path:
        ddir = tmp_path / division_dirname(division)
        ddir.mkdir(parents=True, exist_ok=True)
        primaries = {
            config.SOIL_MOISTURE_FILE: soil,
            config.TEMPERATURE_FILE: temp,
            config.VEGETATION_FILE: veg,
        }
        for name, values in primaries.items():
            if name not in skip:
                write_stats(ddir / name, values)
        for name in config.SOIL_MOISTURE_COMPANIONS + config.TEMPERATURE_COMPANIONS + config.VEGETATION_COMPANIONS:
            if name not in skip:
                (ddir / name).write_text(COMPANION_BODY, encoding="utf-8")
        return tmp_path

    return _make
