# agrisat/schemas.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field as PydField
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------
# Ingested rows
# ---------------------------
class RawRecord(CamelModel):
    date: str
    mean: Optional[float] = None  # None when the Mean cell is blank or non-numeric
    flag_code: Optional[int] = None
    quality_label: Optional[str] = None


# ---------------------------
# Reference data
# ---------------------------
class Coordinates(CamelModel):
    lat: float = PydField(..., ge=-90, le=90)
    lon: float = PydField(..., ge=-180, le=180)


class DivisionDescriptor(CamelModel):
    name: str
    country: str
    coordinates: Coordinates
    climate: str
    main_crop: str


# ---------------------------
# Analysis output
# ---------------------------
class AnalyzerResult(CamelModel):
    mean_value: float
    max_value: float
    min_value: float
    status_tier: str
    human_message: str
    normalized_output: float
    valid_record_count: int = PydField(..., ge=1)
    # temperature only: display value of the mean in degrees Celsius
    mean_celsius: Optional[float] = None


class Indicators(CamelModel):
    soil_moisture_anomaly: float = PydField(..., alias="smapAnomaly")
    temperature_anomaly_c: float = PydField(..., alias="modisLST")
    vegetation_index: float = PydField(..., alias="ndvi")
    flood_risk_probability: float = PydField(..., alias="floodRisk", ge=0, le=1)


class Analysis(CamelModel):
    soil_moisture: AnalyzerResult
    temperature: AnalyzerResult
    vegetation: AnalyzerResult


class DivisionData(CamelModel):
    location: DivisionDescriptor
    nasa_data: Indicators
    analysis: Analysis


# ---------------------------
# Misc responses
# ---------------------------
class DivisionList(CamelModel):
    available_divisions: List[str]
    human_message: str


class ErrorOut(BaseModel):
    error: str
    human_message: str
