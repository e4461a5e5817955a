# agrisat/config.py
import os

# ---------------------------
# Configuration
# ---------------------------
# Root holding one directory per division, e.g. ./data/Rajshahi
DATA_DIR = os.getenv("AGRISAT_DATA_DIR", "./data")

LOG_LEVEL = os.getenv("AGRISAT_LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("AGRISAT_CORS_ORIGINS", "*").split(",") if o.strip()]

# The legacy single-division route is pinned to this division
LEGACY_DIVISION = "rajshahi"

# ---------------------------
# Data file names (per division directory)
# ---------------------------
SOIL_MOISTURE_FILE = "geographic-soil-moisture-Statistics.csv"
SOIL_MOISTURE_COMPANIONS = (
    "geographic soil moisture flag statistic.csv",
    "geographic-Soil-Moisture-Retrieval-Data-AM-retrieval-qual-flag-lookup.csv",
)

TEMPERATURE_FILE = "temperature-Statistics.csv"
TEMPERATURE_COMPANIONS = (
    "temperature-QC-Day-Statistics-QA.csv",
    "temperature-QC-Day-lookup.csv",
)

VEGETATION_FILE = "vegetation-Statistics.csv"
VEGETATION_COMPANIONS = (
    "vegetation-250m-16-days-VI-Quality-Statistics-QA.csv",
    "vegetation-250m-16-days-VI-Quality-lookup.csv",
)
