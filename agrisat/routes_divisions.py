# agrisat/routes_divisions.py
from fastapi import APIRouter, Depends

from . import config
from .aggregator import available_divisions, get_division_data, get_rajshahi_data
from .schemas import DivisionData, DivisionList, ErrorOut

# -------- Router --------
router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}}


# -------- Dependencies --------
def get_data_dir() -> str:
    return config.DATA_DIR


# -------- Routes --------
@router.get("/healthz")
def healthz():
    return {"ok": True}


@router.get("/api/nasa-data", response_model=DivisionList)
def list_divisions():
    divisions = available_divisions()
    return DivisionList(
        available_divisions=divisions,
        message=f"Use /api/nasa-data/:division where division is one of: {', '.join(divisions)}",
    )


@router.get("/api/nasa-data/{division}", response_model=DivisionData, responses=ERROR_RESPONSES)
async def division_data(division: str, data_dir: str = Depends(get_data_dir)):
    return await get_division_data(division, data_dir)


@router.get("/api/rajshahi-data", response_model=DivisionData, responses=ERROR_RESPONSES)
async def rajshahi_data(data_dir: str = Depends(get_data_dir)):
    return await get_rajshahi_data(data_dir)
