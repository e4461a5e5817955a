# agrisat/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .errors import DivisionDataError
from .routes_divisions import router as divisions_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------
# FastAPI app
# ---------------------------
app = FastAPI(title="Division Crop Indicators API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DivisionDataError)
async def division_error_handler(request: Request, exc: DivisionDataError):
    if exc.category == "client":
        logger.warning("%s %s: %s", request.url.path, exc.code, exc)
    else:
        logger.error("%s %s: %s", request.url.path, exc.code, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.code, "message": str(exc)})


app.include_router(divisions_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("agrisat.main:app", host="0.0.0.0", port=8000)
