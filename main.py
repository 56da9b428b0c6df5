import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import consultations
from app.core.config import settings

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Clinic Consultations API", version="0.1.0")


@app.on_event("startup")
def on_startup() -> None:
    logger.info(
        "Starting consultations API (APP_ENV=%s, clinic UTC offset=%s)",
        settings.app_env,
        settings.clinic_utc_offset_hours if settings.clinic_utc_offset_hours is not None else "server local",
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(consultations.router, prefix="/api", tags=["consultations"])


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
