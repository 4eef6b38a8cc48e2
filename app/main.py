import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from app.models.schemas import StationReading
from app.routes import stations, alerts, risk, history
from app.services import snapshot

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

app = FastAPI(
    title="Sri Lanka River Watch API",
    description="Normalized river gauge readings, alert tiers and an overall flood risk score for Sri Lanka. "
                "Data sourced from nuuuwan/lk_irrigation with nuuuwan/lk_dmc_vis as fallback.",
    version="1.0.0",
    contact={
        "name": "GitHub Repository",
        "url": "https://github.com/nuuuwan/lk_irrigation",
    },
    license_info={
        "name": "MIT",
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(stations.router, prefix="/stations", tags=["Stations"])
app.include_router(alerts.router, prefix="/alerts", tags=["Alerts"])
app.include_router(risk.router, prefix="/risk", tags=["Flood Risk"])
app.include_router(history.router, prefix="/history", tags=["History"])


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/docs")


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "service": "lk-river-watch",
        "data_source": "https://github.com/nuuuwan/lk_irrigation",
    }


@app.post("/refresh", response_model=list[StationReading], tags=["Stations"])
async def refresh():
    """Discard the held snapshot and fetch fresh readings."""
    return await snapshot.refresh_snapshot()
