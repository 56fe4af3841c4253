import logging
import os
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from forecast_api import __version__
from forecast_api.errors import register_exception_handlers
from forecast_api.middleware.metrics import PrometheusMiddleware, metrics_endpoint
from forecast_api.endpoints import health, weather_forecast

def _env(*keys: str, default=None):
    for k in keys:
        v = os.getenv(k)
        if v is not None:
            return v
    return default

def _log_level(name: str) -> str:
    name = name.upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"

API_HOST = _env("API_HOST", "HOST", default="0.0.0.0")
API_PORT = int(_env("API_PORT", "PORT", default="8000"))
LOG_LEVEL = _log_level(_env("LOG_LEVEL", default="INFO"))
CORS_ORIGINS = [o.strip() for o in _env("CORS_ORIGINS", default="*").split(",") if o.strip()]
SERVICE_NAME = _env("SERVICE_NAME", default="weather-forecast-api")

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title=SERVICE_NAME,
    version=__version__,
    description="Randomly generated five-day weather forecasts",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Prometheus Metrics Middleware
app.add_middleware(PrometheusMiddleware)

register_exception_handlers(app)

# Register routers
app.include_router(weather_forecast.router)
app.include_router(health.router)

# Metrics endpoint
app.add_route("/metrics", metrics_endpoint, include_in_schema=False)

@app.on_event("startup")
async def startup():
    logger.info(f"✅ {SERVICE_NAME} {__version__} started (log level {LOG_LEVEL})")

@app.on_event("shutdown")
async def shutdown():
    logger.info(f"✅ {SERVICE_NAME} stopped")

@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information."""
    return {
        "message": SERVICE_NAME,
        "version": __version__,
        "docs": "/docs",
        "redoc": "/redoc",
        "openapi": "/openapi.json",
        "health": "/health",
        "metrics": "/metrics"
    }

def main():
    uvicorn.run("forecast_api.app:app", host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower(), reload=False)

if __name__ == "__main__":
    main()
