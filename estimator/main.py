from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import estimate

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("estimator")

app = FastAPI(
    title=settings.APP_NAME,
    description="Material quantity and pricing engine for panelized wall framing",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimate.router, prefix="/api")

logger.info("%s ready (log level %s)", settings.APP_NAME, settings.LOG_LEVEL)


@app.get("/health")
def health():
    return {"status": "ok", "app": "wall-panel-estimator"}
