"""FastAPI app: /health, /check, /analyze, /report, /stats, /features."""

from deps import CORSMiddleware, FastAPI

from .routes import (
    analyze_router,
    check_router,
    health_router,
    report_router,
    root_router,
    stats_router,
)
from .startup import configure_logging, validate_config

configure_logging()

app = FastAPI(
    title="Baseline Compatibility Checker API",
    description="Detects web platform features that are not Baseline across Chrome, Firefox, Safari and Edge.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(check_router)
app.include_router(analyze_router)
app.include_router(report_router)
app.include_router(stats_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Warn at startup if .env, TOGETHER_API_KEY or the catalog override is missing."""
    validate_config()
