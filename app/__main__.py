"""Run the API with uvicorn: ``python -m app``."""

import uvicorn

from .config import get_host, get_log_level, get_port

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=get_host(), port=get_port(), log_level=get_log_level().lower())
