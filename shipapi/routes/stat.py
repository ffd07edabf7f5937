"""Service status and version endpoints"""

from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
import tomli

from shipapi.config import settings

PYPROJECT_PATH = Path(__file__).resolve().parents[2] / "pyproject.toml"

router = APIRouter()


@lru_cache(maxsize=1)
def get_version() -> str:
    """Project version from pyproject.toml, or "unknown" outside a source checkout"""
    try:
        with PYPROJECT_PATH.open("rb") as f:
            project = tomli.load(f).get("project", {})
    except (OSError, tomli.TOMLDecodeError):
        return "unknown"
    return project.get("version", "unknown")


@router.get("/stat")
async def get_stat():
    return {
        "service": "ship-api",
        "version": get_version(),
        "status": "running",
        "store": settings.ship_store,
    }
