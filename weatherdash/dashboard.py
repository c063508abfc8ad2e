"""Weather Dashboard: FastAPI backend serving the current forecast state."""

import asyncio
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from weatherdash.config.loader import load_config
from weatherdash.config.schema import DashboardConfig
from weatherdash.controller import DashboardController, build_controller
from weatherdash.models.common import utc_now_iso
from weatherdash.models.state import Ready
from weatherdash.reporting.formatters import format_state_html, state_to_dict

CONFIG_PATH = Path("weatherdash.yaml")

app = FastAPI(title="Weather Dashboard", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_controller: DashboardController | None = None
_controller_lock: asyncio.Lock | None = None


@lru_cache
def get_config() -> DashboardConfig:
    """Config is read once per process; edits take effect on restart."""
    return load_config(CONFIG_PATH)


async def get_controller(
    config: DashboardConfig = Depends(get_config),
) -> DashboardController:
    """Lazily build and mount the process-wide controller, exactly once."""
    global _controller, _controller_lock
    if _controller is None:
        if _controller_lock is None:
            _controller_lock = asyncio.Lock()
        async with _controller_lock:
            if _controller is None:
                controller = build_controller(config)
                await controller.mount()
                _controller = controller
    return _controller


# ── Data endpoints ──────────────────────────────────────────────


class LocationQuery(BaseModel):
    city: str


@app.get("/api/state")
async def get_state(
    controller: DashboardController = Depends(get_controller),
    config: DashboardConfig = Depends(get_config),
):
    """Current dashboard state: loading, error, or ready with forecast."""
    return state_to_dict(controller.state, config.display.hourly_hours)


@app.post("/api/location")
async def change_location(
    query: LocationQuery,
    controller: DashboardController = Depends(get_controller),
    config: DashboardConfig = Depends(get_config),
):
    """Search a city and switch to it. 404 leaves the dashboard unchanged."""
    if not await controller.search(query.city):
        raise HTTPException(404, f"No location found for {query.city!r}")
    return state_to_dict(controller.state, config.display.hourly_hours)


@app.post("/api/refresh")
async def refresh(
    controller: DashboardController = Depends(get_controller),
    config: DashboardConfig = Depends(get_config),
):
    await controller.refresh()
    return state_to_dict(controller.state, config.display.hourly_hours)


@app.get("/api/health")
async def get_health(controller: DashboardController = Depends(get_controller)):
    """Quick health check."""
    return {
        "status": controller.state.status.value,
        "location": controller.location.display_name,
        "ready": isinstance(controller.state, Ready),
        "timestamp": utc_now_iso(),
    }


# ── Serve dashboard ─────────────────────────────────────────────


@app.get("/", response_class=HTMLResponse)
async def serve_dashboard(
    city: str | None = None,
    controller: DashboardController = Depends(get_controller),
    config: DashboardConfig = Depends(get_config),
):
    if city:
        await controller.search(city)
    return HTMLResponse(
        format_state_html(controller.state, config.display.hourly_hours)
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
