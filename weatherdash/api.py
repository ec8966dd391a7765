"""Weather Dashboard API: serves widget descriptors and accepts user intents."""

from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from weatherdash.config.schema import DashboardConfig
from weatherdash.models.common import TemperatureUnit, utc_now_iso
from weatherdash.models.widget import Intent, IntentKind
from weatherdash.reporting.formatters import widget_to_dict
from weatherdash.session import DashboardSession


class SearchRequest(BaseModel):
    query: str


class UnitRequest(BaseModel):
    unit: TemperatureUnit


class IntentRequest(BaseModel):
    kind: IntentKind
    query: str | None = None
    unit: TemperatureUnit | None = None


def dashboard_payload(session: DashboardSession) -> dict:
    state = session.state
    return {
        "location": state.location_name,
        "coordinate": asdict(state.coordinate) if state.coordinate else None,
        "loading": state.loading,
        "error": state.error,
        "unit": state.unit.value,
        "widgets": [widget_to_dict(w) for w in session.widgets()],
    }


def create_app(
    config: DashboardConfig | None = None,
    session: DashboardSession | None = None,
) -> FastAPI:
    config = config or DashboardConfig()
    session = session or DashboardSession.from_config(config)

    app = FastAPI(title="Weather Dashboard", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.session = session

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/dashboard")
    async def get_dashboard():
        """Current state and the four widgets. Loads on first request."""
        state = session.state
        if state.coordinate is None and state.snapshot is None and not state.loading:
            await session.load()
        return dashboard_payload(session)

    @app.get("/api/health")
    def get_health():
        state = session.state
        return {
            "status": "ok",
            "has_snapshot": state.snapshot is not None,
            "error": state.error,
            "timestamp": utc_now_iso(),
        }

    @app.get("/api/config")
    def get_config():
        return config.model_dump(mode="json")

    # ── Intent endpoints ────────────────────────────────────────────

    @app.post("/api/refresh")
    async def refresh():
        await session.refresh()
        return dashboard_payload(session)

    @app.post("/api/reload")
    async def reload():
        await session.reload()
        return dashboard_payload(session)

    @app.post("/api/search")
    async def search(request: SearchRequest):
        await session.search(request.query)
        return dashboard_payload(session)

    @app.post("/api/unit")
    def set_unit(request: UnitRequest):
        session.set_unit(request.unit)
        return dashboard_payload(session)

    @app.post("/api/intent")
    async def dispatch(request: IntentRequest):
        if request.kind == IntentKind.SET_UNIT and request.unit is None:
            raise HTTPException(422, "set_unit intent requires a unit")
        await session.dispatch(
            Intent(kind=request.kind, query=request.query, unit=request.unit)
        )
        return dashboard_payload(session)

    return app


if __name__ == "__main__":
    import uvicorn

    default_config = DashboardConfig()
    uvicorn.run(
        create_app(default_config),
        host=default_config.server.host,
        port=default_config.server.port,
    )
