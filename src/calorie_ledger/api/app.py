"""FastAPI application factory."""

import logging
from datetime import date

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from calorie_ledger.api.models import AddEntryRequest, ResetRequest
from calorie_ledger.app_logging import configure_logging
from calorie_ledger.containers import AppContainer
from calorie_ledger.domain.charts import ChartSeries, Dashboard
from calorie_ledger.domain.errors import (
    ConfirmationRequiredError,
    EmptyLedgerError,
    LedgerError,
    ValidationError,
)
from calorie_ledger.domain.ledger import FoodEntry
from calorie_ledger.services.charts import daily_series, weekly_series
from calorie_ledger.services.clock import (
    form_defaults,
    format_minute,
    local_now,
    local_today,
)

_ERROR_STATUS: dict[type[LedgerError], int] = {
    ValidationError: 422,
    EmptyLedgerError: 409,
    ConfirmationRequiredError: 400,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Calorie Ledger")
    app.state.container = container

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        logger.info(
            "Rejected request: %s", exc.detail, extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=status_code,
            content={"message": exc.message, "detail": exc.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def request_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = ValidationError(_describe_request_errors(exc))
        return await ledger_error_handler(request, error)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    def dashboard(request: Request) -> dict[str, object]:
        """Return today's and this week's totals with both chart series."""
        state_container: AppContainer = request.app.state.container
        today = local_today(state_container.timezone)
        snapshot = state_container.dashboard_service.snapshot(today)
        return _dashboard_payload(snapshot)

    @app.post("/entries", status_code=status.HTTP_201_CREATED)
    def add_entry(payload: AddEntryRequest, request: Request) -> dict[str, object]:
        """Log a food entry."""
        state_container: AppContainer = request.app.state.container
        timestamp = payload.time
        if timestamp is None:
            timestamp = format_minute(local_now(state_container.timezone))
        added = state_container.entry_editor.add_entry(
            payload.name, payload.calories, timestamp
        )
        return {
            "message": "Food added successfully!",
            "date": added.entry.day.isoformat(),
            "daily_total": added.daily_total,
        }

    @app.post("/entries/undo")
    def undo_last(request: Request) -> dict[str, object]:
        """Remove the most recent entry logged today."""
        state_container: AppContainer = request.app.state.container
        today = local_today(state_container.timezone)
        removed = state_container.entry_editor.undo_last(today)
        return {"message": f"Removed: {removed.name}", "entry": _entry_payload(removed)}

    @app.post("/reset")
    def reset_all(payload: ResetRequest, request: Request) -> dict[str, str]:
        """Delete all saved food data once confirmed."""
        state_container: AppContainer = request.app.state.container
        state_container.entry_editor.reset_all(payload.confirm)
        return {"message": "All data reset!"}

    @app.get("/form/defaults")
    def clear_form(request: Request) -> dict[str, str]:
        """Return cleared form values with the time set to now."""
        state_container: AppContainer = request.app.state.container
        defaults = form_defaults(local_now(state_container.timezone))
        return {
            "name": defaults.name,
            "calories": defaults.calories,
            "time": defaults.time,
            "message": "Inputs cleared.",
        }

    @app.get("/charts/daily")
    def daily_chart(request: Request, day: date | None = None) -> dict[str, object]:
        """Return per-entry calories for a day (today by default)."""
        state_container: AppContainer = request.app.state.container
        ledger = state_container.ledger_store.load()
        resolved_day = day or local_today(state_container.timezone)
        return _series_payload(daily_series(ledger, resolved_day))

    @app.get("/charts/weekly")
    def weekly_chart(request: Request, day: date | None = None) -> dict[str, object]:
        """Return daily totals for the 7 days ending at ``day``."""
        state_container: AppContainer = request.app.state.container
        ledger = state_container.ledger_store.load()
        resolved_day = day or local_today(state_container.timezone)
        return _series_payload(weekly_series(ledger, resolved_day))

    return app


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request."


def _entry_payload(entry: FoodEntry) -> dict[str, object]:
    return {
        "name": entry.name,
        "calories": entry.calories,
        "time": format_minute(entry.time),
    }


def _series_payload(series: ChartSeries) -> dict[str, object]:
    return {
        "type": series.kind,
        "label": series.label,
        "labels": series.labels,
        "values": series.values,
    }


def _dashboard_payload(snapshot: Dashboard) -> dict[str, object]:
    return {
        "today": snapshot.today.isoformat(),
        "daily_total": snapshot.daily_total,
        "weekly_total": snapshot.weekly_total,
        "daily_chart": _series_payload(snapshot.daily_chart),
        "weekly_chart": _series_payload(snapshot.weekly_chart),
    }
