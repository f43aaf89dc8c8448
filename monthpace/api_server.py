"""HTTP surface exposing the change and projection calculations.

Every endpoint takes and returns JSON:

* ``POST /change`` classifies a value against a reference.
* ``POST /projection/linear`` projects a running total uniformly.
* ``POST /projection/seasonal`` projects daily values using weekday averages.
* ``GET /health`` for liveness checks.

Daily series are posted as objects keyed by ISO date with numeric values.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Dict, Optional

from aiohttp import web

from .calendar_utils import to_date
from .change import PercentageChangeCalculator
from .config import Settings, configure_logging
from .errors import MonthPaceError
from .projector import MonthlyProjector

LOGGER = logging.getLogger("monthpace.api")


def _number(payload: Dict[str, Any], field: str, *, required: bool = True) -> Optional[float]:
    value = payload.get(field)
    if value is None:
        if required:
            raise web.HTTPBadRequest(text=f"Missing {field}")
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise web.HTTPBadRequest(text=f"{field} must be a number")
    return float(value)


def _series(payload: Dict[str, Any], field: str, *, required: bool = True) -> Dict[str, float]:
    series = payload.get(field)
    if series is None:
        if required:
            raise web.HTTPBadRequest(text=f"Missing {field}")
        return {}
    if not isinstance(series, dict):
        raise web.HTTPBadRequest(text=f"{field} must be an object keyed by ISO date")
    for key, value in series.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise web.HTTPBadRequest(text=f"{field}[{key}] must be a number")
    return series


def _reference_date(payload: Dict[str, Any]) -> date:
    raw = payload.get("reference_date")
    if raw is None:
        return date.today()
    return to_date(raw)


@web.middleware
async def error_middleware(request: web.Request, handler) -> web.StreamResponse:
    """Render client errors as ``{"error": ...}`` JSON bodies."""

    try:
        return await handler(request)
    except web.HTTPBadRequest as exc:
        return web.json_response({"error": exc.text}, status=exc.status)
    except MonthPaceError as exc:
        LOGGER.info("Rejected %s %s: %s", request.method, request.path, exc)
        return web.json_response({"error": str(exc)}, status=400)


class MonthPaceApplication:
    """Encapsulates the aiohttp application and its handlers."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.calculator = PercentageChangeCalculator(self.settings.equality_threshold)
        self.projector = MonthlyProjector()
        self.app = web.Application(middlewares=[error_middleware])
        self.app.router.add_get("/health", self.handle_health)
        self.app.router.add_post("/change", self.handle_change)
        self.app.router.add_post("/projection/linear", self.handle_linear)
        self.app.router.add_post("/projection/seasonal", self.handle_seasonal)

    async def _read_json(self, request: web.Request) -> Dict[str, Any]:
        try:
            payload = await request.json()
        except json.JSONDecodeError as exc:
            raise web.HTTPBadRequest(text=f"Invalid JSON payload: {exc}") from exc
        if not isinstance(payload, dict):
            raise web.HTTPBadRequest(text="Invalid payload: expected object")
        return payload

    async def handle_health(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok"})

    async def handle_change(self, request: web.Request) -> web.Response:
        payload = await self._read_json(request)
        data = _number(payload, "data")
        reference = _number(payload, "reference")
        threshold = _number(payload, "equality_threshold", required=False)

        result = self.calculator.compute_change(data, reference, threshold)
        return web.json_response(result.to_dict())

    async def handle_linear(self, request: web.Request) -> web.Response:
        payload = await self._read_json(request)
        total_so_far = _number(payload, "total_so_far")
        reference = _reference_date(payload)

        projected = self.projector.extrapolate_linear(total_so_far, reference)
        return web.json_response({"reference_date": reference.isoformat(), "projected_total": projected})

    async def handle_seasonal(self, request: web.Request) -> web.Response:
        payload = await self._read_json(request)
        current = _series(payload, "current")
        fallback = _series(payload, "fallback", required=False)
        reference = _reference_date(payload)

        projected = self.projector.extrapolate_seasonal(current, fallback, float, reference)
        LOGGER.info(
            "Seasonal projection for %s from %d current and %d fallback day(s): %.2f",
            reference.isoformat(), len(current), len(fallback), projected,
        )
        return web.json_response({"reference_date": reference.isoformat(), "projected_total": projected})


def create_app(settings: Optional[Settings] = None) -> web.Application:
    return MonthPaceApplication(settings).app


def main() -> None:
    settings = Settings.from_environment()
    configure_logging(settings)
    web.run_app(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
