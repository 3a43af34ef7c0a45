"""HTTP layer serving the aggregated liquidity rates.

Usage:
  liquidity-rates serve --port 3000
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .pipeline import collect_liquidity_rates
from .state import AppState


def create_app(state: AppState) -> FastAPI:
    """Build the FastAPI application bound to one AppState."""
    app = FastAPI(title="Liquidity Rates API", version="0.1.0")
    app.state.liquidity_rates = state

    @app.get("/health")
    def health(request: Request) -> dict[str, Any]:
        settings = request.app.state.liquidity_rates.settings
        return {
            "ok": True,
            "wallet": settings.wallet_address,
            "networks": [network.value for network in settings.networks],
        }

    @app.get("/api/liquidity-rates")
    async def liquidity_rates(request: Request) -> Response:
        app_state: AppState = request.app.state.liquidity_rates
        app_state.logger.info("Received liquidity rates request")
        try:
            results = await collect_liquidity_rates(app_state)
            return JSONResponse([result.to_dict() for result in results])
        except Exception:
            # Details stay in the server log.
            app_state.logger.exception("Error in API route")
            return PlainTextResponse("Internal Server Error", status_code=500)

    return app
