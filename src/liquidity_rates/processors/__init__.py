from __future__ import annotations

from .positions import build_asset_results, build_network_result, price_position

__all__ = ["build_asset_results", "build_network_result", "price_position"]
