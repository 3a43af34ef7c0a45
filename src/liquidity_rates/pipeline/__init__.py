from __future__ import annotations

from .network import fetch_network
from .run import collect_liquidity_rates

__all__ = ["collect_liquidity_rates", "fetch_network"]
