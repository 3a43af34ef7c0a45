from __future__ import annotations

from .aave_v3 import AaveV3Adapter
from .base import BaseLendingAdapter

__all__ = ["AaveV3Adapter", "BaseLendingAdapter"]
