from __future__ import annotations

from decimal import Decimal

from .constants import DAYS_PER_YEAR, RAY


def normalize(value: int, decimals: int = 18) -> float:
    """Convert a fixed-point integer amount into a float.

    Args:
        value: Integer amount expressed with ``decimals`` decimal places.
        decimals: Decimal precision of ``value``.

    Returns:
        ``value / 10**decimals`` as a float.

    Notes:
        - The shift is exact (``Decimal.scaleb``); precision is only lost in
          the final float conversion.
        - Used for token balances and 8-decimal reference prices.
    """
    return float(Decimal(int(value)).scaleb(-int(decimals)))


def ray_mul_scaled(scaled_balance: int, liquidity_index: int) -> int:
    """Turn a scaled aToken balance into the underlying amount.

    Integer division truncates, matching on-chain fixed-point math.
    """
    return int(scaled_balance) * int(liquidity_index) // RAY


def ray_rate_to_apr(liquidity_rate: int) -> float:
    """Ray-scaled annual linear rate expressed as a percentage."""
    return float(liquidity_rate) / 1e27 * 100


def apr_to_apy(apr: float) -> float:
    """Compound an APR (percent) daily and return the APY (percent)."""
    return ((1 + apr / 100 / DAYS_PER_YEAR) ** DAYS_PER_YEAR - 1) * 100
