from __future__ import annotations

import pytest

from liquidity_rates.units import apr_to_apy, normalize, ray_mul_scaled, ray_rate_to_apr


def test_normalize_defaults_to_18_decimals():
    assert normalize(10**18) == 1.0
    assert normalize(15 * 10**17) == 1.5


def test_normalize_eight_decimal_price():
    assert normalize(100_012_345, 8) == pytest.approx(1.00012345)


def test_normalize_zero_decimals():
    assert normalize(42, 0) == 42.0


def test_ray_mul_scaled_applies_liquidity_index():
    assert ray_mul_scaled(1000, 105 * 10**25) == 1050


def test_ray_mul_scaled_truncates():
    # 3 * 1.5 = 4.5 -> 4
    assert ray_mul_scaled(3, 15 * 10**26) == 4


def test_scaled_balance_scenario_normalizes_with_token_decimals():
    raw = ray_mul_scaled(1000, 105 * 10**25)
    assert normalize(raw, 6) == pytest.approx(0.00105)


def test_ray_rate_to_apr():
    assert ray_rate_to_apr(3 * 10**25) == pytest.approx(3.0)


def test_apr_to_apy_compounds_daily():
    assert apr_to_apy(3.0) == pytest.approx(3.0453, abs=1e-4)


def test_apr_to_apy_zero_rate():
    assert apr_to_apy(0.0) == 0.0
