"""Aave V3 deposit aggregation across EVM networks."""
