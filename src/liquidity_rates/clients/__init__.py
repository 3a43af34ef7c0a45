"""HTTP clients for off-chain data sources."""
