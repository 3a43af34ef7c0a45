from __future__ import annotations

from rich.console import Console

from liquidity_rates.constants import Network
from liquidity_rates.domain import AssetResult, NetworkResult
from liquidity_rates.report.formatter import format_report_table


def _console() -> Console:
    return Console(record=True, width=160, force_terminal=False)


def test_format_report_table_renders_networks_and_total():
    result = NetworkResult(
        network=Network.BASE,
        network_name="Base",
        network_image="https://img.example/base.png",
        assets=[
            AssetResult(
                underlying_asset="0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
                symbol="USDC",
                name="USD Coin",
                token_balance=1234.5,
                price_in_usd=1.0,
                balance_in_usd=1234.5,
                liquidity_rate=4.321,
                image_url=None,
            )
        ],
        total_balance_usd=1234.5,
    )
    console = _console()

    format_report_table([result], console=console)

    output = console.export_text()
    assert "Base" in output
    assert "USDC (USD Coin)" in output
    assert "$1,234.50" in output
    assert "4.32%" in output
    assert "Total across networks: $1,234.50" in output


def test_format_report_table_without_results():
    console = _console()

    format_report_table([], console=console)

    assert "No deposits found" in console.export_text()
