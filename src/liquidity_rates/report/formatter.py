"""Rich console formatter for one-off reports."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..domain import NetworkResult


def _format_usd(value: float) -> str:
    return f"${value:,.2f}"


def _truncate_address(address: str) -> str:
    """Truncate address for display."""
    return f"{address[:10]}...{address[-4:]}"


def build_network_table(result: NetworkResult) -> Table:
    table = Table(expand=True, show_lines=False)
    table.add_column("Asset", style="cyan", no_wrap=True)
    table.add_column("Address", style="dim")
    table.add_column("Balance", justify="right")
    table.add_column("Price", justify="right", style="yellow")
    table.add_column("Value", justify="right", style="green")
    table.add_column("APY", justify="right", style="magenta")

    for asset in result.assets:
        table.add_row(
            f"{asset.symbol} ({asset.name})" if asset.name != asset.symbol else asset.symbol,
            _truncate_address(asset.underlying_asset),
            f"{asset.token_balance:,.6f}",
            _format_usd(asset.price_in_usd),
            _format_usd(asset.balance_in_usd),
            f"{asset.liquidity_rate:.2f}%",
        )

    table.add_row(
        "[bold]TOTAL[/]",
        "",
        "",
        "",
        f"[bold]{_format_usd(result.total_balance_usd)}[/]",
        "",
        style="bold",
    )
    return table


def format_report_table(
    results: list[NetworkResult], console: Console | None = None
) -> None:
    """Print one panel per network plus a grand total to the console.

    Args:
        results: Network results from one aggregation pass
        console: Console to print to; stdout when omitted
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No deposits found on any configured network.[/]")
        return

    for result in results:
        console.print(
            Panel(
                build_network_table(result),
                title=f"[bold]{result.network_name}[/]",
                border_style="blue",
            )
        )

    grand_total = sum(result.total_balance_usd for result in results)
    console.print(f"[bold green]Total across networks: {_format_usd(grand_total)}[/]")
