"""Alpaca Markets CLI.

Usage:
    alpaca-markets clock
    alpaca-markets quote AAPL
    alpaca-markets account
    alpaca-markets trades AAPL --start 2024-01-02T14:30:00Z --end 2024-01-02T14:31:00Z

Credentials come from APCA_API_KEY_ID / APCA_API_SECRET_KEY (or the
ALPACA_MARKETS_* equivalents), optionally through a .env file.

Exit codes: 0=success, 1=error, 2=rate_limit
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from alpaca_markets.config.settings import load_environment
from alpaca_markets.core.errors import AlpacaError, RateLimitError
from alpaca_markets.observability.logger import setup_logging
from alpaca_markets.pagination import make_trades_iterator
from alpaca_markets.rest.client import Client

EXIT_ERROR = 1
EXIT_RATE_LIMIT = 2

app = typer.Typer(
    name="alpaca-markets",
    help="Alpaca brokerage and market data CLI",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool = False) -> None:
    """Route client logs through a rich handler."""
    setup_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        handler=RichHandler(console=err_console, show_path=False),
    )


def _build_client() -> Client:
    # Exported variables win over .env entries
    load_dotenv()
    return Client(load_environment())


def _fail(action: str, error: AlpacaError) -> typer.Exit:
    err_console.print(f"[red]Error {action}: {error}[/red]")
    code = EXIT_RATE_LIMIT if isinstance(error, RateLimitError) else EXIT_ERROR
    return typer.Exit(code=code)


@app.command()
def clock(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
) -> None:
    """Show whether the market is open and the next open/close."""
    _configure_logging(verbose)
    try:
        with _build_client() as client:
            market_clock = client.get_clock()
    except AlpacaError as e:
        raise _fail("getting market clock", e) from e

    state = "[green]OPEN[/green]" if market_clock.is_open else "[yellow]CLOSED[/yellow]"
    console.print(f"Market is currently {state}")
    console.print(f"Current timestamp: {market_clock.timestamp}")
    console.print(f"Next open: {market_clock.next_open}")
    console.print(f"Next close: {market_clock.next_close}")


@app.command()
def quote(
    symbol: Annotated[str, typer.Argument(help="Ticker symbol, e.g. AAPL")],
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
) -> None:
    """Show the latest quote and trade for a symbol."""
    _configure_logging(verbose)
    symbol = symbol.upper()
    try:
        with _build_client() as client:
            latest_quote = client.get_latest_quote(symbol).quote
            latest_trade = client.get_latest_trade(symbol).trade
    except AlpacaError as e:
        raise _fail(f"getting latest data for {symbol}", e) from e

    console.print(f"[bold]Latest quote for {symbol}:[/bold]")
    console.print(f"  Bid: ${latest_quote.bid_price} x {latest_quote.bid_size}")
    console.print(f"  Ask: ${latest_quote.ask_price} x {latest_quote.ask_size}")
    console.print(f"  Timestamp: {latest_quote.timestamp}")
    console.print(f"[bold]Latest trade for {symbol}:[/bold]")
    console.print(f"  Price: ${latest_trade.price}")
    console.print(f"  Size: {latest_trade.size}")
    console.print(f"  Timestamp: {latest_trade.timestamp}")


@app.command()
def account(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
) -> None:
    """Show account balances and trading status."""
    _configure_logging(verbose)
    try:
        with _build_client() as client:
            info = client.get_account()
    except AlpacaError as e:
        raise _fail("getting account information", e) from e

    if info.trading_blocked:
        console.print("[yellow]Account is currently restricted from trading.[/yellow]")

    table = Table(show_header=False)
    table.add_row("Account ID", info.id)
    table.add_row("Account Status", info.status)
    table.add_row("Buying Power", f"${info.buying_power}")
    table.add_row("Cash", f"${info.cash}")
    table.add_row("Equity", f"${info.equity}")
    table.add_row("Currency", info.currency)
    console.print(table)


@app.command()
def trades(
    symbol: Annotated[str, typer.Argument(help="Ticker symbol, e.g. AAPL")],
    start: Annotated[str, typer.Option("--start", help="RFC 3339 start time")] = "",
    end: Annotated[str, typer.Option("--end", help="RFC 3339 end time")] = "",
    limit: Annotated[int, typer.Option("--limit", help="Trades per page")] = 1000,
    max_pages: Annotated[int | None, typer.Option("--max-pages", help="Stop after N pages")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
) -> None:
    """Page through historical trades for a symbol."""
    _configure_logging(verbose)
    symbol = symbol.upper()

    try:
        client = _build_client()
    except AlpacaError as e:
        raise _fail("loading configuration", e) from e

    total = 0
    pages = 0
    with client:
        iterator = make_trades_iterator(client, symbol, start, end, limit)
        while iterator.has_more() and (max_pages is None or pages < max_pages):
            result = iterator.next()
            if not result.is_success:
                raise _fail(f"fetching trades for {symbol}", result.error)
            pages += 1
            total += len(result.data.items)
            if verbose:
                console.print(f"Page {pages}: {len(result.data.items)} trades")

    console.print(f"[green]{total} trades for {symbol} in {pages} page(s)[/green]")
    if iterator.has_more():
        console.print("[yellow]More pages available.[/yellow]")


if __name__ == "__main__":
    app()
