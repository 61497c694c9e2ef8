"""CLI commands for rpcgate.

Entry point registering the top-level commands: serve, status, call.
"""

import typer
from rich.console import Console
from rich.table import Table

from rpcgate import __logo__, __version__
from rpcgate.cli.shared.http_utils import (
    build_rpc_request,
    get_rpc_url,
    parse_params,
    parse_request_id,
    rpc_post,
)
from rpcgate.cli.shared.logging_utils import configure_logging
from rpcgate.cli.shared.network_utils import is_port_in_use

app = typer.Typer(
    name="rpcgate",
    help=f"{__logo__} rpcgate - JSON-RPC 2.0 dispatcher over HTTP",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} rpcgate v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """rpcgate - JSON-RPC 2.0 dispatcher over HTTP."""
    pass


@app.command()
def serve(
    setup: list[str] = typer.Option(
        [], "--setup", "-s", help="Method setup hook 'module:attr' (repeatable)"
    ),
    host: str | None = typer.Option(None, "--host", "-h", help="Bind host (default from config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (default from config)"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging"),
):
    """Start the JSON-RPC HTTP server."""
    from rpcgate.api.rpc.service import RpcService
    from rpcgate.api.server import create_app, run_server
    from rpcgate.cli.shared.setup_utils import load_setup_hook
    from rpcgate.config.access import get_config
    from rpcgate.utils.exceptions import DuplicateMethodError

    config = get_config()
    host = host or config.server.host
    port = port or config.server.port
    if is_port_in_use(host, port):
        console.print(
            f"[red]Port {port} is already in use.[/red] "
            f"Use [cyan]--port[/cyan] to choose another one (current: {host}:{port})."
        )
        raise typer.Exit(1)

    log_path = configure_logging(config.logging, command="serve", verbose=verbose)
    if log_path:
        console.print(f"[dim]Logs: {log_path}[/dim]")

    service = RpcService.from_config(config)
    for target in setup:
        try:
            load_setup_hook(target)(service)
        except (ImportError, ValueError, DuplicateMethodError) as e:
            console.print(f"[red]Setup hook {target} failed:[/red] {e}")
            raise typer.Exit(1)

    if not len(service.registry):
        console.print("[yellow]No methods registered; every call will return -32601.[/yellow]")

    console.print(f"{__logo__} Starting rpcgate on {host}:{port}{config.server.path}")
    console.print(f"[green]✓[/green] Methods: {', '.join(service.registry.names()) or '(none)'}")
    run_server(
        create_app(service, config),
        host=host,
        port=port,
        log_level="debug" if verbose else config.server.log_level,
    )


@app.command()
def status():
    """Show rpcgate configuration."""
    from rpcgate.config.loader import get_config_path, load_config

    config_path = get_config_path()
    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"{__logo__} rpcgate Status\n")
    console.print(f"Config: {config_path} {'[green]✓[/green]' if config_path.exists() else '[dim](defaults)[/dim]'}")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("Bind", f"{config.server.host}:{config.server.port}")
    table.add_row("Path", config.server.path)
    table.add_row("Accept", ", ".join(config.rpc.accept))
    table.add_row("Enforce content type", "yes" if config.rpc.enforce_content_type else "no")
    table.add_row("Log level", config.logging.level)
    console.print(table)


@app.command()
def call(
    method: str = typer.Argument(..., help="Method name"),
    params: str | None = typer.Argument(None, help="Params as JSON"),
    url: str | None = typer.Option(None, "--url", "-u", help="RPC endpoint (default from config)"),
    request_id: str = typer.Option("1", "--id", help="Request id; JSON scalars are sent typed"),
    timeout: float = typer.Option(10.0, "--timeout", help="HTTP timeout in seconds"),
):
    """Send one JSON-RPC request and print the response."""
    import httpx

    from rpcgate.config.access import get_config

    try:
        payload = build_rpc_request(method, parse_params(params), parse_request_id(request_id))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    target = url or get_rpc_url(get_config())
    try:
        status_code, body = rpc_post(target, payload, timeout=timeout)
    except httpx.HTTPError as e:
        console.print(f"[red]Request to {target} failed:[/red] {e}")
        raise typer.Exit(1)

    if isinstance(body, str):
        console.print(body, markup=False)
    else:
        console.print_json(data=body)
    if status_code != 200 or (isinstance(body, dict) and "error" in body):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
