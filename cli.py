"""CLI commands for the guest list API."""

import typer
import uvicorn
from fastapi.routing import APIRoute

from src.config.settings import settings

app = typer.Typer(help="CLI commands for the guest list API")


@app.command()
def serve(
    host: str = typer.Option(
        settings.host,
        "--host",
        help="Interface to bind",
    ),
    port: int = typer.Option(
        settings.port,
        "--port",
        "-p",
        help="Port to listen on (defaults to the PORT environment variable or 5000)",
    ),
    reload: bool = typer.Option(
        False,
        "--reload",
        help="Restart the server when source files change",
    ),
):
    """Serve the API with uvicorn. State lives in memory and is lost on exit."""
    typer.secho(f"Serving guest list API on http://{host}:{port}", fg=typer.colors.GREEN)
    uvicorn.run("src.main:app", host=host, port=port, reload=reload)


@app.command()
def routes():
    """List every HTTP method and path the API serves."""
    from src.main import app as api

    for route in api.routes:
        if not isinstance(route, APIRoute):
            continue
        methods = ", ".join(sorted(route.methods))
        typer.secho(f"  {methods:<8} {route.path}", fg=typer.colors.BLUE)


if __name__ == "__main__":
    app()
