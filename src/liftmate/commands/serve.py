"""Web server command."""

import click

from .base import ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the web API server.

    Examples:

        # Start on default port (8000)
        liftmate serve

        # Expose to network (all interfaces)
        liftmate serve --host 0.0.0.0

        # Development mode with auto-reload
        liftmate serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    click.echo()
    click.echo(click.style("Starting liftmate web server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        "liftmate.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )
