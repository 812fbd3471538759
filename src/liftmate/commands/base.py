"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import settings
from ..context import AppContext
from ..db.repositories import ProfileRepository
from ..errors import LiftmateError, RemoteStoreError
from ..services import TrainerService, build_trainer
from ..session.notifications import NotificationSink


def async_command(f):
    """Decorator to run async Click commands.

    Domain errors are reported as a single error line and exit status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except LiftmateError as e:
            echo_error(str(e))
            raise SystemExit(1) from e

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    if not settings.db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'liftmate init' first."
        )
        ctx.exit(1)


async def load_context() -> AppContext:
    """Build the context for the configured user, in their language."""
    context = AppContext.from_settings(settings)
    try:
        profile = await ProfileRepository(settings.db_path).get(context.user_id)
    except RemoteStoreError:
        return context
    if profile is not None:
        context.language = profile.language
    return context


async def get_trainer(notify: NotificationSink | None = None) -> TrainerService:
    """Build a TrainerService for the current CLI invocation."""
    return build_trainer(await load_context(), notify=notify)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
