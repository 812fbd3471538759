"""Device-local preference commands."""

import click

from ..config import settings
from ..session.storage import LocalStorage
from ..session.store import NotificationPermission, Preferences
from .base import echo_success


def _preferences() -> Preferences:
    return Preferences(LocalStorage(settings.storage_dir))


@click.group()
def prefs():
    """Rest timer and notification preferences."""


@prefs.command()
def show():
    """Show current preferences."""
    current = _preferences()
    click.echo(f"Rest timer:    {'on' if current.rest_timer_enabled else 'off'}")
    click.echo(f"Notifications: {current.notification_permission.value}")


@prefs.command()
@click.argument("state", type=click.Choice(["on", "off"]))
def timer(state: str):
    """Turn the 90-second rest timer on or off."""
    _preferences().rest_timer_enabled = state == "on"
    echo_success(f"Rest timer {state}")


@prefs.command()
@click.argument("permission", type=click.Choice([p.value for p in NotificationPermission]))
def notifications(permission: str):
    """Allow or deny rest-over notifications."""
    _preferences().notification_permission = NotificationPermission(permission)
    echo_success(f"Notifications {permission}")
