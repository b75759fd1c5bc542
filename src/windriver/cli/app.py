"""winapp — CLI entry point for packaged application lifecycle.

Every command takes an AppUserModelId (``{PackageFamilyName}!{AppId}``).
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Dict

import click

from windriver.cli.formatter import format_package_info, output, output_error
from windriver.config import configure
from windriver.errors import DriverError
from windriver.store.lifecycle import PackageLifecycleController


def _controller(app_user_model_id: str) -> PackageLifecycleController:
    return PackageLifecycleController(app_user_model_id)


def _run(ctx: click.Context, action: Callable[[], Any]) -> Any:
    """Run an action, reporting driver errors and exiting non-zero."""
    try:
        return action()
    except DriverError as e:
        output_error(e.message, ctx.obj["json"])
        sys.exit(1)


# ============================================================================
# CLI Group
# ============================================================================


@click.group()
@click.option("--json", "output_json", is_flag=True, help="JSON output mode")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.option("--driver-name", default=None, help="Folder name used for state backups")
@click.pass_context
def cli(ctx, output_json: bool, verbose: bool, driver_name: str):
    """winapp — packaged application lifecycle for UI automation.

    Typical workflow:
        winapp backup Contoso.App_8wekyb3d8bbwe!App
        winapp activate Contoso.App_8wekyb3d8bbwe!App
        winapp terminate Contoso.App_8wekyb3d8bbwe!App
        winapp restore Contoso.App_8wekyb3d8bbwe!App
    """
    ctx.ensure_object(dict)
    ctx.obj["json"] = output_json
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if driver_name:
        configure(driver_name=driver_name)


@cli.command()
@click.argument("app_user_model_id")
@click.option("--resolve", is_flag=True, help="Also resolve the package full name")
@click.pass_context
def info(ctx, app_user_model_id: str, resolve: bool):
    """Show identity strings and state folders of an application."""
    app = _run(ctx, lambda: _controller(app_user_model_id))

    def _collect() -> Dict[str, Any]:
        identity = app.identity
        data = {
            "app_user_model_id": identity.app_user_model_id,
            "package_family_name": identity.package_family_name,
            "package_name": identity.package_short_name,
            "application_id": identity.application_id,
            "package_data_dir": identity.package_data_dir,
            "backup_state_dir": identity.backup_state_dir,
        }
        if resolve:
            data["package_full_name"] = identity.resolve_full_name()
        return data

    data = _run(ctx, _collect)
    if ctx.obj["json"]:
        output(data, as_json=True)
    else:
        output(format_package_info(data))


@cli.command()
@click.argument("app_user_model_id")
@click.pass_context
def installed(ctx, app_user_model_id: str):
    """Report whether the application's package is installed."""
    app = _run(ctx, lambda: _controller(app_user_model_id))
    is_installed = _run(ctx, app.is_installed)
    output(is_installed, as_json=ctx.obj["json"])
    if not is_installed:
        sys.exit(1)


@cli.command()
@click.argument("app_user_model_id")
@click.pass_context
def activate(ctx, app_user_model_id: str):
    """Launch the application (does not wait for its window)."""
    app = _run(ctx, lambda: _controller(app_user_model_id))
    _run(ctx, app.activate)
    output(f"Activated {app_user_model_id}", as_json=ctx.obj["json"])


@cli.command()
@click.argument("app_user_model_id")
@click.pass_context
def terminate(ctx, app_user_model_id: str):
    """Terminate every process of the application's package."""
    app = _run(ctx, lambda: _controller(app_user_model_id))
    _run(ctx, app.terminate)
    output(f"Terminated {app_user_model_id}", as_json=ctx.obj["json"])


@cli.command()
@click.argument("app_user_model_id")
@click.pass_context
def backup(ctx, app_user_model_id: str):
    """Back up the Settings and LocalState folders."""
    app = _run(ctx, lambda: _controller(app_user_model_id))
    _run(ctx, app.backup_initial_states)
    output(f"Backed up to {app.identity.backup_state_dir}", as_json=ctx.obj["json"])


@cli.command()
@click.argument("app_user_model_id")
@click.pass_context
def restore(ctx, app_user_model_id: str):
    """Restore the Settings and LocalState folders from the backup."""
    app = _run(ctx, lambda: _controller(app_user_model_id))
    _run(ctx, app.restore_initial_states)
    output(f"Restored {app.identity.package_data_dir}", as_json=ctx.obj["json"])


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
