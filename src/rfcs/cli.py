"""Typer CLI entrypoint for rfcs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer

from .allocator import allocate_identifier, snapshot_claims
from .config import Config
from .constants import DEFAULT_START_POINT
from .errors import RfcsError
from .identifiers import format_identifier, printable_name
from .repository import ensure_local_repo
from .telemetry import configure_logging
from .workflow import create_rfc, plan_rfc

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Manage numbered RFC documents kept in a git repository.",
    no_args_is_help=True,
)


def _load_config(ctx: typer.Context, apply_env: bool = True) -> Config:
    config_dir: Path | None = (ctx.obj or {}).get("config_dir")
    try:
        config = Config.load(config_dir=config_dir, apply_env=apply_env)
    except RfcsError as exc:
        _fail(exc)
    configure_logging((ctx.obj or {}).get("log_level") or config.log_level)
    return config


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {printable_name(str(exc))}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory (default: $RFCS_CONFIG_DIR or ~/.config/rfcs).",
        file_okay=False,
        dir_okay=True,
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Log level for messages on stderr (default: $LOG_LEVEL or INFO).",
    ),
) -> None:
    ctx.obj = {"config_dir": config_dir, "log_level": log_level}


@app.command("list")
def list_rfcs(
    ctx: typer.Context,
    branches: bool = typer.Option(
        False,
        "--branches",
        help="Also list local branches that claim an RFC number.",
    ),
) -> None:
    """List the RFC documents in the repository."""
    config = _load_config(ctx)
    try:
        checkout = ensure_local_repo(config)
        claims = snapshot_claims(checkout, config.extensions)
    except RfcsError as exc:
        _fail(exc)

    for doc in claims.documents:
        typer.echo(printable_name(doc.path.as_posix()))
    if branches:
        for branch in claims.branches:
            typer.echo(f"{printable_name(branch.name)} (branch)")
    for value, names in claims.ambiguous().items():
        logger.warning(
            "RFC %s is claimed more than once: %s",
            format_identifier(value),
            ", ".join(printable_name(name) for name in names),
        )


@app.command("next")
def next_rfc(ctx: typer.Context) -> None:
    """Print the number the next RFC would get."""
    config = _load_config(ctx)
    try:
        checkout = ensure_local_repo(config)
        identifier = allocate_identifier(snapshot_claims(checkout, config.extensions).values)
    except RfcsError as exc:
        _fail(exc)
    typer.echo(format_identifier(identifier))


@app.command("create")
def create(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Title of the new RFC."),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Only show the branch that would be created.",
    ),
    start_point: str = typer.Option(
        DEFAULT_START_POINT,
        "--start-point",
        help="Commit or branch the draft branch starts from.",
    ),
) -> None:
    """Allocate the next RFC number and check out a draft branch for it."""
    config = _load_config(ctx)
    try:
        checkout = ensure_local_repo(config)
        if dry_run:
            draft = plan_rfc(checkout, title, config.extensions)
            typer.echo(f"Branch will be named {printable_name(draft.branch_name)}")
            return
        draft = create_rfc(checkout, title, config.extensions, start_point=start_point)
    except RfcsError as exc:
        _fail(exc)
    typer.echo(f"Created and checked out git branch {printable_name(draft.branch_name)}")


@app.command("configure")
def configure(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key: git.url or git.repo."),
    value: str = typer.Argument(..., help="Value to store."),
) -> None:
    """Set a configuration value."""
    config = _load_config(ctx, apply_env=False)
    typer.echo(f"Setting key {key} to value {value}")
    try:
        config.set_value(key, value)
        config.save()
    except RfcsError as exc:
        _fail(exc)
    typer.echo("Wrote config.")


@app.command("dump-info")
def dump_info(ctx: typer.Context) -> None:
    """Print where the configuration lives and what it contains."""
    config = _load_config(ctx)
    typer.echo(f"Configuration location: {config.config_path}")
    typer.echo(f"git.repo: {config.git_repo}")
    typer.echo(f"git.url: {config.git_url}")


if __name__ == "__main__":
    app()
