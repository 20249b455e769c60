"""Reaction CLI — typer-based entry point."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

if TYPE_CHECKING:
    from reaction.config import ReactionConfig

app = typer.Typer(
    name="reaction",
    help="Callable actions that fan out to their subscribers.",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Configuration commands.")
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Settings file (default: user config file)."),
]


# --- Demo ---


@app.command()
def demo(
    config: ConfigOption = None,
    override: Annotated[
        Path | None,
        typer.Option("--override", "-o", help="Settings file layered on top of --config."),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging.")] = False,
) -> None:
    """Run the status/text/story example."""
    from reaction.demo import run_demo

    cfg = _load(config, override)
    _setup_logging(cfg, debug)
    run_demo(typer.echo)


# --- Config subcommands ---


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show effective settings as TOML."""
    import tomli_w

    typer.echo(tomli_w.dumps(_load(config).model_dump()))


@config_app.command("validate")
def config_validate(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="Settings files to check (default: user config file)."),
    ] = None,
) -> None:
    """Check settings files, one line per file."""
    from pydantic import ValidationError

    from reaction.config import ReactionConfig, default_config_path

    failed = False
    for path in paths or [default_config_path()]:
        if not path.is_file():
            typer.echo(f"{path}: not found, defaults apply")
            continue
        try:
            ReactionConfig.from_files(path)
        except tomllib.TOMLDecodeError as e:
            failed = True
            typer.echo(f"{path}: not valid TOML: {e}", err=True)
        except ValidationError as e:
            failed = True
            for error in e.errors():
                field = ".".join(str(part) for part in error["loc"])
                typer.echo(f"{path}: {field}: {error['msg']}", err=True)
        else:
            typer.echo(f"{path}: ok")
    if failed:
        raise typer.Exit(code=1)


# --- Helpers ---


def _load(config: Path | None, override: Path | None = None) -> ReactionConfig:
    from reaction.config import ReactionConfig, default_config_path

    layers = [config or default_config_path()]
    if override is not None:
        layers.append(override)
    return ReactionConfig.from_files(*layers)


def _setup_logging(cfg: ReactionConfig, debug: bool) -> None:
    level = logging.DEBUG if debug else cfg.log_level
    logging.basicConfig(
        level=level,
        format=cfg.logging.format,
        datefmt="%H:%M:%S",
    )
