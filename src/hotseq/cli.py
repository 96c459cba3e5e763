"""hotseq command line interface."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError

from hotseq.config import AppSettings, dump_settings, load_settings

app = typer.Typer(help="Multicast vs unicast timed sequence demos", no_args_is_help=True)


def _load(config: Path) -> AppSettings:
    try:
        return load_settings(config)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


@app.command("demo")
def demo(
    mode: str = typer.Option("multicast", help="multicast or unicast"),
    virtual: bool = typer.Option(True, "--virtual/--realtime", help="Use a virtual clock"),
    late_at: float | None = typer.Option(None, help="Second subscriber join time in seconds"),
    jsonl: Path | None = typer.Option(None, help="Append notifications to this JSONL file"),
    config: Path = typer.Option(Path("configs/default.yaml"), help="App config yaml"),
) -> None:
    """Subscribe two observers, the second one late, and print what each sees."""
    from hotseq.demo import run_demo, run_demo_realtime
    from hotseq.logs import setup_logging

    if mode not in ("multicast", "unicast"):
        raise typer.BadParameter("mode must be 'multicast' or 'unicast'", param_hint="--mode")

    settings = _load(config)
    if late_at is not None:
        if late_at < 0:
            raise typer.BadParameter("must be >= 0", param_hint="--late-at")
        settings.demo.late_subscribe_at_seconds = late_at
    jsonl_path = jsonl or settings.demo.jsonl_path
    setup_logging(settings.logging.level)

    if virtual:
        run_demo(settings, mode=mode, emit=typer.echo, jsonl_path=jsonl_path)
    else:
        asyncio.run(run_demo_realtime(settings, mode=mode, emit=typer.echo, jsonl_path=jsonl_path))


@app.command("show-config")
def show_config(
    config: Path = typer.Option(Path("configs/default.yaml"), help="App config yaml"),
) -> None:
    """Print the effective settings."""
    typer.echo(dump_settings(_load(config)), nl=False)


if __name__ == "__main__":
    app()
