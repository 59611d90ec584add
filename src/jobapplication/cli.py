"""Typer CLI entrypoint for batch application evaluation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer

import yaml

from .container import create_container
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config

app = typer.Typer(help="Job application evaluation CLI.")


def _load_settings(config: Path) -> dict[str, Any]:
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    try:
        return load_config(loaded).to_settings()
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid config file: {exc}", param_hint="config") from exc


@app.command()
def run(
    applications: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Applications JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log output format: json or console."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Evaluate every application in a JSONL file."""
    settings = _load_settings(config) if config else {}

    try:
        configure_logging(log_level, log_format=log_format)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="log_format") from exc

    container = create_container(settings=settings)
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    results = pipeline.run(
        applications_path=applications,
        output_path=output,
        audit_logger=audit_logger,
    )
    typer.echo(f"Evaluated {len(results)} applications. Results saved to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
