"""Typer CLI entrypoint for the evaluation core."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigManager
from .container import OhrivContainer, create_container
from .logging import configure_logging
from .permissions import can_perform as role_can_perform
from .schemas.config import AppConfig
from .scoring import build_score
from .validation import RECORD_KINDS, parse

app = typer.Typer(help="Ohriv candidate evaluation CLI.")
score_app = typer.Typer(help="Manage manually entered KSA scores.")
app.add_typer(score_app, name="score")


class RecordKind(str, Enum):
    CANDIDATE = "candidate"
    APPLICATION = "application"
    STAGE = "stage"
    KSA_SCORE = "ksa-score"
    TENANT = "tenant"
    PARTNER = "partner"
    USER = "user"
    MEMBERSHIP = "membership"


@app.callback()
def main_options(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Load configuration and wire dependencies for every command."""
    app_config = AppConfig()
    if config:
        try:
            app_config = ConfigManager.app_config_from(config)
        except (ValidationError, TypeError, yaml.YAMLError, OSError) as exc:
            raise typer.BadParameter(str(exc), param_hint="config") from exc

    configure_logging(log_level or app_config.logging.level, fmt=app_config.logging.format)
    ctx.obj = create_container(settings=app_config.to_settings())


def _container(ctx: typer.Context) -> OhrivContainer:
    return ctx.obj


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def validate(
    kind: RecordKind = typer.Argument(..., help="Record kind to validate."),
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="JSON document path."),
) -> None:
    """Validate a JSON document and print the normalised record or its issues."""
    with path.open("r", encoding="utf-8") as handle:
        try:
            raw = json.load(handle)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint="path") from exc

    result = parse(RECORD_KINDS[kind.value], raw)
    if not result.ok:
        for issue in result.issues:
            typer.echo(str(issue), err=True)
        raise typer.Exit(code=1)
    _echo_json(result.unwrap().to_wire())


@app.command("can-perform")
def can_perform(
    membership_role: str = typer.Argument(..., help="Tenant membership role."),
    evaluator_role: str = typer.Argument(..., help="Evaluator role."),
) -> None:
    """Report whether a membership role may act in an evaluator capacity."""
    typer.echo("allowed" if role_can_perform(membership_role, evaluator_role) else "denied")


@app.command()
def stages(ctx: typer.Context) -> None:
    """Print the default stage pipeline."""
    pipeline = _container(ctx).stage_pipeline()
    for stage in pipeline.stages:
        flags = []
        if stage.is_system:
            flags.append("system")
        if not stage.reorderable:
            flags.append("locked")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        typer.echo(f"{stage.order}. {stage.name} ({stage.key}){suffix}")


@score_app.command("add")
def score_add(
    ctx: typer.Context,
    candidate: str = typer.Option(..., help="Candidate id."),
    job_title: str = typer.Option(..., help="Job title the score applies to."),
    knowledge: int = typer.Option(..., min=1, max=10),
    skills: int = typer.Option(..., min=1, max=10),
    abilities: int = typer.Option(..., min=1, max=10),
) -> None:
    """Record a new KSA score."""
    store = _container(ctx).ksa_store()
    score = store.upsert(build_score(candidate, job_title, knowledge, skills, abilities))
    _echo_json(score.to_wire())


@score_app.command("delete")
def score_delete(
    ctx: typer.Context,
    score_id: str = typer.Argument(..., help="Score id to delete."),
) -> None:
    """Delete a KSA score; deleting an unknown id is not an error."""
    removed = _container(ctx).ksa_store().delete(score_id)
    typer.echo("deleted" if removed else "not found")


@score_app.command("list")
def score_list(
    ctx: typer.Context,
    candidate: Optional[str] = typer.Option(None, help="Only scores for this candidate id."),
    job_title: Optional[str] = typer.Option(None, help="Only scores for this job title."),
) -> None:
    """List stored KSA scores."""
    if candidate and job_title:
        raise typer.BadParameter("Use either --candidate or --job-title, not both.")
    store = _container(ctx).ksa_store()
    if candidate:
        scores = store.by_candidate(candidate)
    elif job_title:
        scores = store.by_job_title(job_title)
    else:
        scores = store.all()
    _echo_json([score.to_wire() for score in sorted(scores, key=lambda s: s.evaluation_date)])


def main() -> None:
    app()


if __name__ == "__main__":
    main()
