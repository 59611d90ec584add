"""Batch evaluation pipeline over JSONL application files."""

from __future__ import annotations

import json
from pathlib import Path

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import ApplicationEvaluator, MissingApplicantError
from .schemas import JobApplication


class ApplicationLoadError(ValueError):
    """Raised when application loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[JobApplication]):
        super().__init__("Application loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Application loading failed: {self.errors}"


class ApplicationLoader:
    """Load application records from JSON lines."""

    def load(self, path: Path) -> list[JobApplication]:
        applications: list[JobApplication] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                try:
                    application = JobApplication.model_validate(record)
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
                    continue
                if application.application_id is None:
                    application = application.model_copy(update={"application_id": f"line-{idx}"})
                applications.append(application)
        if errors:
            raise ApplicationLoadError(errors, applications)
        return applications


class OutputWriter:
    """Persist evaluation results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class EvaluationPipeline:
    """Evaluate every application in a file and write the results."""

    def __init__(
        self,
        *,
        evaluator: ApplicationEvaluator,
        loader: ApplicationLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._loader = loader or ApplicationLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        applications_path: Path,
        output_path: Path,
        audit_logger: AuditLogger | None = None,
    ) -> list[dict]:
        errors: list[str] = []
        try:
            applications = self._loader.load(applications_path)
        except ApplicationLoadError as exc:
            applications = exc.partial
            errors.extend(exc.errors)
            self._logger.warning("applications.partial_load", errors=exc.errors)

        results: list[dict] = []
        for application in applications:
            try:
                assessment = self._evaluator.assess(application)
            except MissingApplicantError as exc:
                errors.append(f"{exc.application_id}: {exc}")
                self._logger.warning("application.missing_applicant", application_id=exc.application_id)
                continue

            entry = {
                "application_id": application.application_id,
                "result": assessment.result.value,
                "rule": assessment.rule,
                "similarity_rate": assessment.similarity_rate,
            }
            results.append(entry)

            if audit_logger:
                audit_logger.append(
                    {
                        **entry,
                        "age": application.applicant.age,
                        "years_of_experience": application.years_of_experience,
                        "evaluated_at": pendulum.now().to_iso8601_string(),
                    }
                )

            self._logger.info("application.result", **entry)

        payload = {
            "metadata": {
                "application_count": len(applications),
                "evaluated_count": len(results),
                "errors": errors,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "results": results,
        }
        self._writer.write(output_path, payload)
        return results
