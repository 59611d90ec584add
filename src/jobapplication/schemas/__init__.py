"""Pydantic schema definitions for application records."""

from __future__ import annotations

from .application import Applicant, JobApplication

__all__ = [
    "Applicant",
    "JobApplication",
]
