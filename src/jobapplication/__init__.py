"""Rule-based job application evaluation."""

__version__ = "0.1.0"
