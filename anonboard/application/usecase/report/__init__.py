"""Report use cases."""

from .submit_report import SubmitReportRequest, SubmitReportUseCase

__all__ = [
    "SubmitReportRequest",
    "SubmitReportUseCase",
]
