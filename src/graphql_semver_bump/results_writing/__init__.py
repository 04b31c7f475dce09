"""Results writing domain exports."""

from .run_report_writer import render_declaration, render_diff_report, render_run_report

__all__ = [
    "render_declaration",
    "render_diff_report",
    "render_run_report",
]
