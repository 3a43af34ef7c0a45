from __future__ import annotations

from .formatter import format_report_table

__all__ = ["format_report_table"]
