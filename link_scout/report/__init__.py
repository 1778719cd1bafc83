# File: link_scout/report/__init__.py
"""link_scout.report: вывод наблюдений обхода (текст и JSON) для CLI и тестов."""

from __future__ import annotations

from link_scout.report.json_report import render_json, report_to_dict
from link_scout.report.text import format_observation

__all__ = ["format_observation", "render_json", "report_to_dict"]
