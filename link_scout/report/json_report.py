# link_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта LinkScout.

Сериализация объекта CrawlReport в файл.
"""
import json
from pathlib import Path
from typing import Any, Dict

from link_scout.crawler.session import CrawlReport


def report_to_dict(report: CrawlReport) -> Dict[str, Any]:
    """Представляет CrawlReport в виде словаря, пригодного для json.dump."""
    return {
        'start_url': report.start_url,
        'max_depth': report.max_depth,
        'found': [o.as_dict() for o in report.found],
        'failed': [o.as_dict() for o in report.failed],
        'stats': report.stats.as_dict(),
    }


def render_json(report: CrawlReport, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект CrawlReport с результатами обхода
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report_to_dict(report), f, ensure_ascii=False, indent=2)

    return output
