# link_scout/report/text.py
"""Однострочное текстовое представление наблюдений."""
import json

from link_scout.crawler.models import Found, Observation


def format_observation(observation: Observation) -> str:
    """
    ``found: <url> "<content>"`` для успеха, ``<reason>: <url>`` для ошибки.

    Содержимое экранируется как JSON-строка, чтобы вывод оставался однострочным.
    """
    if isinstance(observation, Found):
        return f"found: {observation.identifier} {json.dumps(observation.content, ensure_ascii=False)}"
    return f"{observation.reason}: {observation.identifier}"
