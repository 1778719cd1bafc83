# === FILE: link_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера LinkScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrawlConfig(BaseModel):
    """Конфигурация для одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    start_url: str = Field("https://golang.org/", min_length=1, description="Стартовый идентификатор обхода.")
    max_depth: int = Field(4, ge=0, description="Максимальная глубина обхода ссылок.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("LinkScoutBot/1.0", min_length=1, description="Заголовок User-Agent.")
    concurrency: int = Field(8, ge=1, description="Максимум одновременных HTTP-запросов.")
    retry_times: int = Field(2, ge=0, description="Число повторных попыток при 5xx/429.")
    same_host_only: bool = Field(False, description="Переходить только по ссылкам того же хоста.")
    source: Literal["http", "sample"] = Field("http", description="Источник страниц: сеть или встроенный пример.")

    @field_validator("start_url", mode="before")
    def _strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlConfig.
    Без явного пути берёт configs/default.yaml, а если его нет — значения по умолчанию.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.is_file():
            return CrawlConfig()
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CrawlConfig(**data)


__all__ = ["CrawlConfig", "load_config", "DEFAULT_CONFIG_PATH"]
