# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера LinkScout через командную строку.

Команды:
  crawl     Запустить обход и вывести/сохранить наблюдения
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  URL                 Стартовый URL (override start_url)
  --depth INT         Глубина обхода (override max_depth)
  --sample            Использовать встроенный набор страниц вместо сети
  --same-host         Переходить только по ссылкам того же хоста
  --format FMT        text (строка на наблюдение) или json
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --json PATH         Сохранить JSON-отчёт в файл

Дополнительно:
  --version, -v       Показать версию LinkScout

Пример:
  link-scout crawl --sample --depth 4
  link-scout --config configs/default.yaml crawl https://example.com/ --json report.json
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from link_scout import __version__
from link_scout.config import load_config
from link_scout.engine import start_crawl
from link_scout.logger import DEFAULT_FORMAT, init_logging
from link_scout.report import format_observation, render_json, report_to_dict
from link_scout.sample import SAMPLE_START_URL

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд LinkScout CLI."""
    init_logging(level=log_level, log_file=log_file, log_format=log_format)
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option('--depth', '-d', 'depth', type=click.IntRange(min=0), default=None,
              help='Глубина обхода (override max_depth)')
@click.option('--sample', is_flag=True, help='Использовать встроенный набор страниц вместо сети')
@click.option('--same-host', is_flag=True, help='Переходить только по ссылкам того же хоста')
@click.option('--format', '-f', 'output_format', default='text', show_default=True,
              type=click.Choice(['text', 'json']), help='Формат вывода в stdout')
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.pass_context
def crawl_command(ctx, url, depth, sample, same_host, output_format, pretty, json_output):
    """Запустить обход и вывести наблюдения."""
    cfg = ctx.obj['config']
    overrides = {}
    if sample:
        overrides['source'] = 'sample'
        if url is None:
            overrides['start_url'] = SAMPLE_START_URL
    if url is not None:
        overrides['start_url'] = url
    if depth is not None:
        overrides['max_depth'] = depth
    if same_host:
        overrides['same_host_only'] = True
    cfg = cfg.model_validate({**cfg.model_dump(), **overrides})

    sink = None
    if output_format == 'text':
        sink = lambda obs: click.echo(format_observation(obs))

    try:
        report = asyncio.run(start_crawl(cfg, sink=sink))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    if output_format == 'json':
        indent = 2 if pretty else None
        click.echo(json.dumps(report_to_dict(report), ensure_ascii=False, indent=indent))

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}', err=True)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
