# Copyright 2026 The linguaflow Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""'linguaflow resolve' and 'linguaflow parse-header' — try out negotiation."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import click
import yaml  # type: ignore[import-untyped]
from rich.markup import escape
from rich.table import Table

from linguaflow.cli.console import console
from linguaflow.config.properties.locale import LocaleProperties
from linguaflow.core.config import Config
from linguaflow.i18n.accept_language import parse_accept_language, sort_by_quality
from linguaflow.i18n.configuration import resolver_config_from_properties
from linguaflow.i18n.resolver import resolve_locale
from linguaflow.i18n.sources import RequestView
from linguaflow.kernel.exceptions import LinguaflowException
from linguaflow.logging.structlog_adapter import StructlogAdapter


def _pairs(values: tuple[str, ...], option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for value in values:
        name, sep, content = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {value!r}", param_hint=option)
        pairs[name] = content
    return pairs


def _load_config(config_file: str | None, profiles: tuple[str, ...]) -> Config:
    if config_file is not None:
        return Config.from_file(config_file)
    return Config.from_sources(Path.cwd(), active_profiles=list(profiles))


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[error]Error:[/error] {escape(str(exc))}", highlight=False)
    raise SystemExit(1) from None


@click.command()
@click.option("--available", "-a", multiple=True, help="Available locale (repeatable).")
@click.option("--default", "default_locale", default=None, help="Default locale.")
@click.option("--order", "-o", multiple=True, help="Search source, e.g. header (repeatable).")
@click.option("--path", default="/", show_default=True, help="Request URI path.")
@click.option("--param", "params", multiple=True, help="Query parameter NAME=VALUE.")
@click.option("--cookie", "cookies", multiple=True, help="Cookie NAME=VALUE.")
@click.option("--header", default="", help="Accept-Language header value.")
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="YAML/TOML configuration file.")
@click.option("--profile", "-p", "profiles", multiple=True,
              help="Profile overlay, loads linguaflow-PROFILE.yaml (repeatable).")
def resolve_command(
    available: tuple[str, ...],
    default_locale: str | None,
    order: tuple[str, ...],
    path: str,
    params: tuple[str, ...],
    cookies: tuple[str, ...],
    header: str,
    config_file: str | None,
    profiles: tuple[str, ...],
) -> None:
    """Resolve the locale for a request described on the command line."""
    try:
        config = _load_config(config_file, profiles)
        StructlogAdapter().configure(config)
        props = config.bind(LocaleProperties)
    except (ValueError, yaml.YAMLError) as exc:
        _fail(exc)

    overrides: dict[str, object] = {}
    if available:
        overrides["available_locales"] = list(available)
    if default_locale is not None:
        overrides["default_locale"] = default_locale
    if order:
        overrides["search_order"] = list(order)
    props = props.model_copy(update=overrides)

    view = RequestView(
        path=path,
        query_params=_pairs(params, "--param"),
        cookies=_pairs(cookies, "--cookie"),
        accept_language=header,
    )

    try:
        locale = resolve_locale(resolver_config_from_properties(props), view)
    except LinguaflowException as exc:
        _fail(exc)

    console.print(locale, highlight=False)


@click.command()
@click.argument("header")
def parse_header_command(header: str) -> None:
    """Show the quality-ordered language ranges of an Accept-Language value."""
    table = Table(title="Accept-Language", border_style="dim")
    table.add_column("#", style="dim")
    table.add_column("Locale", style="info")
    table.add_column("Language")
    table.add_column("Quality", justify="right")

    for position, candidate in enumerate(sort_by_quality(parse_accept_language(header)), start=1):
        table.add_row(
            str(position),
            candidate.locale or "[dim]-[/dim]",
            candidate.language or "[dim]-[/dim]",
            f"{candidate.quality:g}",
        )

    console.print(table)
