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
"""Locale resolution — ordered multi-source search with a default fallback.

The configuration is an immutable value; :func:`resolve_locale` is a pure
function of that configuration and a :class:`RequestView`, so one configured
resolver can serve concurrent requests. Reconfiguring produces a new value.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from linguaflow.i18n.accept_language import resolve_from_header
from linguaflow.i18n.sources import DEFAULT_SEARCH_ORDER, RequestView, SearchSource
from linguaflow.i18n.tags import AvailableLocales, filter_locale, parse_locale
from linguaflow.kernel.exceptions import ConfigurationException, MissingCallbackException

logger = structlog.get_logger("linguaflow.i18n")

THIRTY_DAYS = 3600 * 24 * 30

CustomSource = Callable[[Any], str | None]
ResolvedCallback = Callable[[str], None]


@dataclass(frozen=True)
class LocaleResolverConfig:
    """Everything locale resolution and its propagation depend on.

    Attributes:
        available: Locales the server can render.
        default_locale: Returned when no source matches; never validated
            against *available*.
        search_order: Sources consulted in order; the first match wins.
        uri_param_name: Query parameter read by ``SearchSource.URI_PARAM``.
        cookie_name: Cookie read by ``SearchSource.COOKIE`` and written back.
        cookie_path: ``Path`` of the emitted cookie.
        cookie_expire: Seconds from now until the emitted cookie expires.
        cookie_enabled: Whether the resolved locale is written to a cookie.
        attribute_name: Name under which the locale is attached to the request.
        custom_source: Called with the transport request for
            ``SearchSource.CUSTOM``; its return value is used unfiltered.
        on_resolved: Called once with every resolved locale.
    """

    available: AvailableLocales
    default_locale: str
    search_order: tuple[SearchSource, ...] = DEFAULT_SEARCH_ORDER
    uri_param_name: str = "locale"
    cookie_name: str = "locale"
    cookie_path: str = "/"
    cookie_expire: int = THIRTY_DAYS
    cookie_enabled: bool = True
    attribute_name: str = "locale"
    custom_source: CustomSource | None = field(default=None, compare=False)
    on_resolved: ResolvedCallback | None = field(default=None, compare=False)

    @classmethod
    def create(
        cls,
        available_locales: Iterable[str],
        default_locale: str,
        *,
        search_order: Iterable[SearchSource | str] | None = None,
        **options: Any,
    ) -> LocaleResolverConfig:
        """Build a config from raw locale strings and source names.

        Raises:
            UnknownSearchSourceException: a *search_order* entry is unknown.
        """
        order = DEFAULT_SEARCH_ORDER if search_order is None else _parse_order(search_order)
        return cls(
            available=AvailableLocales.from_strings(available_locales),
            default_locale=default_locale,
            search_order=order,
            **options,
        )

    def with_options(self, **changes: Any) -> LocaleResolverConfig:
        """Return a reconfigured copy.

        ``available_locales`` (raw strings) and ``search_order`` (names) are
        accepted in their raw forms.
        """
        if "available_locales" in changes:
            changes["available"] = AvailableLocales.from_strings(changes.pop("available_locales"))
        if "search_order" in changes:
            changes["search_order"] = _parse_order(changes["search_order"])
        return dataclasses.replace(self, **changes)


def _parse_order(entries: Iterable[SearchSource | str]) -> tuple[SearchSource, ...]:
    try:
        return tuple(SearchSource.parse(entry) for entry in entries)
    except ConfigurationException as exc:
        logger.error("locale_config_invalid", error=str(exc), code=exc.code)
        raise


# ---------------------------------------------------------------------------
# Source extractors
# ---------------------------------------------------------------------------


def _filtered(raw: str | None, config: LocaleResolverConfig) -> str:
    return filter_locale(parse_locale(raw).locale, config.available)


def _from_mapping(values: Mapping[str, str], name: str, config: LocaleResolverConfig) -> str:
    value = values.get(name)
    return _filtered(value if isinstance(value, str) else None, config)


def _from_uri_path(config: LocaleResolverConfig, view: RequestView) -> str:
    return _filtered(view.first_path_segment, config)


def _from_uri_param(config: LocaleResolverConfig, view: RequestView) -> str:
    return _from_mapping(view.query_params, config.uri_param_name, config)


def _from_cookie(config: LocaleResolverConfig, view: RequestView) -> str:
    return _from_mapping(view.cookies, config.cookie_name, config)


def _from_header(config: LocaleResolverConfig, view: RequestView) -> str:
    return resolve_from_header(view.accept_language, config.available)


def _from_custom(config: LocaleResolverConfig, view: RequestView) -> str:
    if config.custom_source is None:
        raise MissingCallbackException()
    return config.custom_source(view.request) or ""


_EXTRACTORS: dict[SearchSource, Callable[[LocaleResolverConfig, RequestView], str]] = {
    SearchSource.URI_PATH: _from_uri_path,
    SearchSource.URI_PARAM: _from_uri_param,
    SearchSource.COOKIE: _from_cookie,
    SearchSource.HEADER: _from_header,
    SearchSource.CUSTOM: _from_custom,
}


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve_locale(config: LocaleResolverConfig, view: RequestView) -> str:
    """Return the locale for *view*: the first source match, else the default.

    Raises:
        UnknownSearchSourceException: the search order holds an unknown entry.
        MissingCallbackException: ``CUSTOM`` is searched with no callback set.
    """
    try:
        for entry in config.search_order:
            source = SearchSource.parse(entry)
            locale = _EXTRACTORS[source](config, view)
            if locale:
                logger.debug("locale_resolved", source=source.value, locale=locale)
                return locale
    except ConfigurationException as exc:
        logger.error("locale_config_invalid", error=str(exc), code=exc.code)
        raise

    logger.debug("locale_defaulted", locale=config.default_locale)
    return config.default_locale


class SearchingLocaleResolver:
    """:class:`~linguaflow.i18n.ports.outbound.LocaleResolver` over a config.

    Accepts a :class:`RequestView` or any request object
    :meth:`RequestView.from_request` understands. Does not invoke
    ``on_resolved``; that belongs to whoever propagates the locale.
    """

    def __init__(self, config: LocaleResolverConfig) -> None:
        self._config = config

    @property
    def config(self) -> LocaleResolverConfig:
        return self._config

    def resolve_locale(self, request: Any) -> str:
        view = request if isinstance(request, RequestView) else RequestView.from_request(request)
        return resolve_locale(self._config, view)
