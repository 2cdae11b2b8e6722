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
"""Locale filter — resolves the request locale and propagates it."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from typing import cast

import structlog
from starlette.requests import Request
from starlette.responses import Response

from linguaflow.i18n.resolver import LocaleResolverConfig, resolve_locale
from linguaflow.i18n.sources import RequestView
from linguaflow.web.filters import CallNext, RequestFilter

logger = structlog.get_logger("linguaflow.web")


class LocaleFilter(RequestFilter):
    """Attaches the resolved locale to ``request.state`` and remembers it in a cookie.

    For every request the locale is resolved from *config*, passed once to
    ``config.on_resolved``, stored as ``request.state.<attribute_name>`` and,
    when cookies are enabled, written back as
    ``<cookie_name>=<locale>; Path=<cookie_path>; Expires=<now + cookie_expire>``.
    Register it first in :class:`FilterChainMiddleware` so later filters see
    the locale.
    """

    def __init__(
        self,
        config: LocaleResolverConfig,
        url_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
    ) -> None:
        self._config = config
        self.url_patterns = tuple(url_patterns)
        self.exclude_patterns = tuple(exclude_patterns)

    @property
    def config(self) -> LocaleResolverConfig:
        return self._config

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        config = self._config
        locale = resolve_locale(config, RequestView.from_request(request))

        if config.on_resolved is not None:
            config.on_resolved(locale)

        setattr(request.state, config.attribute_name, locale)
        response = cast(Response, await call_next(request))

        if config.cookie_enabled:
            response.set_cookie(
                config.cookie_name,
                locale,
                expires=datetime.now(timezone.utc) + timedelta(seconds=config.cookie_expire),
                path=config.cookie_path,
            )

        logger.debug(
            "locale_filter_applied",
            path=request.url.path,
            locale=locale,
            cookie=config.cookie_enabled,
        )
        return response
