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
"""Locale sources — where a locale may be found on an incoming request."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from linguaflow.kernel.exceptions import UnknownSearchSourceException


class SearchSource(StrEnum):
    """The closed set of places a locale can be read from.

    Values are the names used in configuration files.
    """

    URI_PATH = "uri-path"
    URI_PARAM = "uri-param"
    COOKIE = "cookie"
    HEADER = "header"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: Any) -> SearchSource:
        """Coerce a configured value to a source, accepting ``uri_path`` spellings.

        Raises:
            UnknownSearchSourceException: *value* names no known source.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("_", "-")
            for source in cls:
                if source.value == normalized:
                    return source
        raise UnknownSearchSourceException(value)


DEFAULT_SEARCH_ORDER: tuple[SearchSource, ...] = (
    SearchSource.URI_PATH,
    SearchSource.URI_PARAM,
    SearchSource.COOKIE,
    SearchSource.HEADER,
)


@dataclass(frozen=True)
class RequestView:
    """Read-only view of the request parts locale resolution looks at.

    ``request`` is the transport's own request object, handed untouched to
    a custom source callback.
    """

    path: str = "/"
    query_params: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)
    accept_language: str = ""
    request: Any = None

    @classmethod
    def from_request(cls, request: Any) -> RequestView:
        """Build a view from any request exposing the usual attributes.

        Reads ``url.path`` (or ``path``), ``query_params`` (or ``args``),
        ``cookies`` and the ``Accept-Language`` entry of ``headers``, which
        covers Starlette and werkzeug-style requests without importing them.
        """
        url = getattr(request, "url", None)
        path = getattr(url, "path", None) or getattr(request, "path", None) or "/"

        query_params = getattr(request, "query_params", None)
        if query_params is None:
            query_params = getattr(request, "args", None) or {}

        header = ""
        headers = getattr(request, "headers", None)
        if headers is not None:
            header = headers.get("accept-language") or headers.get("Accept-Language") or ""

        return cls(
            path=str(path),
            query_params=query_params,
            cookies=getattr(request, "cookies", None) or {},
            accept_language=header,
            request=request,
        )

    @property
    def first_path_segment(self) -> str:
        for segment in self.path.split("/"):
            if segment:
                return segment
        return ""
