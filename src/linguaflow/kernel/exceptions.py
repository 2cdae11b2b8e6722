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
"""Exception hierarchy for linguaflow.

All library exceptions inherit from LinguaflowException so callers can catch
a single base type. Malformed locale input never raises; only misconfiguration
does.

Categories:
- ConfigurationException: the resolver was configured in a way it cannot honour
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class LinguaflowException(Exception):
    """Base exception for all linguaflow errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "LOCALE_UNKNOWN_SOURCE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(LinguaflowException):
    """The resolver configuration is invalid. Fatal, never retried."""


class UnknownSearchSourceException(ConfigurationException):
    """A search-order entry does not name a known locale source."""

    def __init__(self, source: Any) -> None:
        super().__init__(
            f"Unknown search option provided: {source!r}",
            code="LOCALE_UNKNOWN_SOURCE",
            context={"source": source},
        )
        self.source = source


class MissingCallbackException(ConfigurationException):
    """The custom source is in the search order but no callback was registered."""

    def __init__(self) -> None:
        super().__init__(
            "The custom locale source is enabled but no callback was registered",
            code="LOCALE_MISSING_CALLBACK",
        )
