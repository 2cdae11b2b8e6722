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
"""linguaflow — choose the locale of an incoming request.

Locales are searched in the URI path, a query parameter, a cookie, the
``Accept-Language`` header or a custom callback, in a configurable order,
falling back to a default. A Starlette filter propagates the result to the
request state and a cookie.
"""

from linguaflow.i18n import (
    AvailableLocales,
    LocaleResolver,
    LocaleResolverConfig,
    LocaleTag,
    RequestView,
    SearchingLocaleResolver,
    SearchSource,
    parse_locale,
    resolve_from_header,
    resolve_locale,
)
from linguaflow.kernel import (
    ConfigurationException,
    LinguaflowException,
    MissingCallbackException,
    UnknownSearchSourceException,
)

__version__ = "0.1.0"

__all__ = [
    "AvailableLocales",
    "ConfigurationException",
    "LinguaflowException",
    "LocaleResolver",
    "LocaleResolverConfig",
    "LocaleTag",
    "MissingCallbackException",
    "RequestView",
    "SearchSource",
    "SearchingLocaleResolver",
    "UnknownSearchSourceException",
    "__version__",
    "parse_locale",
    "resolve_from_header",
    "resolve_locale",
]
