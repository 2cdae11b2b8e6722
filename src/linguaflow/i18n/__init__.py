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
"""linguaflow i18n — decides which available locale applies to a request.

Resolution never translates anything; it only picks a locale identifier::

    from linguaflow.i18n import LocaleResolverConfig, RequestView, resolve_locale

    config = LocaleResolverConfig.create(["en_US", "fr_CA"], "en_US")
    resolve_locale(config, RequestView(accept_language="fr-ca;q=0.8"))  # "fr_CA"
"""

from linguaflow.i18n.accept_language import (
    DEFAULT_QUALITY,
    Candidate,
    parse_accept_language,
    parse_quality,
    resolve_from_header,
    sort_by_quality,
)
from linguaflow.i18n.ports.outbound import LocaleResolver
from linguaflow.i18n.resolver import (
    LocaleResolverConfig,
    SearchingLocaleResolver,
    resolve_locale,
)
from linguaflow.i18n.sources import DEFAULT_SEARCH_ORDER, RequestView, SearchSource
from linguaflow.i18n.tags import (
    EMPTY_TAG,
    AvailableLocales,
    LocaleTag,
    filter_locale,
    parse_locale,
)

__all__ = [
    "AvailableLocales",
    "Candidate",
    "DEFAULT_QUALITY",
    "DEFAULT_SEARCH_ORDER",
    "EMPTY_TAG",
    "LocaleResolver",
    "LocaleResolverConfig",
    "LocaleTag",
    "RequestView",
    "SearchSource",
    "SearchingLocaleResolver",
    "filter_locale",
    "parse_accept_language",
    "parse_locale",
    "parse_quality",
    "resolve_from_header",
    "resolve_locale",
    "sort_by_quality",
]
