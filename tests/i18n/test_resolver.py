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
"""Tests for multi-source locale resolution."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from linguaflow.i18n.ports.outbound import LocaleResolver
from linguaflow.i18n.resolver import LocaleResolverConfig, SearchingLocaleResolver, resolve_locale
from linguaflow.i18n.sources import DEFAULT_SEARCH_ORDER, RequestView, SearchSource
from linguaflow.kernel.exceptions import (
    ConfigurationException,
    MissingCallbackException,
    UnknownSearchSourceException,
)

AVAILABLE = ["en_US", "fr_CA", "es_MX", "eo"]


def _config(order=None, **options) -> LocaleResolverConfig:
    return LocaleResolverConfig.create(AVAILABLE, "en_US", search_order=order, **options)


class TestSourcePriority:
    def test_param_before_header(self):
        view = RequestView(query_params={"locale": "es_MX"}, accept_language="fr_CA")
        assert resolve_locale(_config(["uri-param", "header"]), view) == "es_MX"

    def test_header_before_param(self):
        view = RequestView(query_params={"locale": "es_MX"}, accept_language="fr_CA")
        assert resolve_locale(_config(["header", "uri-param"]), view) == "fr_CA"

    def test_default_order_prefers_path(self):
        view = RequestView(
            path="/fr_CA/articles",
            query_params={"locale": "es_MX"},
            cookies={"locale": "eo"},
            accept_language="en-US",
        )
        assert resolve_locale(_config(), view) == "fr_CA"

    def test_unmatched_source_falls_through(self):
        view = RequestView(
            path="/articles",
            query_params={"locale": "pt_BR"},
            cookies={"locale": "es-mx"},
            accept_language="fr_CA",
        )
        assert resolve_locale(_config(), view) == "es_MX"

    def test_sources_not_in_order_are_ignored(self):
        view = RequestView(cookies={"locale": "eo"}, accept_language="fr_CA")
        assert resolve_locale(_config([SearchSource.HEADER]), view) == "fr_CA"
        assert resolve_locale(_config([SearchSource.URI_PATH]), view) == "en_US"


class TestDefaultFallback:
    def test_default_when_nothing_available(self):
        view = RequestView(
            path="/pt_BR/home",
            query_params={"locale": "pt_BR"},
            cookies={"locale": "pt_BR"},
            accept_language="pt_BR",
        )
        assert resolve_locale(_config(), view) == "en_US"

    def test_default_is_not_validated(self):
        config = LocaleResolverConfig.create(AVAILABLE, "xx_XX")
        assert resolve_locale(config, RequestView()) == "xx_XX"

    def test_empty_search_order_returns_default(self):
        view = RequestView(accept_language="fr_CA")
        assert resolve_locale(_config([]), view) == "en_US"


class TestExtractors:
    def test_path_uses_first_non_empty_segment(self):
        config = _config(["uri-path"])
        assert resolve_locale(config, RequestView(path="//eo/page")) == "eo"
        assert resolve_locale(config, RequestView(path="fr-ca")) == "fr_CA"
        assert resolve_locale(config, RequestView(path="/")) == "en_US"
        assert resolve_locale(config, RequestView(path="/page/fr_CA")) == "en_US"

    def test_param_name_is_configurable(self):
        config = _config(["uri-param"], uri_param_name="lang")
        assert resolve_locale(config, RequestView(query_params={"lang": "es-mx"})) == "es_MX"
        assert resolve_locale(config, RequestView(query_params={"locale": "es_MX"})) == "en_US"

    def test_cookie_name_is_configurable(self):
        config = _config(["cookie"], cookie_name="site_lang")
        assert resolve_locale(config, RequestView(cookies={"site_lang": "fr_CA"})) == "fr_CA"
        assert resolve_locale(config, RequestView(cookies={"locale": "fr_CA"})) == "en_US"

    def test_param_and_cookie_do_not_fall_back_to_language(self):
        config = _config(["uri-param", "cookie"])
        view = RequestView(query_params={"locale": "eo_XX"}, cookies={"locale": "fr"})
        assert resolve_locale(config, view) == "en_US"

    def test_header_falls_back_to_language(self):
        assert resolve_locale(_config(["header"]), RequestView(accept_language="eo_XX")) == "eo"


class TestCustomSource:
    def test_callback_result_used_unfiltered(self):
        seen = []

        def from_subdomain(request):
            seen.append(request)
            return "pt_BR"

        request = object()
        config = _config(["custom", "header"], custom_source=from_subdomain)
        view = RequestView(accept_language="fr_CA", request=request)
        assert resolve_locale(config, view) == "pt_BR"
        assert seen == [request]

    def test_empty_callback_result_falls_through(self):
        config = _config(["custom", "header"], custom_source=lambda request: None)
        assert resolve_locale(config, RequestView(accept_language="fr_CA")) == "fr_CA"

    def test_missing_callback_raises(self):
        config = _config(["header", "custom"])
        with pytest.raises(MissingCallbackException) as exc_info:
            resolve_locale(config, RequestView())
        assert exc_info.value.code == "LOCALE_MISSING_CALLBACK"

    def test_missing_callback_not_reached_when_earlier_source_matches(self):
        config = _config(["header", "custom"])
        assert resolve_locale(config, RequestView(accept_language="eo")) == "eo"


class TestUnknownSearchSource:
    def test_create_rejects_unknown_source(self):
        with pytest.raises(UnknownSearchSourceException) as exc_info:
            _config(["header", "geoip"])
        assert exc_info.value.source == "geoip"
        assert exc_info.value.context == {"source": "geoip"}

    def test_resolution_rejects_unknown_source(self):
        config = LocaleResolverConfig(
            available=_config().available,
            default_locale="en_US",
            search_order=(SearchSource.HEADER, 42),  # type: ignore[arg-type]
        )
        with pytest.raises(ConfigurationException):
            resolve_locale(config, RequestView())

    def test_unknown_source_raises_even_after_misses(self):
        config = LocaleResolverConfig(
            available=_config().available,
            default_locale="en_US",
            search_order=("header", "nowhere"),  # type: ignore[arg-type]
        )
        with pytest.raises(UnknownSearchSourceException):
            resolve_locale(config, RequestView(accept_language="pt_BR"))


class TestLocaleResolverConfig:
    def test_defaults(self):
        config = LocaleResolverConfig.create(AVAILABLE, "en_US")
        assert config.search_order == DEFAULT_SEARCH_ORDER
        assert config.uri_param_name == "locale"
        assert config.cookie_name == "locale"
        assert config.cookie_path == "/"
        assert config.cookie_expire == 3600 * 24 * 30
        assert config.cookie_enabled is True
        assert config.attribute_name == "locale"
        assert config.custom_source is None
        assert config.on_resolved is None

    def test_source_names_are_coerced(self):
        config = _config(["URI_PARAM", "Header", SearchSource.COOKIE])
        assert config.search_order == (SearchSource.URI_PARAM, SearchSource.HEADER, SearchSource.COOKIE)

    def test_is_immutable(self):
        config = _config()
        with pytest.raises(AttributeError):
            config.default_locale = "fr_CA"  # type: ignore[misc]

    def test_with_options_returns_reconfigured_copy(self):
        config = _config()
        changed = config.with_options(available_locales=["pt-br"], search_order=["header"])
        assert changed.available.locales == ("pt_BR",)
        assert changed.search_order == (SearchSource.HEADER,)
        assert config.available.locales == tuple(AVAILABLE)
        assert resolve_locale(changed, RequestView(accept_language="pt-BR")) == "pt_BR"

    def test_with_options_rejects_unknown_source(self):
        with pytest.raises(UnknownSearchSourceException):
            _config().with_options(search_order=["header", "dns"])

    def test_resolution_is_deterministic(self):
        config = _config()
        view = RequestView(accept_language="es_MX;q=0.5,fr_CA;q=0.5")
        assert {resolve_locale(config, view) for _ in range(5)} == {"es_MX"}


class TestSearchingLocaleResolver:
    def test_implements_locale_resolver_port(self):
        assert isinstance(SearchingLocaleResolver(_config()), LocaleResolver)

    def test_accepts_request_view(self):
        resolver = SearchingLocaleResolver(_config())
        assert resolver.resolve_locale(RequestView(accept_language="eo")) == "eo"

    def test_accepts_duck_typed_request(self):
        request = SimpleNamespace(
            url=SimpleNamespace(path="/home"),
            query_params={},
            cookies={"locale": "fr_CA"},
            headers={"accept-language": "es-MX"},
        )
        resolver = SearchingLocaleResolver(_config())
        assert resolver.resolve_locale(request) == "fr_CA"

    def test_exposes_config(self):
        config = _config()
        assert SearchingLocaleResolver(config).config is config
