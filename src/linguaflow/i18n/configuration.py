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
"""Builds locale resolution from configuration (``linguaflow.i18n.*``)."""

from __future__ import annotations

from linguaflow.config.properties.locale import LocaleProperties
from linguaflow.core.config import Config
from linguaflow.i18n.resolver import (
    CustomSource,
    LocaleResolverConfig,
    ResolvedCallback,
    SearchingLocaleResolver,
)


def resolver_config_from_properties(
    props: LocaleProperties,
    custom_source: CustomSource | None = None,
    on_resolved: ResolvedCallback | None = None,
) -> LocaleResolverConfig:
    """Translate bound properties into a :class:`LocaleResolverConfig`.

    Callbacks cannot come from files, so they are passed in by the caller.
    """
    return LocaleResolverConfig.create(
        props.available_locales,
        props.default_locale,
        search_order=props.search_order,
        uri_param_name=props.uri_param_name,
        cookie_name=props.cookie_name,
        cookie_path=props.cookie_path,
        cookie_expire=props.cookie_expire,
        cookie_enabled=props.cookie_enabled,
        attribute_name=props.attribute_name,
        custom_source=custom_source,
        on_resolved=on_resolved,
    )


def locale_resolver_config(
    config: Config,
    custom_source: CustomSource | None = None,
    on_resolved: ResolvedCallback | None = None,
) -> LocaleResolverConfig:
    return resolver_config_from_properties(config.bind(LocaleProperties), custom_source, on_resolved)


def locale_resolver(
    config: Config,
    custom_source: CustomSource | None = None,
) -> SearchingLocaleResolver:
    return SearchingLocaleResolver(locale_resolver_config(config, custom_source))
