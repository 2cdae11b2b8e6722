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
"""Tests for LocaleProperties binding and validation."""

from __future__ import annotations

import pytest

from linguaflow.config.properties import LocaleProperties, LoggingProperties
from linguaflow.core.config import Config


class TestLocalePropertiesDefaults:
    def test_empty_section_uses_defaults(self):
        props = Config({}).bind(LocaleProperties)
        assert props.available_locales == []
        assert props.default_locale == "en"
        assert props.search_order == ["uri-path", "uri-param", "cookie", "header"]
        assert props.uri_param_name == "locale"
        assert props.cookie_name == "locale"
        assert props.cookie_path == "/"
        assert props.cookie_expire == 3600 * 24 * 30
        assert props.cookie_enabled is True
        assert props.attribute_name == "locale"

    def test_packaged_defaults_match_model_defaults(self):
        from_file = Config.from_file("does-not-exist.yaml").bind(LocaleProperties)
        assert from_file == LocaleProperties()


class TestLocalePropertiesBinding:
    def test_provided_values_override_defaults(self):
        config = Config(
            {
                "linguaflow": {
                    "i18n": {
                        "available_locales": ["en_US", "fr_CA"],
                        "default_locale": "en_US",
                        "search_order": ["header"],
                        "cookie_enabled": "false",
                        "cookie_expire": "60",
                    }
                }
            }
        )
        props = config.bind(LocaleProperties)
        assert props.available_locales == ["en_US", "fr_CA"]
        assert props.search_order == ["header"]
        assert props.cookie_enabled is False
        assert props.cookie_expire == 60

    def test_comma_separated_lists(self):
        config = Config({"linguaflow": {"i18n": {"available_locales": "en_US, fr_CA,,eo"}}})
        assert config.bind(LocaleProperties).available_locales == ["en_US", "fr_CA", "eo"]

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LINGUAFLOW_I18N_COOKIE_NAME", "site_lang")
        assert Config({}).bind(LocaleProperties).cookie_name == "site_lang"


class TestLocalePropertiesValidation:
    def test_negative_cookie_expire_rejected(self):
        config = Config({"linguaflow": {"i18n": {"cookie_expire": -1}}})
        with pytest.raises(ValueError, match="LocaleProperties"):
            config.bind(LocaleProperties)

    def test_empty_cookie_name_rejected(self):
        config = Config({"linguaflow": {"i18n": {"cookie_name": ""}}})
        with pytest.raises(ValueError, match="linguaflow.i18n"):
            config.bind(LocaleProperties)


class TestLoggingProperties:
    def test_defaults(self):
        props = Config({}).bind(LoggingProperties)
        assert props.format == "console"
        assert props.level == {"root": "INFO"}

    def test_reads_levels(self):
        config = Config({"linguaflow": {"logging": {"format": "json", "level": {"linguaflow.i18n": "DEBUG"}}}})
        props = config.bind(LoggingProperties)
        assert props.format == "json"
        assert props.level == {"linguaflow.i18n": "DEBUG"}
