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
"""Locale resolution configuration properties."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from linguaflow.core.config import config_properties


@config_properties(prefix="linguaflow.i18n")
class LocaleProperties(BaseModel):
    """Configuration for locale resolution (linguaflow.i18n.*).

    List values also accept a comma-separated string so they can be set
    from a single environment variable, e.g.
    ``LINGUAFLOW_I18N_AVAILABLE_LOCALES=en_US,fr_CA``.
    """

    available_locales: list[str] = Field(default_factory=list)
    default_locale: str = "en"
    search_order: list[str] = Field(
        default_factory=lambda: ["uri-path", "uri-param", "cookie", "header"]
    )
    uri_param_name: str = Field(default="locale", min_length=1)
    cookie_name: str = Field(default="locale", min_length=1)
    cookie_path: str = "/"
    cookie_expire: int = Field(default=3600 * 24 * 30, ge=0)  # 30 days
    cookie_enabled: bool = True
    attribute_name: str = Field(default="locale", min_length=1)

    @field_validator("available_locales", "search_order", mode="before")
    @classmethod
    def _split_csv(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value
