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
"""Locale tags — parsing and normalisation of raw locale strings.

Locale format::

    language[(-|_)territory[.codeset[@modifier]]]

Language and territory are two letters each. Either separator is accepted
and the normalised form is always lowercase language, underscore, uppercase
territory (``fr-ca`` -> ``fr_CA``). Codeset and modifier are discarded.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import structlog

logger = structlog.get_logger("linguaflow.i18n")

_LOCALE_RE = re.compile(
    r"(?P<language>[A-Za-z]{2})"
    r"(?:[-_](?P<territory>[A-Za-z]{2})"
    r"(?:\.(?P<codeset>[-\w]+)(?:@(?P<modifier>[-\w]+))?)?)?"
)


@dataclass(frozen=True)
class LocaleTag:
    """A normalised locale with a language-only and a full view.

    ``language`` is a two-letter lowercase code; ``locale`` is either equal to
    ``language`` or ``language_TERRITORY``. Both are empty when the raw input
    held no language code.
    """

    language: str = ""
    locale: str = ""

    @property
    def is_valid(self) -> bool:
        return bool(self.language)

    @property
    def territory(self) -> str:
        return self.locale[3:] if len(self.locale) > 2 else ""


EMPTY_TAG = LocaleTag()


def parse_locale(raw: str | None) -> LocaleTag:
    """Parse *raw* into a :class:`LocaleTag`.

    This is a lenient search: the first language-looking match wins and any
    surrounding text is ignored. Input without a two-letter language code
    yields :data:`EMPTY_TAG`; nothing here raises.
    """
    if not raw:
        return EMPTY_TAG

    match = _LOCALE_RE.search(raw)
    if match is None:
        return EMPTY_TAG

    language = match.group("language").lower()
    territory = match.group("territory")
    locale = f"{language}_{territory.upper()}" if territory else language
    return LocaleTag(language=language, locale=locale)


class AvailableLocales:
    """Ordered, immutable set of the locales a server supports.

    Built once from raw strings; used only for exact membership tests on the
    normalised ``locale`` form.
    """

    __slots__ = ("_tags", "_index")

    def __init__(self, tags: Iterable[LocaleTag] = ()) -> None:
        self._tags: tuple[LocaleTag, ...] = tuple(t for t in tags if t.is_valid)
        self._index: frozenset[str] = frozenset(t.locale for t in self._tags)

    @classmethod
    def from_strings(cls, raw_locales: Iterable[str]) -> AvailableLocales:
        tags = []
        for raw in raw_locales:
            tag = parse_locale(raw)
            if not tag.is_valid:
                logger.warning("available_locale_ignored", raw=raw)
                continue
            tags.append(tag)
        return cls(tags)

    def __contains__(self, locale: object) -> bool:
        return locale in self._index

    def __iter__(self) -> Iterator[LocaleTag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"AvailableLocales({[t.locale for t in self._tags]!r})"

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(t.locale for t in self._tags)


def filter_locale(candidate: str, available: AvailableLocales) -> str:
    """Return *candidate* if it is exactly one of *available*, else ``""``."""
    if candidate and candidate in available:
        return candidate
    return ""
