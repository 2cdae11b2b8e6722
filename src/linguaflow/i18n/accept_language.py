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
"""``Accept-Language`` parsing, quality ordering and header negotiation."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from linguaflow.i18n.tags import AvailableLocales, LocaleTag, filter_locale, parse_locale

# Quality of a language range without a ``q`` parameter. Sorts after
# explicitly weighted ranges but stays eligible. Not RFC 2616's 1.0.
DEFAULT_QUALITY = 0.0001


@dataclass(frozen=True)
class Candidate:
    """A language range from the header: a parsed tag and its quality."""

    tag: LocaleTag
    quality: float = DEFAULT_QUALITY

    @property
    def language(self) -> str:
        return self.tag.language

    @property
    def locale(self) -> str:
        return self.tag.locale


def parse_quality(params: str | None) -> float:
    """Extract the ``q`` weight from the parameter part of a language range.

    Missing or unparseable weights give :data:`DEFAULT_QUALITY`; values are
    clamped into ``[0, 1]``.
    """
    if not params:
        return DEFAULT_QUALITY

    for param in params.split(";"):
        name, sep, value = param.partition("=")
        if not sep or name.strip().lower() != "q":
            continue
        try:
            quality = float(value.strip())
        except ValueError:
            return DEFAULT_QUALITY
        if math.isnan(quality):
            return DEFAULT_QUALITY
        return min(max(quality, 0.0), 1.0)

    return DEFAULT_QUALITY


def parse_accept_language(header: str | None) -> list[Candidate]:
    """Split *header* into candidates, in order of appearance.

    Ranges that hold no recognisable language still produce an empty
    candidate so positions are preserved; filtering drops them later.
    """
    if not header:
        return []

    candidates: list[Candidate] = []
    for language_range in header.split(","):
        locale_part, _, params = language_range.partition(";")
        candidates.append(Candidate(parse_locale(locale_part), parse_quality(params)))
    return candidates


def sort_by_quality(candidates: Iterable[Candidate]) -> list[Candidate]:
    """Order candidates by descending quality, first appearance breaking ties."""
    indexed = list(enumerate(candidates))
    indexed.sort(key=lambda item: (-item[1].quality, item[0]))
    return [candidate for _, candidate in indexed]


def resolve_from_header(header: str | None, available: AvailableLocales) -> str:
    """Negotiate the best available locale for an ``Accept-Language`` value.

    The quality-sorted candidates are searched twice: first for an exact
    ``language_TERRITORY`` match, then for their bare language (``fr_FR``
    falls back to ``fr``). Ranges weighted ``q=0`` are never chosen.
    Returns ``""`` when neither pass matches.
    """
    ranked = [c for c in sort_by_quality(parse_accept_language(header)) if c.quality > 0]
    return (
        _first_match(ranked, available, lambda c: c.locale)
        or _first_match(ranked, available, lambda c: c.language)
    )


def _first_match(
    candidates: Sequence[Candidate],
    available: AvailableLocales,
    view: Callable[[Candidate], str],
) -> str:
    for candidate in candidates:
        matched = filter_locale(view(candidate), available)
        if matched:
            return matched
    return ""
