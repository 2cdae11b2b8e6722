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
"""RequestFilter — base class for filters run by the filter chain middleware.

Filters see the request by attribute only, so this module needs no
Starlette import.
"""

from __future__ import annotations

import abc
from collections.abc import Awaitable, Callable, Sequence
from fnmatch import fnmatch
from typing import Any

# Next step of the chain: the following filter, or the wrapped app.
CallNext = Callable[[Any], Awaitable[Any]]


class RequestFilter(abc.ABC):
    """A filter that can act before and after the rest of the chain.

    Attributes:
        url_patterns: Glob patterns this filter applies to. Empty means all paths.
        exclude_patterns: Glob patterns skipped even when ``url_patterns`` match.
    """

    url_patterns: Sequence[str] = ()
    exclude_patterns: Sequence[str] = ()

    def applies_to(self, path: str) -> bool:
        if self.url_patterns and not any(fnmatch(path, p) for p in self.url_patterns):
            return False
        return not any(fnmatch(path, p) for p in self.exclude_patterns)

    @abc.abstractmethod
    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        """Run the filter. Must ``await call_next(request)`` unless answering itself."""
        ...
