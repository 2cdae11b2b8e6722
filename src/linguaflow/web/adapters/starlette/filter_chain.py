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
"""FilterChainMiddleware — pure ASGI middleware running request filters."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from linguaflow.web.filters import CallNext, RequestFilter


class FilterChainMiddleware:
    """Runs request filters around the wrapped app, in registration order.

    The first filter is the outermost one, so registering :class:`LocaleFilter`
    first makes ``request.state.locale`` visible to every later filter and
    to the endpoint. A filter whose ``applies_to()`` rejects the path is
    skipped. Lifespan and websocket scopes bypass the chain.
    """

    def __init__(self, app: ASGIApp, filters: Sequence[RequestFilter] = ()) -> None:
        self.app = app
        self.filters = tuple(filters)
        self._handler: CallNext = reduce(_wrap, reversed(self.filters), self._dispatch)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response: Response = await self._handler(Request(scope, receive, send))
        await response(scope, receive, send)

    async def _dispatch(self, request: Request) -> Response:
        recorder = _ResponseRecorder()
        await self.app(request.scope, request.receive, recorder.send)
        return recorder.to_response()


class _ResponseRecorder:
    """Holds the app's response until the filters have added their headers."""

    def __init__(self) -> None:
        self.status_code = 500
        self.raw_headers: list[tuple[bytes, bytes]] = []
        self.body = bytearray()

    async def send(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            self.status_code = message["status"]
            self.raw_headers = list(message.get("headers", []))
        elif message["type"] == "http.response.body":
            self.body += message.get("body", b"")

    def to_response(self) -> Response:
        response = Response(bytes(self.body), status_code=self.status_code)
        response.raw_headers[:] = self.raw_headers
        return response


def _wrap(call_next: CallNext, request_filter: RequestFilter) -> CallNext:
    async def _filtered(request: Request) -> Response:
        if not request_filter.applies_to(request.url.path):
            return await call_next(request)
        return await request_filter.do_filter(request, call_next)

    return _filtered
