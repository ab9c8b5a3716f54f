# viewtemplates — Jinja2 view templates for Starlette web applications
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Starlette integration.

The provider is created once per application by :func:`view_lifespan` and
kept on ``app.state``.  Endpoints return a :class:`~viewtemplates.models.View`
and :func:`render_view` turns it into a response::

    app = Starlette(
        routes=[Route("/{view}", my_endpoint)],
        lifespan=view_lifespan(reader=DirectoryResourceReader("webapp")),
    )

    @view_endpoint
    def my_endpoint(request):
        return View.of("/profile", user=request.user)

A view that does not resolve raises a 404 ``HTTPException`` and is handled
by the application's normal exception handlers.
"""

from __future__ import annotations

import functools
import inspect
import io
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import HTMLResponse, Response

from viewtemplates.models import View
from viewtemplates.provider import ViewProvider
from viewtemplates.resources import ResourceReader
from viewtemplates.settings import ProviderSettings

logger = logging.getLogger(__name__)

STATE_ATTRIBUTE = "view_provider"


def view_lifespan(
    reader: ResourceReader,
    settings: ProviderSettings | None = None,
) -> Callable[[Starlette], Any]:
    """Build a lifespan that owns one :class:`ViewProvider` for the app.

    When *settings* is omitted they are read from the environment.
    """

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        provider = ViewProvider(reader, settings or ProviderSettings.from_env())
        setattr(app.state, STATE_ATTRIBUTE, provider)
        logger.info(
            "View provider started: templates under %s from %r",
            provider.template_path, reader,
        )
        try:
            yield
        finally:
            provider.clear()
            delattr(app.state, STATE_ATTRIBUTE)
            logger.info("View provider stopped")

    return lifespan


def get_view_provider(request: Request) -> ViewProvider:
    """Return the application's provider.

    Raises ``RuntimeError`` if the app was built without :func:`view_lifespan`.
    """
    provider = getattr(request.app.state, STATE_ATTRIBUTE, None)
    if provider is None:
        raise RuntimeError(
            "No view provider on application state; install view_lifespan()"
        )
    return provider


def render_view(request: Request, view: View, status_code: int = 200) -> Response:
    """Resolve and render *view* into an HTML response."""
    provider = get_view_provider(request)
    resolved = provider.resolve(view.path)
    if resolved is None:
        raise HTTPException(status_code=404, detail=f"View not found: {view.path}")

    buffer = io.BytesIO()
    provider.write_to(resolved, view.model, buffer)
    return HTMLResponse(
        buffer.getvalue(),
        status_code=status_code,
        media_type=f"text/html; charset={provider.settings.encoding}",
    )


def view_endpoint(func: Callable[[Request], Any]) -> Callable[[Request], Any]:
    """Adapt an endpoint returning a :class:`View` into a Starlette endpoint.

    Both plain and ``async`` endpoints are supported.  Rendering runs in the
    threadpool since template loading reads resources synchronously.
    """

    @functools.wraps(func)
    async def endpoint(request: Request) -> Response:
        if inspect.iscoroutinefunction(func):
            view = await func(request)
        else:
            view = await run_in_threadpool(func, request)
        return await run_in_threadpool(render_view, request, view)

    return endpoint
