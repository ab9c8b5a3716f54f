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

"""Demo pages: ``/{view}`` renders the template of the same name."""

from __future__ import annotations

from starlette.requests import Request
from starlette.routing import Route

from viewtemplates.models import MappingModel, View
from viewtemplates.settings import TEMPLATE_EXTENSION
from viewtemplates.web.integration import view_endpoint

DEFAULT_VIEW = "home"


@view_endpoint
def page(request: Request) -> View:
    view = request.path_params.get("view") or DEFAULT_VIEW
    return View("/" + view + TEMPLATE_EXTENSION, MappingModel({"viewName": view}))


routes = [
    Route("/", page, methods=["GET"]),
    Route("/{view}", page, methods=["GET"]),
]
