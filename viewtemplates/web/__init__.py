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

"""Starlette bindings for the view provider."""

from viewtemplates.web.app import create_app
from viewtemplates.web.integration import (
    get_view_provider,
    render_view,
    view_endpoint,
    view_lifespan,
)

__all__ = [
    "create_app",
    "get_view_provider",
    "render_view",
    "view_endpoint",
    "view_lifespan",
]
