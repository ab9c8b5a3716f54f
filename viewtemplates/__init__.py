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

"""Jinja2 view templates for Starlette web applications.

Templates live under a base path inside the web application
(``/WEB-INF/templates`` by default) and carry the ``.st`` extension.  An
endpoint returns a :class:`View`; the provider resolves it to a template and
renders it with the view's model.  A :class:`MappingModel` exposes its
entries as template variables, a :class:`SingleValueModel` exposes its value
as ``it``.

Usage::

    from viewtemplates import ProviderSettings, ViewProvider, SingleValueModel
    from viewtemplates.resources import DirectoryResourceReader

    provider = ViewProvider(DirectoryResourceReader("webapp"), ProviderSettings())
    ref = provider.resolve("home")          # "/WEB-INF/templates/home.st"
    body = provider.render(ref, SingleValueModel(user))
"""

from viewtemplates.models import MappingModel, RenderModel, SingleValueModel, View
from viewtemplates.provider import ViewProvider, normalize_view_path
from viewtemplates.settings import ProviderSettings

__all__ = [
    "MappingModel",
    "RenderModel",
    "SingleValueModel",
    "View",
    "ViewProvider",
    "normalize_view_path",
    "ProviderSettings",
]
