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

"""Demo application wiring the pages to the view provider."""

from __future__ import annotations

from starlette.applications import Starlette

from viewtemplates.resources import PackageResourceReader, ResourceReader
from viewtemplates.settings import ProviderSettings
from viewtemplates.web.integration import view_lifespan
from viewtemplates.web.pages import routes

DEMO_PACKAGE = "viewtemplates"
DEMO_WEBAPP_DIR = "webapp"


def create_app(
    settings: ProviderSettings | None = None,
    reader: ResourceReader | None = None,
    debug: bool = False,
) -> Starlette:
    """Create the demo app.

    Without a *reader* the templates bundled in ``viewtemplates/webapp`` are
    served.
    """
    if reader is None:
        reader = PackageResourceReader(DEMO_PACKAGE, DEMO_WEBAPP_DIR)
    return Starlette(
        debug=debug,
        routes=list(routes),
        lifespan=view_lifespan(reader, settings),
    )
