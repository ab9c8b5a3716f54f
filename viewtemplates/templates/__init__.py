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

"""Jinja2 template group for web application resources.

Usage::

    from viewtemplates.resources import DirectoryResourceReader
    from viewtemplates.templates import TemplateGroup

    group = TemplateGroup(DirectoryResourceReader("/srv/myapp"))
    html = group.get_template("/WEB-INF/templates/home.st").render(viewName="home")
"""

from viewtemplates.templates.group import TemplateGroup

__all__ = ["TemplateGroup"]
