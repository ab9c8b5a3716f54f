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

"""Access to web application resources.

Usage::

    from viewtemplates.resources import DirectoryResourceReader

    reader = DirectoryResourceReader("/srv/myapp")
    reader.get_resource("/WEB-INF/templates/home.st")   # "file:///srv/..."
"""

from viewtemplates.resources.readers import (
    DirectoryResourceReader,
    MalformedPathError,
    MappingResourceReader,
    PackageResourceReader,
    ResourceReader,
    split_resource_path,
)

__all__ = [
    "ResourceReader",
    "MalformedPathError",
    "DirectoryResourceReader",
    "PackageResourceReader",
    "MappingResourceReader",
    "split_resource_path",
]
