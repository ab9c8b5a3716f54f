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

"""Web application resource readers.

A resource path is absolute within the web application, e.g.
``/WEB-INF/templates/home.st``.  Readers answer two questions about such a
path: where is it (``get_resource``) and what are its bytes
(``open_resource``).

Three readers are provided:

1. :class:`DirectoryResourceReader` — an exploded web application on disk.
2. :class:`PackageResourceReader` — resources shipped inside an installed
   Python package, read through :mod:`importlib.resources`.
3. :class:`MappingResourceReader` — in-memory resources.
"""

from __future__ import annotations

import importlib.resources
import io
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class MalformedPathError(ValueError):
    """A resource path that cannot address anything inside the application."""


@runtime_checkable
class ResourceReader(Protocol):
    """Access to the resources of a web application."""

    def get_resource(self, path: str) -> str | None:
        """Return the location of *path*, or ``None`` if it does not exist.

        Raises :class:`MalformedPathError` for an invalid *path*.
        """
        ...

    def open_resource(self, path: str) -> BinaryIO:
        """Open *path* for binary reading.

        Raises :class:`MalformedPathError` for an invalid *path* and
        :class:`FileNotFoundError` when it does not exist.
        """
        ...


def split_resource_path(path: str) -> list[str]:
    """Validate a resource path and return its segments.

    Empty and ``.`` segments are dropped.  ``..`` may step back up but never
    above the application root.
    """
    if not path.startswith("/"):
        raise MalformedPathError(f"Resource path must begin with '/': {path!r}")
    if "\\" in path or "\x00" in path:
        raise MalformedPathError(f"Illegal character in resource path: {path!r}")

    segments: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if not segments:
                raise MalformedPathError(f"Resource path escapes the root: {path!r}")
            segments.pop()
            continue
        segments.append(part)
    return segments


class DirectoryResourceReader:
    """Resources of a web application exploded into *root*."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).expanduser().resolve()

    def _locate(self, path: str) -> Path:
        target = self.root.joinpath(*split_resource_path(path)).resolve()
        # Symlinks may not lead outside the application root
        if not target.is_relative_to(self.root):
            raise MalformedPathError(f"Resource path escapes the root: {path!r}")
        return target

    def get_resource(self, path: str) -> str | None:
        target = self._locate(path)
        if not target.is_file():
            return None
        return target.as_uri()

    def open_resource(self, path: str) -> BinaryIO:
        target = self._locate(path)
        logger.debug("Opening resource %s from %s", path, target)
        return target.open("rb")

    def __repr__(self) -> str:
        return f"DirectoryResourceReader({str(self.root)!r})"


class PackageResourceReader:
    """Resources bundled in *package*, optionally below *subdir*.

    Works for packages installed from wheels or zip files, where the
    resources are not plain files on disk.
    """

    def __init__(self, package: str, subdir: str = "") -> None:
        self.package = package
        self.subdir = subdir.strip("/")

    def _traversable(self, path: str):
        ref = importlib.resources.files(self.package)
        segments = split_resource_path(path)
        if self.subdir:
            segments = self.subdir.split("/") + segments
        for segment in segments:
            ref = ref.joinpath(segment)
        return ref

    def get_resource(self, path: str) -> str | None:
        ref = self._traversable(path)
        if not ref.is_file():
            return None
        return f"package://{self.package}/{'/'.join(split_resource_path(path))}"

    def open_resource(self, path: str) -> BinaryIO:
        ref = self._traversable(path)
        if not ref.is_file():
            raise FileNotFoundError(f"No resource {path!r} in package {self.package}")
        return ref.open("rb")

    def __repr__(self) -> str:
        return f"PackageResourceReader({self.package!r}, subdir={self.subdir!r})"


class MappingResourceReader:
    """In-memory resources keyed by absolute resource path."""

    def __init__(self, resources: Mapping[str, str | bytes] | None = None) -> None:
        self._resources: dict[str, bytes] = {}
        for path, content in (resources or {}).items():
            self.add(path, content)

    def add(self, path: str, content: str | bytes) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        self._resources[self._key(path)] = data

    def _key(self, path: str) -> str:
        return "/" + "/".join(split_resource_path(path))

    def get_resource(self, path: str) -> str | None:
        key = self._key(path)
        return f"memory:{key}" if key in self._resources else None

    def open_resource(self, path: str) -> BinaryIO:
        key = self._key(path)
        if key not in self._resources:
            raise FileNotFoundError(f"No in-memory resource {path!r}")
        return io.BytesIO(self._resources[key])
