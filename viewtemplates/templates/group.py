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

"""Jinja2 template group backed by a web application's resources.

Template names are absolute resource paths (``/WEB-INF/templates/home.st``).
Source is read through a :class:`~viewtemplates.resources.ResourceReader`
rather than the filesystem, so templates can live inside a packaged
application.  Compiled templates are cached by Jinja2 for the lifetime of
the group.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from jinja2 import Environment, FunctionLoader, Template, TemplateNotFound

from viewtemplates.resources import MalformedPathError, ResourceReader

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 400


def _always_current() -> bool:
    return True


class TemplateGroup:
    """Compiled-template cache over a resource reader.

    Args:
        reader: Where template source is read from.
        encoding: Character encoding of template files.
        cache_size: Number of compiled templates Jinja2 keeps.
        autoescape: HTML-escape substituted values.
    """

    def __init__(
        self,
        reader: ResourceReader,
        *,
        encoding: str = "utf-8",
        cache_size: int = DEFAULT_CACHE_SIZE,
        autoescape: bool = True,
    ) -> None:
        self.reader = reader
        self.encoding = encoding
        self._env = Environment(
            loader=FunctionLoader(self.load_source),
            cache_size=cache_size,
            auto_reload=False,
            keep_trailing_newline=True,
            autoescape=autoescape,
        )

    @property
    def environment(self) -> Environment:
        return self._env

    def load_source(self, name: str) -> tuple[str, str, callable] | None:
        """Read the source of template *name* through the reader.

        Returns ``None`` (which Jinja2 reports as ``TemplateNotFound``) when
        the resource cannot be opened or read.  The stream is closed on every
        path; a failure to close it is logged only.
        """
        stream: BinaryIO | None = None
        try:
            stream = self.reader.open_resource(name)
            text = io.TextIOWrapper(stream, encoding=self.encoding)
            source = text.read()
            text.detach()
        except MalformedPathError as exc:
            logger.error("Malformed path in finding template [%s]: %s", name, exc)
            return None
        except (OSError, UnicodeDecodeError):
            logger.error("Can't load [%s] from the web application", name, exc_info=True)
            return None
        finally:
            if stream is not None:
                try:
                    stream.close()
                except OSError:
                    logger.error("Cannot close stream for template [%s]", name, exc_info=True)

        logger.debug("Loaded template source [%s] (%d chars)", name, len(source))
        return source, name, _always_current

    def get_template(self, name: str) -> Template:
        """Return the compiled template, loading it on first use.

        Raises ``jinja2.TemplateNotFound`` if the source cannot be loaded.
        """
        return self._env.get_template(name)

    def has_template(self, name: str) -> bool:
        """Check whether a template can be loaded and compiled."""
        try:
            self._env.get_template(name)
            return True
        except TemplateNotFound:
            return False

    def clear(self) -> None:
        """Drop all compiled templates."""
        if self._env.cache is not None:
            self._env.cache.clear()
        logger.debug("Cleared template group over %r", self.reader)
