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

"""View provider: resolves view paths to templates and renders them.

The provider works in two steps, mirroring how the web integration calls it:

1. :meth:`ViewProvider.resolve` turns a logical view path (``"home"``,
   ``"/home.st"``) into a template reference under the configured base path,
   or ``None`` if no such template exists.
2. :meth:`ViewProvider.write_to` renders that reference with a model into a
   binary sink.  Rendering errors never propagate; an inline
   ``<pre class='template-err'>`` block with the traceback is written
   instead, so the response still carries something to diagnose.

Template references always carry the template extension, so ``"home"`` and
``"home.st"`` resolve to the same ``"/WEB-INF/templates/home.st"``.
"""

from __future__ import annotations

import html
import io
import logging
import traceback
from typing import BinaryIO

from viewtemplates.models import RenderModel
from viewtemplates.resources import MalformedPathError, ResourceReader
from viewtemplates.settings import ProviderSettings
from viewtemplates.templates import TemplateGroup

logger = logging.getLogger(__name__)

ERROR_BLOCK_OPEN = "<pre class='template-err'>"
ERROR_BLOCK_CLOSE = "</pre>"


def normalize_view_path(path: str, extension: str) -> str:
    """Return *path* with exactly one leading ``/`` and ending in *extension*.

    Idempotent: normalizing an already normalized path returns it unchanged.
    """
    stem = path[: -len(extension)] if extension and path.endswith(extension) else path
    return "/" + stem.lstrip("/") + extension


class ViewProvider:
    """Resolve and render view templates for one web application.

    One provider is created per application at startup; its template group
    holds the compiled templates until shutdown.
    """

    def __init__(
        self,
        reader: ResourceReader,
        settings: ProviderSettings | None = None,
        template_group: TemplateGroup | None = None,
    ) -> None:
        self.reader = reader
        self.settings = settings or ProviderSettings()
        self.templates = template_group or TemplateGroup(
            reader, encoding=self.settings.encoding,
        )

    @property
    def template_path(self) -> str:
        return self.settings.template_path

    def resolve(self, path: str) -> str | None:
        """Resolve a logical view path to a template reference.

        Returns ``None`` when the template does not exist or the path is
        malformed or cannot be looked up; never raises for any of these.
        """
        logger.debug("Resolving template path [%s]", path)

        relative = normalize_view_path(path, self.settings.extension)
        full_path = self.template_path + relative

        try:
            found = self.reader.get_resource(full_path) is not None
        except MalformedPathError:
            logger.warning(
                "Malformed path finding template [%s] from the web application",
                relative, exc_info=True,
            )
            return None
        except OSError:
            logger.warning(
                "Lookup failed for template [%s] at [%s]", path, full_path, exc_info=True,
            )
            return None

        if not found:
            logger.info(
                "Template not found, path to resolve [%s] context check path [%s]",
                path, full_path,
            )
            return None
        return full_path

    def write_to(self, resolved_path: str, model: RenderModel, out: BinaryIO) -> None:
        """Render *resolved_path* with *model* and write the bytes to *out*."""
        out.flush()

        try:
            logger.debug(
                "Processing template [%s] with model of type %s",
                resolved_path, model.type_name,
            )
            template = self.templates.get_template(resolved_path)
            logger.debug("OK: Resolved template [%s]", resolved_path)
            rendered = template.render(model.variables())
            out.write(rendered.encode(self.settings.encoding))
            out.flush()
            logger.debug("OK: Processed template [%s]", resolved_path)
        except Exception as exc:
            logger.error("Error processing template [%s]", resolved_path, exc_info=True)
            out.write(self._error_block(exc))
            out.flush()

    def render(self, resolved_path: str, model: RenderModel) -> bytes:
        """Render into memory and return the bytes written."""
        buffer = io.BytesIO()
        self.write_to(resolved_path, model, buffer)
        return buffer.getvalue()

    def clear(self) -> None:
        """Drop compiled templates; called when the application shuts down."""
        self.templates.clear()

    def _error_block(self, exc: BaseException) -> bytes:
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        block = ERROR_BLOCK_OPEN + html.escape(trace) + ERROR_BLOCK_CLOSE
        return block.encode(self.settings.encoding)
