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

"""Provider configuration.

The template base path is read from the ``viewtemplates.template.path``
initialization parameter (the web application's equivalent of a context
parameter), or from the ``VIEWTEMPLATES_TEMPLATE_PATH`` environment variable.
When absent or blank it defaults to ``/WEB-INF/templates``.

Example of configuring the template path::

    settings = ProviderSettings.from_init_params(
        {"viewtemplates.template.path": "/WEB-INF/pages"}
    )
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

TEMPLATE_PATH_PARAM = "viewtemplates.template.path"
TEMPLATE_PATH_ENV_VAR = "VIEWTEMPLATES_TEMPLATE_PATH"
DEFAULT_TEMPLATE_PATH = "/WEB-INF/templates"
TEMPLATE_EXTENSION = ".st"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class ProviderSettings:
    """Settings for a :class:`~viewtemplates.provider.ViewProvider`."""

    template_path: str = DEFAULT_TEMPLATE_PATH
    extension: str = TEMPLATE_EXTENSION
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        # A base path of "/" becomes the empty prefix
        stripped = self.template_path.rstrip("/")
        object.__setattr__(self, "template_path", stripped)

    @classmethod
    def from_init_params(cls, params: Mapping[str, str] | None) -> ProviderSettings:
        """Build settings from a mapping of initialization parameters."""
        value = (params or {}).get(TEMPLATE_PATH_PARAM)
        return cls(template_path=_template_path_or_default(value, TEMPLATE_PATH_PARAM))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ProviderSettings:
        """Build settings from ``VIEWTEMPLATES_TEMPLATE_PATH``."""
        env = os.environ if environ is None else environ
        value = env.get(TEMPLATE_PATH_ENV_VAR)
        return cls(template_path=_template_path_or_default(value, TEMPLATE_PATH_ENV_VAR))


def _template_path_or_default(value: str | None, source: str) -> str:
    if value is None or not value.strip():
        logger.info(
            "No '%s' configured, defaulting to '%s'", source, DEFAULT_TEMPLATE_PATH,
        )
        return DEFAULT_TEMPLATE_PATH
    return value.strip()
