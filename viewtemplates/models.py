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

"""Render models and views.

Endpoints hand a :class:`View` to the framework integration.  The view's
model is chosen explicitly by the endpoint:

* :class:`MappingModel` — each entry becomes a template variable.
* :class:`SingleValueModel` — the value is bound to the single variable
  ``it``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

SINGLE_VALUE_VARIABLE = "it"


@dataclass(frozen=True)
class MappingModel:
    """Model whose entries are exposed directly as template variables."""

    values: Mapping[str, Any] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        return type(self.values).__name__

    def variables(self) -> dict[str, Any]:
        """Return a fresh copy of the mapping, keyed by variable name."""
        return dict(self.values)


@dataclass(frozen=True)
class SingleValueModel:
    """Model exposed to the template as the one variable ``it``."""

    value: Any = None

    @property
    def type_name(self) -> str:
        return "None" if self.value is None else type(self.value).__name__

    def variables(self) -> dict[str, Any]:
        return {SINGLE_VALUE_VARIABLE: self.value}


RenderModel = Union[MappingModel, SingleValueModel]


@dataclass(frozen=True)
class View:
    """A logical view path plus the model to render it with."""

    path: str
    model: RenderModel = field(default_factory=MappingModel)

    @classmethod
    def of(cls, path: str, **variables: Any) -> View:
        """Shorthand for a view over a :class:`MappingModel` of *variables*."""
        return cls(path, MappingModel(variables))
