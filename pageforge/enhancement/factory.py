# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Enhancement factory.

Creates enhancements from stylesheet-style definitions, where every
enhancement is named and configured with a mapping of attribute strings:

    factory.create("border", {"color": "#333", "type": "top+bottom", "size": "0.5mm"})

Attribute names are the constructor arguments of the enhancement class
(``type`` selects the border edges).
"""

from __future__ import annotations

import inspect
import logging
from typing import Mapping

from ..core.error import ConfigurationError
from .base import Enhancement
from .border import Border

logger = logging.getLogger(__name__)


class EnhancementFactory:
    def __init__(self) -> None:
        self._definitions: dict[str, type] = {}
        self.register("border", Border)

    def register(self, name: str, enhancement_class: type) -> None:
        self._definitions[name] = enhancement_class

    def get_names(self) -> list[str]:
        return sorted(self._definitions)

    def create(self, name: str, params: Mapping | None = None) -> Enhancement:
        """
        Create an enhancement by name.

        Args:
            name: Registered enhancement name, e.g. "border"
            params: Attribute mapping, values as in a stylesheet

        Raises:
            ConfigurationError: Unknown enhancement name, unknown attribute or
                invalid attribute value.
        """
        if name not in self._definitions:
            raise ConfigurationError(
                f"Unknown enhancement '{name}' (allowed: {', '.join(self.get_names())})",
                name="enhancement", value=name,
            )
        enhancement_class = self._definitions[name]
        allowed = set(inspect.signature(enhancement_class).parameters)

        kwargs = {}
        for attribute, value in (params or {}).items():
            if attribute not in allowed:
                raise ConfigurationError(
                    f"Unknown attribute '{attribute}' for enhancement '{name}'",
                    name=attribute, value=value,
                )
            kwargs[attribute] = value

        enhancement = enhancement_class(**kwargs)
        logger.debug("Created enhancement %s: %r", name, enhancement)
        return enhancement

    def create_all(self, definitions: Mapping[str, Mapping]) -> list[Enhancement]:
        return [self.create(name, params) for name, params in definitions.items()]
