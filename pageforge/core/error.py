# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations


class PageForgeError(Exception):
    """Base class for all PageForge errors."""


class ConfigurationError(PageForgeError, ValueError):
    """
    Raised while an enhancement (or one of its values) is being configured.

    Configuration errors are detected at construction time so that no
    partially configured enhancement ever reaches the rendering stage.
    """

    def __init__(self, message: str, name: str | None = None, value=None) -> None:
        super().__init__(message)
        self.name = name
        self.value = value


def unknown_constant(kind: str, name: str, allowed) -> ConfigurationError:
    allowed_names = ", ".join(sorted(allowed))
    return ConfigurationError(
        f"Unknown {kind} '{name}' (allowed: {allowed_names})", name=kind, value=name
    )
