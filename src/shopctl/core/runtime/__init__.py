# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers (dependency injection, service wiring, etc.)."""

from .di import (
    CircularDependencyError,
    ServiceContainer,
    ServiceResolutionError,
    service_factory,
)

__all__ = [
    "CircularDependencyError",
    "ServiceContainer",
    "ServiceResolutionError",
    "service_factory",
]
