# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Setup command catalog."""

from __future__ import annotations

from .command import (
    SERVICES_MANIFEST,
    SetupCommandList,
    parse_assignments,
    update_deployment_config,
    write_services_manifest,
)

__all__ = [
    "SERVICES_MANIFEST",
    "SetupCommandList",
    "parse_assignments",
    "update_deployment_config",
    "write_services_manifest",
]
