# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Application bootstrap collaborators (state, directories, metadata)."""
