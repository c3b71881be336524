# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command-line interface for dbinspect."""
