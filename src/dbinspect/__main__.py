# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Entry point for ``python -m dbinspect``."""

from dbinspect.cli.commands import main

if __name__ == "__main__":
    main()
