#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/utils/__init__.py
"""Internal helpers: dependency checks and debug timing."""
