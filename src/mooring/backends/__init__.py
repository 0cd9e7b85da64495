# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Target backends
"""
Backend implementations that turn prepared requests into network calls.
"""

from .base import TargetBackend
from .httpx import HTTPXTargetBackend

__all__ = [
    "TargetBackend",
    "HTTPXTargetBackend",
]
