"""
cluesat/version.py
==================
Package version. pyproject.toml carries the same number.
"""

from __future__ import annotations

from typing import NamedTuple


class VersionInfo(NamedTuple):
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


VERSION_INFO = VersionInfo(major=0, minor=2, patch=0)

__version__: str = str(VERSION_INFO)
