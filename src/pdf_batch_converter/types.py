"""Shared type aliases for batch conversion modules."""

from __future__ import annotations

import os

type PathLike = str | os.PathLike[str]
