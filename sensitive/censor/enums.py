from __future__ import annotations

from enum import Enum


class WordSource(str, Enum):
    manual = "manual"
    file = "file"
