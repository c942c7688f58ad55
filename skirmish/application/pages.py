from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    text: str
    parse_mode: str = "HTML"
    disable_preview: bool = True
