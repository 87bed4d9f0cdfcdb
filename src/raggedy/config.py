"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass

HEAD_CHARS = 500


@dataclass(slots=True)
class AppConfig:
    head_chars: int = HEAD_CHARS
    skip_unreadable: bool = False
