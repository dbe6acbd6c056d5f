"""Configuration package for elim-ranks."""

from __future__ import annotations

from elim_ranks.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
