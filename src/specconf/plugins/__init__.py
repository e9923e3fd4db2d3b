"""Configuration plugins run against a document configuration."""

from __future__ import annotations

from . import w3c_group

__all__ = ["w3c_group"]
