"""Errors raised while building configuration from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base class for problems that stop a lookup from being configured."""


class InvalidConfigurationError(ConfigurationError):
    """An environment variable is set to a value specconf cannot use."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        super().__init__(f"{variable} {reason}, got {value!r}")
        self.variable = variable
        self.value = value
