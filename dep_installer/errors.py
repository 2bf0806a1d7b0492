from __future__ import annotations


class InstallError(RuntimeError):
    """Fatal configuration error; the run stops with exit status 1."""


class SkipDistribution(Exception):
    """A single distribution cannot be installed; the run continues."""

    def __init__(self, name: str, reason: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.reason = reason
