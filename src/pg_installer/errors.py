"""Error hierarchy for the pg-module installer."""

from __future__ import annotations

from typing import Any

__all__ = [
    "InstallerError",
    "ConfigNotFoundError",
    "ConfigError",
    "PackageMetadataError",
    "ErrorCodes",
]


class InstallerError(Exception):
    """Base error for all installer errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(InstallerError):
    """Raised when an explicitly requested settings file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(InstallerError):
    """Raised when installer settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class PackageMetadataError(InstallerError):
    """Raised when Composer package metadata cannot be parsed."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="PACKAGE_METADATA_INVALID",
            message=f"Invalid package metadata in '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All installer error codes as constants."""

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    PACKAGE_METADATA_INVALID = "PACKAGE_METADATA_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
