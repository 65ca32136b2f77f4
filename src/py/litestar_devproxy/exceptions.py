"""Litestar-DevProxy exception classes."""

__all__ = [
    "ConfigFileError",
    "DevProxyError",
    "FrameworkRequirementError",
    "PickerError",
    "PortUnavailableError",
    "SettingsConflictError",
    "SettingsTypeError",
    "TLSFileError",
    "UnknownFrameworkError",
    "UnsatisfiableSettingsError",
]


class DevProxyError(Exception):
    """Base exception for Litestar-DevProxy related errors."""


class SettingsTypeError(DevProxyError, TypeError):
    """Raised when a configuration value has the wrong type."""


class SettingsConflictError(DevProxyError, ValueError):
    """Raised when options are mutually exclusive or required together."""


class UnsatisfiableSettingsError(DevProxyError):
    """Raised when the configuration is valid but cannot be satisfied."""


class FrameworkRequirementError(UnsatisfiableSettingsError):
    """Raised when a configured framework does not match the project."""

    def __init__(self, framework: str) -> None:
        super().__init__(f'Specified "framework" detector "{framework}" did not pass requirements for your project')
        self.framework = framework


class PortUnavailableError(UnsatisfiableSettingsError):
    """Raised when an explicitly requested port could not be acquired."""

    def __init__(self, port: int) -> None:
        super().__init__(f'Could not acquire required "port": {port}')
        self.port = port


class TLSFileError(DevProxyError):
    """Raised when the TLS private key or certificate cannot be read."""

    def __init__(self, kind: str, path: str, reason: str) -> None:
        label = "private key" if kind == "key" else "certificate"
        super().__init__(f"Error reading {label} file: {reason}")
        self.kind = kind
        self.path = path


class ConfigFileError(DevProxyError):
    """Raised when the project configuration file cannot be read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not load configuration file {path!r}: {reason}")
        self.path = path


class UnknownFrameworkError(DevProxyError, KeyError):
    """Raised when a framework id is not part of the catalog."""

    def __init__(self, framework: str) -> None:
        super().__init__(f"Unknown framework {framework!r}")
        self.framework = framework

    def __str__(self) -> str:
        return str(self.args[0])


class PickerError(DevProxyError):
    """Raised when the interactive picker cannot produce a selection."""
