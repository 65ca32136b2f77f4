"""Typed ``[dev]`` block and CLI flag settings."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from litestar_devproxy.exceptions import SettingsTypeError

__all__ = ("DevConfig", "DevFlags", "HttpsConfig", "normalize_dev_config", "normalize_flags")


@dataclass(frozen=True)
class HttpsConfig:
    """Paths of the TLS material served by the proxy.

    Attributes:
        key_file: Path to the PEM encoded private key.
        cert_file: Path to the PEM encoded certificate.
    """

    key_file: str
    cert_file: str


@dataclass(frozen=True)
class DevConfig:
    """The ``[dev]`` block of the project configuration file.

    ``target_port`` and ``port`` are kept as supplied; their types are checked
    by the resolver at the point where they are used.

    Attributes:
        framework: A framework id, ``"#auto"``, ``"#custom"`` or ``"#static"``.
        command: Command that starts the application dev server.
        target_port: Port the application dev server listens on.
        port: Port the proxy listens on.
        publish: Directory served as static assets.
        functions: Directory holding serverless functions.
        functions_port: Port of the functions server.
        jwt_secret: Secret used to sign development JWTs.
        jwt_role_path: Claim path of the roles inside development JWTs.
        https: TLS key and certificate paths.
    """

    framework: str
    command: "str | None" = None
    target_port: Any = None
    port: Any = None
    publish: "str | None" = None
    functions: "str | None" = None
    functions_port: "int | None" = None
    jwt_secret: "str | None" = None
    jwt_role_path: "str | None" = None
    https: "HttpsConfig | None" = None


@dataclass(frozen=True)
class DevFlags:
    """Command line overrides.

    Attributes:
        dir: Directory to serve with the static server, skipping detection.
        static_server_port: Preferred port of the static server.
    """

    dir: "str | None" = None
    static_server_port: "int | None" = None


_DEV_KEYS = {
    "framework": "framework",
    "command": "command",
    "targetPort": "target_port",
    "port": "port",
    "publish": "publish",
    "functions": "functions",
    "functionsPort": "functions_port",
    "jwtSecret": "jwt_secret",
    "jwtRolePath": "jwt_role_path",
}


def _normalize_https(value: Any) -> HttpsConfig:
    if not isinstance(value, Mapping):
        msg = "https options should be an object with 'keyFile' and 'certFile' string properties"
        raise SettingsTypeError(msg)
    key_file = value.get("keyFile")
    cert_file = value.get("certFile")
    if not isinstance(key_file, str):
        msg = "Private key file configuration should be a string"
        raise SettingsTypeError(msg)
    if not isinstance(cert_file, str):
        msg = "Certificate file configuration should be a string"
        raise SettingsTypeError(msg)
    return HttpsConfig(key_file=key_file, cert_file=cert_file)


def normalize_dev_config(raw: "Mapping[str, Any] | DevConfig") -> DevConfig:
    """Validate a raw ``[dev]`` mapping and convert it into a :class:`DevConfig`.

    Args:
        raw: The ``[dev]`` mapping using the camelCase keys of the config file.

    Raises:
        SettingsTypeError: If ``raw`` is not a mapping, if ``framework`` is missing or not a string, or if
            ``https`` is malformed.

    Returns:
        The normalized configuration.
    """
    if isinstance(raw, DevConfig):
        return raw
    if not isinstance(raw, Mapping):
        msg = "Invalid dev configuration provided. Expected a table of options"
        raise SettingsTypeError(msg)
    if not isinstance(raw.get("framework"), str):
        msg = 'Invalid "framework" option provided in config'
        raise SettingsTypeError(msg)

    values: dict[str, Any] = {attr: raw[key] for key, attr in _DEV_KEYS.items() if key in raw}
    https = raw.get("https")
    if https is not None:
        values["https"] = _normalize_https(https)
    return DevConfig(**values)


def normalize_flags(raw: "Mapping[str, Any] | DevFlags | None") -> DevFlags:
    """Convert raw CLI flags into :class:`DevFlags`.

    Returns:
        The normalized flags.
    """
    if raw is None:
        return DevFlags()
    if isinstance(raw, DevFlags):
        return raw
    return DevFlags(
        dir=raw.get("dir") or None,
        static_server_port=raw.get("staticServerPort", raw.get("static_server_port")),
    )
