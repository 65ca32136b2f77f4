"""Settings records produced by the resolver."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from litestar_devproxy.config._constants import empty_dict_factory
from litestar_devproxy.exceptions import UnsatisfiableSettingsError
from litestar_devproxy.tls import TLSSettings

__all__ = ("ResolvedSettings", "SettingsDraft")


def _frozen_env() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class SettingsDraft:
    """Settings under construction.

    Every resolution step returns a new draft; fields stay ``None`` until a
    step fills them.
    """

    command: "str | None" = None
    framework_port: "int | None" = None
    port: "int | None" = None
    dist: "str | None" = None
    framework: "str | None" = None
    env: dict[str, str] = field(default_factory=empty_dict_factory)
    no_cmd: bool = False
    jwt_secret: "str | None" = None
    jwt_role_path: "str | None" = None
    functions: "str | None" = None
    functions_port: "int | None" = None
    https: "TLSSettings | None" = None


@dataclass(frozen=True)
class ResolvedSettings:
    """Validated settings for starting the development proxy.

    Attributes:
        command: Command that starts the application, None when only static files are served.
        framework_port: Port the application listens on.
        port: Port the proxy listens on, always different from ``framework_port``.
        dist: Directory static assets are served from.
        framework: Framework name, ``"#custom"``, or None.
        env: Extra environment variables for the application command, read-only.
        no_cmd: True when there is no application process to start.
        jwt_secret: Secret used to sign development JWTs.
        jwt_role_path: Claim path of the roles inside development JWTs.
        functions: Directory holding serverless functions.
        functions_port: Port of the functions server, set only with ``functions``.
        https: TLS key and certificate, set only when HTTPS is configured.
    """

    framework_port: int
    port: int
    dist: str
    jwt_secret: str
    jwt_role_path: str
    command: "str | None" = None
    framework: "str | None" = None
    env: Mapping[str, str] = field(default_factory=_frozen_env)
    no_cmd: bool = False
    functions: "str | None" = None
    functions_port: "int | None" = None
    https: "TLSSettings | None" = None

    @classmethod
    def from_draft(cls, draft: SettingsDraft) -> "ResolvedSettings":
        """Freeze a completed draft.

        Raises:
            UnsatisfiableSettingsError: If the draft violates a settings invariant.

        Returns:
            The resolved settings.
        """
        if not draft.framework_port or draft.framework_port < 0:
            msg = 'No "targetPort" option specified or detected.'
            raise UnsatisfiableSettingsError(msg)
        if not draft.port or draft.port < 0:
            msg = "No proxy port could be negotiated."
            raise UnsatisfiableSettingsError(msg)
        if draft.port == draft.framework_port:
            msg = f"The proxy port and the application port must differ, both are {draft.port}."
            raise UnsatisfiableSettingsError(msg)
        if not draft.no_cmd and not draft.command:
            msg = 'No "command" specified or detected.'
            raise UnsatisfiableSettingsError(msg)
        if not draft.dist or draft.jwt_secret is None or draft.jwt_role_path is None:
            msg = "Settings resolution finished with incomplete defaults."
            raise UnsatisfiableSettingsError(msg)
        return cls(
            command=draft.command,
            framework_port=draft.framework_port,
            port=draft.port,
            dist=draft.dist,
            framework=draft.framework,
            env=MappingProxyType(dict(draft.env)),
            no_cmd=draft.no_cmd,
            jwt_secret=draft.jwt_secret,
            jwt_role_path=draft.jwt_role_path,
            functions=draft.functions,
            functions_port=draft.functions_port,
            https=draft.https,
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the settings with camelCase keys.

        TLS contents are replaced by their sizes so the result is safe to print.

        Returns:
            A JSON compatible mapping.
        """
        https = self.https
        return {
            "command": self.command,
            "frameworkPort": self.framework_port,
            "port": self.port,
            "dist": self.dist,
            "framework": self.framework,
            "env": dict(self.env),
            "noCmd": self.no_cmd,
            "jwtSecret": self.jwt_secret,
            "jwtRolePath": self.jwt_role_path,
            "functions": self.functions,
            "functionsPort": self.functions_port,
            "https": {"keyBytes": len(https.key), "certBytes": len(https.cert)} if https else None,
        }
