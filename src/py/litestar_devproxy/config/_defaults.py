"""Resolver defaults."""

import os
from dataclasses import dataclass, field

from litestar_devproxy.config._constants import (
    DEFAULT_HOST,
    DEFAULT_JWT_ROLE_PATH,
    DEFAULT_JWT_SECRET,
    DEFAULT_PORT,
    DEFAULT_STATIC_PORT,
)

__all__ = ("ResolverDefaults",)


@dataclass(frozen=True)
class ResolverDefaults:
    """Default values the settings resolver falls back to.

    Each value can be overridden through the environment, which makes it easy to
    move the proxy off a port that is permanently taken on a given machine.

    Attributes:
        port: Preferred proxy port when ``port`` is not configured (``DEVPROXY_PORT``).
        static_port: Preferred static server port (``DEVPROXY_STATIC_PORT``).
        jwt_secret: Secret used when ``jwtSecret`` is not configured (``DEVPROXY_JWT_SECRET``).
        jwt_role_path: Role claim path used when ``jwtRolePath`` is not configured
            (``DEVPROXY_JWT_ROLE_PATH``).
        host: Interface the socket prober checks ports on (``DEVPROXY_HOST``).
    """

    port: int = field(default_factory=lambda: int(os.getenv("DEVPROXY_PORT", str(DEFAULT_PORT))))
    static_port: int = field(default_factory=lambda: int(os.getenv("DEVPROXY_STATIC_PORT", str(DEFAULT_STATIC_PORT))))
    jwt_secret: str = field(default_factory=lambda: os.getenv("DEVPROXY_JWT_SECRET", DEFAULT_JWT_SECRET))
    jwt_role_path: str = field(default_factory=lambda: os.getenv("DEVPROXY_JWT_ROLE_PATH", DEFAULT_JWT_ROLE_PATH))
    host: str = field(default_factory=lambda: os.getenv("DEVPROXY_HOST", DEFAULT_HOST))

    def __post_init__(self) -> None:
        """Reject defaults that could never produce a valid settings record."""
        for name in ("port", "static_port"):
            value = getattr(self, name)
            if not 0 < value < 65536:  # noqa: PLR2004
                msg = f"Invalid default {name}: {value!r}. Expected a TCP port between 1 and 65535"
                raise ValueError(msg)
