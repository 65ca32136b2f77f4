"""TCP port negotiation."""

import logging
import socket
from typing import Protocol, runtime_checkable

from litestar_devproxy.config._constants import DEFAULT_HOST
from litestar_devproxy.exceptions import PortUnavailableError

__all__ = ("PortProber", "SocketPortProber", "negotiate_port", "pick_free_port")

logger = logging.getLogger("litestar_devproxy")


@runtime_checkable
class PortProber(Protocol):
    """Finds a free TCP port."""

    async def acquire(self, preferred: int) -> int:
        """Return ``preferred`` when it is free, otherwise another free port.

        A ``preferred`` of 0 asks for any free port.
        """
        ...


def pick_free_port(host: str = DEFAULT_HOST) -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((host, 0))
        return sock.getsockname()[1]


def _is_port_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
        return True


class SocketPortProber:
    """Probe ports by binding a socket on ``host``."""

    def __init__(self, host: str = DEFAULT_HOST) -> None:
        self.host = host

    async def acquire(self, preferred: int) -> int:
        if preferred and _is_port_free(self.host, preferred):
            return preferred
        port = pick_free_port(self.host)
        if preferred:
            logger.debug("Port %s on %s is in use, picked %s", preferred, self.host, port)
        return port


async def negotiate_port(prober: PortProber, preferred: int, *, required: bool = False) -> int:
    """Ask ``prober`` for a port close to the caller's preference.

    Args:
        prober: The port prober.
        preferred: The preferred port, or 0 for any free port.
        required: Fail instead of accepting a different port.

    Raises:
        PortUnavailableError: If ``required`` is set and the prober returned another port.

    Returns:
        The negotiated port.
    """
    port = await prober.acquire(preferred)
    if required and port != preferred:
        raise PortUnavailableError(preferred)
    return port
