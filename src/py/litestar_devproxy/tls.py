"""TLS material loading for the HTTPS proxy."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import anyio

from litestar_devproxy.exceptions import TLSFileError

if TYPE_CHECKING:
    from litestar_devproxy.config import HttpsConfig

__all__ = ("AnyioFileReader", "FileReader", "TLSSettings", "read_https_settings")


@dataclass(frozen=True)
class TLSSettings:
    """PEM encoded private key and certificate contents."""

    key: bytes
    cert: bytes


@runtime_checkable
class FileReader(Protocol):
    """Reads file contents."""

    async def read_file(self, path: str) -> bytes:
        """Return the bytes stored at ``path``."""
        ...


class AnyioFileReader:
    """Read files asynchronously, resolving relative paths against ``base_dir``."""

    def __init__(self, base_dir: "Path | None" = None) -> None:
        self.base_dir = base_dir

    async def read_file(self, path: str) -> bytes:
        target = Path(path)
        if self.base_dir is not None and not target.is_absolute():
            target = self.base_dir / target
        return await anyio.Path(target).read_bytes()


async def read_https_settings(https: "HttpsConfig", reader: FileReader) -> TLSSettings:
    """Read the private key and certificate concurrently.

    Both reads run to completion before any failure is reported, and a key
    failure is reported before a certificate failure.

    Args:
        https: Paths of the key and certificate.
        reader: The file reader.

    Raises:
        TLSFileError: If either file cannot be read.

    Returns:
        The key and certificate contents.
    """
    contents: dict[str, bytes] = {}
    errors: dict[str, Exception] = {}

    async def _read(kind: str, path: str) -> None:
        try:
            contents[kind] = await reader.read_file(path)
        except Exception as e:  # noqa: BLE001
            errors[kind] = e

    async with anyio.create_task_group() as tg:
        tg.start_soon(_read, "key", https.key_file)
        tg.start_soon(_read, "cert", https.cert_file)

    for kind, path in (("key", https.key_file), ("cert", https.cert_file)):
        if kind in errors:
            error = errors[kind]
            reason = getattr(error, "strerror", None) or str(error)
            raise TLSFileError(kind, path, f"{reason}: {path!r}") from error
    return TLSSettings(key=contents["key"], cert=contents["cert"])
