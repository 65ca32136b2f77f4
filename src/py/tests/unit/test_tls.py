import errno
from pathlib import Path

import pytest

from litestar_devproxy.config import HttpsConfig
from litestar_devproxy.exceptions import TLSFileError
from litestar_devproxy.tls import AnyioFileReader, FileReader, TLSSettings, read_https_settings

pytestmark = pytest.mark.anyio


class DictFileReader:
    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = files

    async def read_file(self, path: str) -> bytes:
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return self.files[path]


HTTPS = HttpsConfig(key_file="key.pem", cert_file="cert.pem")


async def test_read_https_settings() -> None:
    settings = await read_https_settings(HTTPS, DictFileReader({"key.pem": b"KEY", "cert.pem": b"CERT"}))

    assert settings == TLSSettings(key=b"KEY", cert=b"CERT")


async def test_read_https_settings_key_failure() -> None:
    with pytest.raises(TLSFileError, match="Error reading private key file") as exc_info:
        await read_https_settings(HTTPS, DictFileReader({"cert.pem": b"CERT"}))

    assert exc_info.value.kind == "key"
    assert exc_info.value.path == "key.pem"


async def test_read_https_settings_cert_failure() -> None:
    with pytest.raises(TLSFileError, match="Error reading certificate file") as exc_info:
        await read_https_settings(HTTPS, DictFileReader({"key.pem": b"KEY"}))

    assert exc_info.value.kind == "cert"
    assert "cert.pem" in str(exc_info.value)


async def test_read_https_settings_reports_key_first() -> None:
    with pytest.raises(TLSFileError) as exc_info:
        await read_https_settings(HTTPS, DictFileReader({}))

    assert exc_info.value.kind == "key"


class KeyErrorReader(DictFileReader):
    def __init__(self, files: dict[str, bytes]) -> None:
        super().__init__(files)
        self.read: list[str] = []

    async def read_file(self, path: str) -> bytes:
        if path == "key.pem":
            msg = "unsupported key format"
            raise ValueError(msg)
        content = await super().read_file(path)
        self.read.append(path)
        return content


async def test_read_https_settings_wraps_any_reader_error() -> None:
    reader = KeyErrorReader({"cert.pem": b"CERT"})

    with pytest.raises(TLSFileError, match="unsupported key format") as exc_info:
        await read_https_settings(HTTPS, reader)

    assert exc_info.value.kind == "key"
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert reader.read == ["cert.pem"]


async def test_anyio_file_reader(tmp_path: Path) -> None:
    (tmp_path / "key.pem").write_bytes(b"KEY")
    absolute = tmp_path / "cert.pem"
    absolute.write_bytes(b"CERT")
    reader = AnyioFileReader(tmp_path)

    assert isinstance(reader, FileReader)
    assert await reader.read_file("key.pem") == b"KEY"
    assert await reader.read_file(str(absolute)) == b"CERT"


async def test_anyio_file_reader_loads_tls_from_project(tmp_path: Path) -> None:
    (tmp_path / "key.pem").write_bytes(b"KEY")

    with pytest.raises(TLSFileError, match="certificate") as exc_info:
        await read_https_settings(HTTPS, AnyioFileReader(tmp_path))

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
