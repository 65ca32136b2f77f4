import errno
from collections.abc import Callable, Generator, Iterable, Sequence
from pathlib import Path
from typing import Any

import pytest

from litestar_devproxy.config import ResolverDefaults
from litestar_devproxy.frameworks import BuildSettings, DevCommands, FrameworkInfo, WatchSettings
from litestar_devproxy.picker import FrameworkOption, OptionFilter
from litestar_devproxy.resolver import SettingsResolver

# Environment variables that may affect test behavior - clear before each test
_DEVPROXY_ENV_VARS = [
    "DEVPROXY_PORT",
    "DEVPROXY_STATIC_PORT",
    "DEVPROXY_JWT_SECRET",
    "DEVPROXY_JWT_ROLE_PATH",
    "DEVPROXY_HOST",
]


@pytest.fixture(autouse=True)
def clean_devproxy_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear DevProxy-related environment variables before each test for isolation."""
    for var in _DEVPROXY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class FakeDetector:
    def __init__(self, frameworks: Sequence[FrameworkInfo] = (), available: "Iterable[str] | None" = None) -> None:
        self.frameworks = list(frameworks)
        self.available = set(available) if available is not None else {f.name for f in self.frameworks}
        self.calls: list[tuple[str, Any]] = []

    async def list_frameworks(self, project_dir: Path) -> list[FrameworkInfo]:
        self.calls.append(("list", project_dir))
        return list(self.frameworks)

    async def has_framework(self, name: str, project_dir: Path) -> bool:
        self.calls.append(("has", name))
        return name in self.available

    async def get_framework(self, name: str, project_dir: Path) -> FrameworkInfo:
        self.calls.append(("get", name))
        return next(f for f in self.frameworks if f.name == name)


class FakePicker:
    def __init__(self, index: int = 0) -> None:
        self.index = index
        self.calls: list[list[FrameworkOption]] = []

    async def choose(self, options: Sequence[FrameworkOption], filter_fn: OptionFilter) -> FrameworkOption:
        self.calls.append(list(options))
        return options[self.index]


class StubPortProber:
    """Returns the preferred port unless it is marked as taken."""

    def __init__(self, taken: Iterable[int] = (), free_port: int = 49152) -> None:
        self.taken = set(taken)
        self.free_port = free_port
        self.calls: list[int] = []

    async def acquire(self, preferred: int) -> int:
        self.calls.append(preferred)
        if preferred and preferred not in self.taken:
            return preferred
        port = self.free_port
        self.free_port += 1
        return port


class FakeFileReader:
    def __init__(self, files: "dict[str, bytes] | None" = None) -> None:
        self.files = files or {}
        self.reads: list[str] = []

    async def read_file(self, path: str) -> bytes:
        self.reads.append(path)
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return self.files[path]


@pytest.fixture
def make_framework() -> Callable[..., FrameworkInfo]:
    def _make(
        name: str = "vite",
        port: int = 5173,
        commands: Sequence[str] = ("npm run dev",),
        build_directory: str = "dist",
        static_assets_directory: "str | None" = None,
        watch: Sequence[Sequence[str]] = (),
        env: "dict[str, str] | None" = None,
    ) -> FrameworkInfo:
        return FrameworkInfo(
            name=name,
            dev=DevCommands(commands=tuple(commands), port=port),
            build=BuildSettings(directory=build_directory),
            static_assets_directory=static_assets_directory,
            env=env or {},
            watch=WatchSettings(commands=tuple(tuple(argv) for argv in watch)),
        )

    return _make


@pytest.fixture
def messages() -> dict[str, list[str]]:
    return {"log": [], "warn": []}


@pytest.fixture
def make_resolver(messages: dict[str, list[str]]) -> Callable[..., SettingsResolver]:
    def _make(
        frameworks: Sequence[FrameworkInfo] = (),
        available: "Iterable[str] | None" = None,
        pick: int = 0,
        taken: Iterable[int] = (),
        files: "dict[str, bytes] | None" = None,
        defaults: "ResolverDefaults | None" = None,
    ) -> SettingsResolver:
        return SettingsResolver(
            detector=FakeDetector(frameworks, available),
            picker=FakePicker(pick),
            reader=FakeFileReader(files),
            prober=StubPortProber(taken),
            defaults=defaults or ResolverDefaults(),
            log=messages["log"].append,
            warn=messages["warn"].append,
        )

    return _make
