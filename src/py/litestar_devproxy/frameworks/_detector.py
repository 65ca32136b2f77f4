"""Framework detection from ``package.json``."""

import logging
import shlex
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import anyio
from litestar.exceptions import SerializationException
from litestar.serialization import decode_json

from litestar_devproxy.exceptions import ConfigFileError, UnknownFrameworkError
from litestar_devproxy.frameworks._catalog import FRAMEWORKS, FrameworkDefinition
from litestar_devproxy.frameworks._types import BuildSettings, DevCommands, FrameworkInfo, WatchSettings

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ("FrameworkDetector", "PackageJsonDetector")

logger = logging.getLogger("litestar_devproxy")

_PREFERRED_SCRIPTS = ("dev", "start", "develop", "serve")

_LOCKFILE_RUNNERS = (
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
)


@runtime_checkable
class FrameworkDetector(Protocol):
    """Detects the frontend frameworks used by a project."""

    async def list_frameworks(self, project_dir: Path) -> list[FrameworkInfo]:
        """Return every framework detected in the project, most relevant first."""
        ...

    async def has_framework(self, name: str, project_dir: Path) -> bool:
        """Return True if the named framework is used by the project."""
        ...

    async def get_framework(self, name: str, project_dir: Path) -> FrameworkInfo:
        """Return the descriptor of the named framework for the project."""
        ...


class PackageJsonDetector:
    """Detect frameworks from the dependencies and scripts of ``package.json``."""

    def __init__(self, definitions: "Mapping[Any, FrameworkDefinition] | None" = None) -> None:
        self.definitions = dict(definitions) if definitions is not None else dict(FRAMEWORKS)

    async def list_frameworks(self, project_dir: Path) -> list[FrameworkInfo]:
        package = await self._read_package(project_dir)
        if package is None:
            return []
        runner = self._detect_runner(project_dir)
        frameworks = [
            self._build_info(definition, package, runner)
            for definition in self.definitions.values()
            if self._matches(definition, package)
        ]
        logger.debug("Detected frameworks in %s: %s", project_dir, [f.name for f in frameworks])
        return frameworks

    async def has_framework(self, name: str, project_dir: Path) -> bool:
        definition = self._get_definition(name)
        package = await self._read_package(project_dir)
        return package is not None and self._matches(definition, package)

    async def get_framework(self, name: str, project_dir: Path) -> FrameworkInfo:
        definition = self._get_definition(name)
        package = await self._read_package(project_dir) or {}
        return self._build_info(definition, package, self._detect_runner(project_dir))

    def _get_definition(self, name: str) -> FrameworkDefinition:
        for definition in self.definitions.values():
            if definition.name.value == name:
                return definition
        raise UnknownFrameworkError(name)

    @staticmethod
    async def _read_package(project_dir: Path) -> "dict[str, Any] | None":
        path = anyio.Path(project_dir) / "package.json"
        if not await path.is_file():
            return None
        content = await path.read_text(encoding="utf-8")
        try:
            package = decode_json(content)
        except SerializationException as e:
            raise ConfigFileError(str(path), str(e)) from e
        if not isinstance(package, dict):
            raise ConfigFileError(str(path), "expected a JSON object")
        return package

    @staticmethod
    def _detect_runner(project_dir: Path) -> str:
        for lockfile, runner in _LOCKFILE_RUNNERS:
            if (project_dir / lockfile).exists():
                return runner
        return "npm"

    @staticmethod
    def _dependencies(package: "dict[str, Any]") -> set[str]:
        names: set[str] = set()
        for key in ("dependencies", "devDependencies"):
            section = package.get(key)
            if isinstance(section, dict):
                names.update(section)
        return names

    def _matches(self, definition: FrameworkDefinition, package: "dict[str, Any]") -> bool:
        return any(dep in self._dependencies(package) for dep in definition.dependencies)

    @staticmethod
    def _dev_scripts(definition: FrameworkDefinition, package: "dict[str, Any]") -> list[tuple[str, list[str]]]:
        """Find scripts that invoke one of the framework binaries.

        Returns:
            ``(script name, argv)`` pairs, preferred script names first.
        """
        scripts = package.get("scripts")
        if not isinstance(scripts, dict):
            return []
        matched: list[tuple[str, list[str]]] = []
        for script_name, body in scripts.items():
            if not isinstance(body, str):
                continue
            try:
                argv = shlex.split(body)
            except ValueError:
                continue
            if "build" in argv:
                continue
            if any(Path(arg).name in definition.binaries for arg in argv):
                matched.append((script_name, argv))

        def _rank(item: tuple[str, list[str]]) -> tuple[int, str]:
            name = item[0]
            return (_PREFERRED_SCRIPTS.index(name) if name in _PREFERRED_SCRIPTS else len(_PREFERRED_SCRIPTS), name)

        return sorted(matched, key=_rank)

    def _build_info(self, definition: FrameworkDefinition, package: "dict[str, Any]", runner: str) -> FrameworkInfo:
        scripts = self._dev_scripts(definition, package)
        commands = tuple(f"{runner} run {name}" for name, _ in scripts) or (definition.default_command,)
        return FrameworkInfo(
            name=definition.name.value,
            title=definition.title,
            dev=DevCommands(commands=commands, port=definition.port),
            build=BuildSettings(directory=definition.build_directory),
            static_assets_directory=definition.static_assets_directory,
            env=dict(definition.env),
            watch=WatchSettings(commands=tuple(tuple(argv) for _, argv in scripts)),
        )
