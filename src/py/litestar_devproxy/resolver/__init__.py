"""Development proxy settings resolution.

The resolver merges four sources into one :class:`ResolvedSettings` record:

- command line flags (``--dir``, ``--static-server-port``)
- the ``[dev]`` block of ``devproxy.toml``
- framework detection
- port availability on the local machine

Resolution runs in three stages. An origin is selected from the flags and the
``[dev]`` block (see :func:`select_origin`), the origin produces a draft, and
the draft is passed through the override and validation steps before the proxy
and functions ports are negotiated and the TLS material is loaded. Any failure
aborts the whole resolution; a partial record is never returned.

Example::

    from pathlib import Path

    from litestar_devproxy.config import load_dev_config
    from litestar_devproxy.resolver import resolve_settings

    settings = resolve_settings(load_dev_config(Path.cwd()), {"dir": None}, Path.cwd())
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

import anyio

from litestar_devproxy._utils import echo_info, echo_warn
from litestar_devproxy.config import (
    FRAMEWORK_CUSTOM,
    DevConfig,
    DevFlags,
    ResolverDefaults,
    normalize_dev_config,
    normalize_flags,
)
from litestar_devproxy.exceptions import FrameworkRequirementError
from litestar_devproxy.frameworks import FrameworkDetector, PackageJsonDetector
from litestar_devproxy.picker import ConsolePicker, FrameworkPicker, filter_options, format_framework_options
from litestar_devproxy.ports import PortProber, SocketPortProber, negotiate_port
from litestar_devproxy.resolver._origin import (
    AutoDetected,
    Custom,
    Fallback,
    NamedFramework,
    SettingsOrigin,
    StaticDir,
    select_origin,
)
from litestar_devproxy.resolver._static import static_server_settings
from litestar_devproxy.resolver._steps import (
    apply_command_override,
    apply_dist,
    apply_functions,
    apply_jwt_defaults,
    apply_target_port,
    check_distinct_ports,
    check_functions_port_type,
    check_port_conflict,
    check_port_type,
    needs_static_fallback,
    require_framework_port,
    settings_from_framework,
    validate_custom_settings,
)
from litestar_devproxy.resolver._types import ResolvedSettings, SettingsDraft
from litestar_devproxy.tls import AnyioFileReader, FileReader, read_https_settings

__all__ = (
    "AutoDetected",
    "Custom",
    "Fallback",
    "NamedFramework",
    "ResolvedSettings",
    "SettingsDraft",
    "SettingsOrigin",
    "SettingsResolver",
    "StaticDir",
    "resolve_settings",
    "select_origin",
)

logger = logging.getLogger("litestar_devproxy")


class SettingsResolver:
    """Resolve development proxy settings.

    All collaborators are optional; the defaults detect frameworks from
    ``package.json``, prompt on the terminal, probe ports with sockets, and read
    TLS files relative to the project directory.

    Args:
        detector: Framework detector.
        picker: Interactive picker used when several frameworks are detected.
        reader: File reader for the TLS key and certificate.
        prober: Port prober.
        defaults: Default ports and JWT settings.
        log: Sink for informational messages.
        warn: Sink for warnings.
    """

    __slots__ = ("defaults", "detector", "log", "picker", "prober", "reader", "warn")

    def __init__(
        self,
        *,
        detector: "FrameworkDetector | None" = None,
        picker: "FrameworkPicker | None" = None,
        reader: "FileReader | None" = None,
        prober: "PortProber | None" = None,
        defaults: "ResolverDefaults | None" = None,
        log: "Callable[[str], None] | None" = None,
        warn: "Callable[[str], None] | None" = None,
    ) -> None:
        self.defaults = defaults or ResolverDefaults()
        self.detector = detector or PackageJsonDetector()
        self.picker = picker or ConsolePicker()
        self.reader = reader
        self.prober = prober or SocketPortProber(self.defaults.host)
        self.log = log or echo_info
        self.warn = warn or echo_warn

    async def resolve(
        self,
        dev_config: "Mapping[str, Any] | DevConfig",
        flags: "Mapping[str, Any] | DevFlags | None" = None,
        project_dir: "Path | str | None" = None,
    ) -> ResolvedSettings:
        """Resolve the settings for one invocation.

        Args:
            dev_config: The ``[dev]`` block, raw or normalized.
            flags: Command line overrides, raw or normalized.
            project_dir: The project root, the current directory when omitted.

        Returns:
            The resolved settings.
        """
        dev_config = normalize_dev_config(dev_config)
        flags = normalize_flags(flags)
        project_dir = Path(project_dir) if project_dir is not None else Path.cwd()

        check_distinct_ports(dev_config)
        origin = select_origin(dev_config, flags)
        logger.debug("Selected settings origin %r for %s", origin, project_dir)
        draft = await self._draft_from_origin(origin, dev_config, project_dir)

        draft = apply_command_override(draft, dev_config, self.log)
        draft = apply_dist(draft, dev_config, flags)
        draft = apply_target_port(draft, dev_config, flags)
        draft = check_port_conflict(draft, dev_config)

        if needs_static_fallback(draft):
            self.warn('No app server detected and no "command" specified')
            draft = await self._static_settings(draft.dist, flags.static_server_port, project_dir)

        draft = require_framework_port(draft)
        check_port_type(dev_config)
        draft = check_port_conflict(draft, dev_config)
        draft = await self._negotiate_proxy_port(draft, dev_config)

        draft = apply_jwt_defaults(draft, dev_config, self.defaults)
        draft = apply_functions(draft, dev_config)
        if draft.functions:
            check_functions_port_type(dev_config)
            functions_port = await negotiate_port(self.prober, dev_config.functions_port or 0)
            draft = replace(draft, functions_port=functions_port)
        if dev_config.https is not None:
            reader = self.reader or AnyioFileReader(project_dir)
            draft = replace(draft, https=await read_https_settings(dev_config.https, reader))
        if not draft.dist:
            draft = replace(draft, dist=str(Path.cwd()))

        return ResolvedSettings.from_draft(draft)

    async def _draft_from_origin(
        self, origin: SettingsOrigin, dev_config: DevConfig, project_dir: Path
    ) -> SettingsDraft:
        match origin:
            case StaticDir(directory=directory, preferred_port=preferred_port):
                self.warn("Using simple static server because --dir flag was specified")
                return await self._static_settings(directory, preferred_port, project_dir)
            case AutoDetected():
                return await self._detect_framework_settings(project_dir)
            case Custom():
                validate_custom_settings(dev_config)
                return SettingsDraft(framework=FRAMEWORK_CUSTOM)
            case NamedFramework(name=name):
                if not await self.detector.has_framework(name, project_dir):
                    raise FrameworkRequirementError(name)
                return settings_from_framework(await self.detector.get_framework(name, project_dir))
            case _:
                return SettingsDraft()

    async def _detect_framework_settings(self, project_dir: Path) -> SettingsDraft:
        frameworks = await self.detector.list_frameworks(project_dir)
        if not frameworks:
            return SettingsDraft()
        if len(frameworks) == 1:
            return settings_from_framework(frameworks[0])

        options = format_framework_options(frameworks)
        chosen = await self.picker.choose(options, filter_options)
        self.log(
            f'Add `framework = "{chosen.value.name}"` to [dev] section of your devproxy.toml '
            "to avoid this selection prompt next time"
        )
        return settings_from_framework(chosen.value)

    async def _static_settings(
        self, dist: "str | None", preferred_port: "int | None", project_dir: Path
    ) -> SettingsDraft:
        return await static_server_settings(
            dist,
            preferred_port,
            project_dir,
            prober=self.prober,
            defaults=self.defaults,
            log=self.log,
            warn=self.warn,
        )

    async def _negotiate_proxy_port(self, draft: SettingsDraft, dev_config: DevConfig) -> SettingsDraft:
        # an explicit port must be honored exactly; the default may move
        preferred = dev_config.port or self.defaults.port
        if not dev_config.port and preferred == draft.framework_port:
            preferred = 0
        port = await negotiate_port(self.prober, preferred, required=bool(dev_config.port))
        logger.debug("Proxy port negotiated: preferred=%s acquired=%s", preferred, port)
        return replace(draft, port=port)


def resolve_settings(
    dev_config: "Mapping[str, Any] | DevConfig",
    flags: "Mapping[str, Any] | DevFlags | None" = None,
    project_dir: "Path | str | None" = None,
    **collaborators: Any,
) -> ResolvedSettings:
    """Resolve development proxy settings synchronously.

    Args:
        dev_config: The ``[dev]`` block, raw or normalized.
        flags: Command line overrides, raw or normalized.
        project_dir: The project root, the current directory when omitted.
        **collaborators: Keyword arguments forwarded to :class:`SettingsResolver`.

    Returns:
        The resolved settings.
    """
    resolver = SettingsResolver(**collaborators)
    return anyio.run(resolver.resolve, dev_config, flags, project_dir)
