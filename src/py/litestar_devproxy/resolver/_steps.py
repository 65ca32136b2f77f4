"""Resolution steps applied to a settings draft.

Each step takes the current draft and returns a new one, or raises when the
configuration cannot be honored. None of them touch the network or the file
system.
"""

from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from litestar_devproxy.config._constants import FRAMEWORK_CUSTOM
from litestar_devproxy.exceptions import SettingsConflictError, SettingsTypeError, UnsatisfiableSettingsError
from litestar_devproxy.resolver._origin import has_custom_command
from litestar_devproxy.resolver._types import SettingsDraft

if TYPE_CHECKING:
    from litestar_devproxy.config import DevConfig, DevFlags, ResolverDefaults
    from litestar_devproxy.frameworks import FrameworkInfo

__all__ = (
    "apply_command_override",
    "apply_dist",
    "apply_functions",
    "apply_jwt_defaults",
    "apply_target_port",
    "check_distinct_ports",
    "check_functions_port_type",
    "check_port_conflict",
    "check_port_type",
    "needs_static_fallback",
    "require_framework_port",
    "settings_from_framework",
    "validate_custom_settings",
)

LogFn = Callable[[str], None]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def settings_from_framework(framework: "FrameworkInfo") -> SettingsDraft:
    """Derive a draft from a detected framework.

    Returns:
        A draft with the framework's primary command, port, output directory and environment.
    """
    return SettingsDraft(
        command=framework.dev.commands[0] if framework.dev.commands else None,
        framework_port=framework.dev.port,
        dist=framework.static_assets_directory or framework.build.directory,
        framework=framework.name,
        env=dict(framework.env),
    )


def validate_custom_settings(dev_config: "DevConfig") -> None:
    """Check the pairing rules of the ``#custom`` framework.

    Raises:
        SettingsConflictError: If ``#custom`` lacks ``command`` or ``targetPort``, or if
            both are given together with a named framework.
    """
    if dev_config.framework == FRAMEWORK_CUSTOM and not has_custom_command(dev_config):
        msg = '"command" and "targetPort" properties are required when "framework" is set to "#custom"'
        raise SettingsConflictError(msg)
    if dev_config.framework != FRAMEWORK_CUSTOM and has_custom_command(dev_config):
        msg = '"framework" option must be set to "#custom" when specifying both "command" and "targetPort" options'
        raise SettingsConflictError(msg)


def apply_command_override(draft: SettingsDraft, dev_config: "DevConfig", log: LogFn) -> SettingsDraft:
    if draft.no_cmd or not dev_config.command:
        return draft
    log(f"Overriding command with setting derived from devproxy.toml [dev] block: {dev_config.command}")
    return replace(draft, command=dev_config.command)


def apply_dist(draft: SettingsDraft, dev_config: "DevConfig", flags: "DevFlags") -> SettingsDraft:
    return replace(draft, dist=flags.dir or dev_config.publish or draft.dist)


def apply_target_port(draft: SettingsDraft, dev_config: "DevConfig", flags: "DevFlags") -> SettingsDraft:
    """Make ``targetPort`` the application port.

    Raises:
        SettingsTypeError: If ``targetPort`` is not an integer.
        SettingsConflictError: If no command is known or the ``--dir`` flag is set.

    Returns:
        The draft with ``framework_port`` set to ``targetPort``, or unchanged when it is not configured.
    """
    target_port = dev_config.target_port
    if not target_port:
        return draft
    if not _is_int(target_port):
        msg = 'Invalid "targetPort" option specified. The value of "targetPort" option must be an integer'
        raise SettingsTypeError(msg)
    if not draft.command:
        msg = 'No "command" specified or detected. The "command" option is required to use "targetPort" option.'
        raise SettingsConflictError(msg)
    if flags.dir:
        msg = '"targetPort" option cannot be used in conjunction with "dir" flag which is used to run a static server.'
        raise SettingsConflictError(msg)
    return replace(draft, framework_port=target_port)


def check_distinct_ports(dev_config: "DevConfig") -> None:
    """Reject a ``targetPort`` equal to ``port``.

    Runs before any origin is selected, so the conflict is reported whatever else is configured.

    Raises:
        SettingsConflictError: If both are set to the same value.
    """
    if dev_config.target_port and dev_config.target_port == dev_config.port:
        msg = (
            '"port" and "targetPort" options cannot have same values. '
            "The proxy and the application must listen on different ports."
        )
        raise SettingsConflictError(msg)


def check_port_conflict(draft: SettingsDraft, dev_config: "DevConfig") -> SettingsDraft:
    if dev_config.port and dev_config.port == draft.framework_port:
        msg = (
            'The "port" option you specified conflicts with the port of your application. '
            'Please use a different value for "port"'
        )
        raise SettingsConflictError(msg)
    return draft


def needs_static_fallback(draft: SettingsDraft) -> bool:
    return not draft.command and not draft.framework and not draft.no_cmd


def require_framework_port(draft: SettingsDraft) -> SettingsDraft:
    if not draft.framework_port:
        msg = 'No "targetPort" option specified or detected.'
        raise UnsatisfiableSettingsError(msg)
    return draft


def check_port_type(dev_config: "DevConfig") -> None:
    if dev_config.port and not _is_int(dev_config.port):
        msg = 'Invalid "port" option specified. The value of "port" option must be an integer'
        raise SettingsTypeError(msg)


def check_functions_port_type(dev_config: "DevConfig") -> None:
    if dev_config.functions_port and not _is_int(dev_config.functions_port):
        msg = 'Invalid "functionsPort" option specified. The value of "functionsPort" option must be an integer'
        raise SettingsTypeError(msg)


def apply_jwt_defaults(draft: SettingsDraft, dev_config: "DevConfig", defaults: "ResolverDefaults") -> SettingsDraft:
    return replace(
        draft,
        jwt_secret=dev_config.jwt_secret or defaults.jwt_secret,
        jwt_role_path=dev_config.jwt_role_path or defaults.jwt_role_path,
    )


def apply_functions(draft: SettingsDraft, dev_config: "DevConfig") -> SettingsDraft:
    return replace(draft, functions=dev_config.functions or draft.functions)
