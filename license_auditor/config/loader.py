"""Policy configuration discovery and loading for license-auditor."""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from license_auditor.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_auditor.exceptions import ConfigurationError
from license_auditor.models.config import AuditConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a policy file in the specified directory.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the first configuration file found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def _read_policy_data(path: Path) -> dict:
    """Parse a policy file into a raw mapping.

    An empty or comment-only file is an empty policy.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Can't read config file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in '{path}' must be a mapping of policy lists, "
            f"got {type(data).__name__}"
        )
    return data


def load_config_file(path: Path) -> AuditConfig:
    """Load the whitelist, blacklist and exceptions from a YAML policy file.

    Raises:
        ConfigurationError: If the file is unreadable, malformed, or a
            policy list holds something other than strings.
    """
    data = _read_policy_data(path)
    if not data:
        return get_default_config()

    try:
        return AuditConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid policy in '{path}': {_describe_policy_errors(e)}"
        ) from e


def _describe_policy_errors(error: ValidationError) -> str:
    # ("whitelist", 2) -> "whitelist[2]"
    described = []
    for err in error.errors():
        field, *index = err["loc"] or ("policy",)
        where = f"{field}" + "".join(f"[{i}]" for i in index)
        described.append(f"{where}: {err['msg']}")
    return "; ".join(described)


def load_config(config_path: str | None = None) -> AuditConfig:
    """Load the policy from a file or discover one in the current directory.

    Args:
        config_path: Optional path to configuration file. If provided,
            it must exist.

    Returns:
        AuditConfig with loaded values.

    Raises:
        ConfigurationError: If the file is missing or invalid, or if no
            configuration file can be discovered.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Can't read config file: '{path}' does not exist")
        return load_config_file(path)

    discovered = find_config_file()
    if discovered is None:
        names = ", ".join(DEFAULT_CONFIG_NAMES)
        raise ConfigurationError(f"No configuration file found (looked for {names})")
    return load_config_file(discovered)
