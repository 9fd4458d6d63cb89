"""Configuration loader for linkscrub.

This module loads and validates the YAML configuration file holding the
reference site, tracking list adjustments and checker settings.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from linkscrub.cleaner.tracking import TrackingParameterSet
from linkscrub.core.constants import DEFAULTS
from linkscrub.core.exceptions import ConfigError, InvalidConfigError
from linkscrub.url.site import StaticSite


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "linkscrub.example.yaml"


# ============================================================================
# Configuration Model
# ============================================================================

@dataclass
class AppConfig:
    """Application configuration."""
    site_url: str = ""                      # Reference site for external/relative checks
    tracking_extra: list[str] = field(default_factory=list)
    tracking_keep: list[str] = field(default_factory=list)
    checker_timeout: float = DEFAULTS["timeout"]
    checker_max_redirects: int = DEFAULTS["max_redirects"]
    user_agent: str = DEFAULTS["user_agent"]
    source: Optional[Path] = None           # File the config was loaded from

    def build_tracking_params(self) -> TrackingParameterSet:
        """Built-in tracking set extended with tracking.extra."""
        params = TrackingParameterSet()
        if self.tracking_extra:
            params.extend(self.tracking_extra)
        return params

    def site_context(self) -> Optional[StaticSite]:
        return StaticSite(url=self.site_url) if self.site_url else None


# ============================================================================
# Configuration Paths
# ============================================================================

def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to configs directory (./configs relative to project root)
    """
    # Project root is 3 levels up: core/ -> linkscrub/ -> src/ -> root
    project_root = Path(__file__).parent.parent.parent.parent
    return project_root / "configs"


# ============================================================================
# Validation Helpers
# ============================================================================

def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidConfigError(f"'{name}' must be a mapping")
    return section


def _string_list(section: dict[str, Any], key: str, path: str) -> list[str]:
    value = section.get(key) or []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise InvalidConfigError(f"'{path}' must be a list of strings")
    return value


# ============================================================================
# Loader
# ============================================================================

def load_config(config_file: Path | str | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        config_file: Path to YAML file. If None, loads the example config
            from the configs directory, falling back to defaults when absent

    Returns:
        AppConfig with validated settings

    Raises:
        ConfigError: If file not found or YAML parsing fails
        InvalidConfigError: If configuration has the wrong shape
    """
    if config_file is None:
        config_path = get_config_dir() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            logger.debug(f"No config at {config_path}, using defaults")
            return AppConfig()
    else:
        config_path = Path(config_file)

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfigError("Configuration must be a mapping")

    site = _section(data, "site")
    tracking = _section(data, "tracking")
    checker = _section(data, "checker")

    site_url = site.get("url", "") or ""
    if not isinstance(site_url, str):
        raise InvalidConfigError("'site.url' must be a string")

    timeout = checker.get("timeout", DEFAULTS["timeout"])
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise InvalidConfigError("'checker.timeout' must be a positive number")

    max_redirects = checker.get("max_redirects", DEFAULTS["max_redirects"])
    if isinstance(max_redirects, bool) or not isinstance(max_redirects, int) or max_redirects < 0:
        raise InvalidConfigError("'checker.max_redirects' must be a non-negative integer")

    user_agent = checker.get("user_agent", DEFAULTS["user_agent"])
    if not isinstance(user_agent, str) or not user_agent:
        raise InvalidConfigError("'checker.user_agent' must be a non-empty string")

    return AppConfig(
        site_url=site_url,
        tracking_extra=_string_list(tracking, "extra", "tracking.extra"),
        tracking_keep=_string_list(tracking, "keep", "tracking.keep"),
        checker_timeout=timeout,
        checker_max_redirects=max_redirects,
        user_agent=user_agent,
        source=config_path,
    )
