"""Environment variable handling for configuration."""

import os
from typing import Any


class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to configuration paths
    ENV_MAPPING = {
        'ICSINVITE_PRODID': ('calendar', 'prodid'),
        'ICSINVITE_DEFAULT_FILENAME': ('calendar', 'default_filename'),
        'ICSINVITE_LINE_TERMINATOR': ('calendar', 'line_terminator'),
        'ICSINVITE_ESCAPE_TEXT': ('calendar', 'escape_text'),
        'ICSINVITE_UID_DOMAIN': ('calendar', 'uid_domain'),
        'ICSINVITE_LOG_LEVEL': ('logging', 'level'),
        'ICSINVITE_LOG_FILE': ('logging', 'file'),
    }

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @staticmethod
    def _set_nested_value(config: dict[str, Any], path: tuple, value: Any) -> None:
        """Set value in nested dictionary using path tuple."""
        current = config
        for part in path[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[path[-1]] = value

    @classmethod
    def update_config_from_env(cls, config: dict[str, Any]) -> None:
        """Update configuration dictionary with environment variables.
        
        Args:
            config: Configuration dictionary to update
        """
        for env_var, path in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                cls._set_nested_value(config, path, value)

    @classmethod
    def get_config_dir(cls) -> str | None:
        """Get configuration directory from environment."""
        return cls.get_env_value('ICSINVITE_CONFIG_DIR')
