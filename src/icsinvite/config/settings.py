"""Configuration settings for the calendar invite application."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from icsinvite.config.env import EnvConfig
from icsinvite.config.types import GlobalConfig
from icsinvite.config.utils import deep_merge
from icsinvite.config.utils import parse_bool
from icsinvite.config.utils import resolve_path
from icsinvite.exceptions import ConfigError


LINE_TERMINATORS = {
    'crlf': '\r\n',
    'lf': '\n',
}

DEFAULT_CONFIG: GlobalConfig = {
    'calendar': {
        'prodid': '-//icsinvite//Calendar Invite//EN',
        'default_filename': 'invite.ics',
        'line_terminator': 'crlf',
        'escape_text': True,
        'uid_domain': 'icsinvite',
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}

@dataclass(frozen=True)
class IcsSettings:
    """Resolved settings used when rendering and delivering invites."""
    prodid: str = DEFAULT_CONFIG['calendar']['prodid']
    default_filename: str = DEFAULT_CONFIG['calendar']['default_filename']
    line_terminator: str = LINE_TERMINATORS['crlf']
    escape_text: bool = True
    uid_domain: str = DEFAULT_CONFIG['calendar']['uid_domain']
    log_level: str = 'WARNING'
    log_file: str | None = None

    @classmethod
    def from_config(cls, config: GlobalConfig) -> "IcsSettings":
        """Create settings from a merged configuration dictionary.
        
        Raises:
            ConfigError: If a value is invalid
        """
        calendar = config['calendar']
        logging_config = config['logging']
        if not isinstance(calendar, dict) or not isinstance(logging_config, dict):
            raise ConfigError("Sections 'calendar' and 'logging' must be mappings")

        terminator = str(calendar['line_terminator']).lower()
        if terminator not in LINE_TERMINATORS:
            raise ConfigError(
                f"Unknown line terminator: {calendar['line_terminator']}",
                {"allowed": sorted(LINE_TERMINATORS)}
            )
        
        try:
            escape_text = parse_bool(calendar['escape_text'])
        except ValueError as e:
            raise ConfigError(str(e), {"key": "calendar.escape_text"}) from e
        
        for key in ('prodid', 'default_filename', 'uid_domain'):
            if not str(calendar[key]).strip():
                raise ConfigError(f"Configuration value calendar.{key} must not be empty")
        
        return cls(
            prodid=str(calendar['prodid']),
            default_filename=str(calendar['default_filename']),
            line_terminator=LINE_TERMINATORS[terminator],
            escape_text=escape_text,
            uid_domain=str(calendar['uid_domain']),
            log_level=str(logging_config['level']).upper(),
            log_file=logging_config.get('file') or None
        )

def _get_config_path(config_dir: str | Path | None = None) -> Path | None:
    """Get configuration directory path."""
    config_dir = config_dir or EnvConfig.get_config_dir()
    if not config_dir:
        return None
    return resolve_path(config_dir, os.getcwd())

def _load_yaml_config(config_path: Path | None) -> dict[str, Any]:
    """Load configuration overrides from config.yaml if present."""
    if config_path is None:
        return {}
    
    config_file = config_path / "config.yaml"
    if not config_file.exists():
        return {}
    
    try:
        with open(config_file, encoding="utf-8") as f:
            loaded_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}", {"file": str(config_file)}) from e
    
    if loaded_config is None:
        return {}
    if not isinstance(loaded_config, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {config_file}", {"file": str(config_file)})
    return loaded_config

def load_settings(config_dir: str | Path | None = None) -> IcsSettings:
    """Load settings from defaults, config.yaml and environment variables.
    
    Args:
        config_dir: Directory holding config.yaml; falls back to ICSINVITE_CONFIG_DIR
        
    Returns:
        Resolved settings
        
    Raises:
        ConfigError: If the configuration is invalid
    """
    config = deep_merge(DEFAULT_CONFIG, _load_yaml_config(_get_config_path(config_dir)))
    EnvConfig.update_config_from_env(config)
    return IcsSettings.from_config(config)
