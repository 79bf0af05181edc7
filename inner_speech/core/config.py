"""
Configuration Manager
=====================

This module implements the central configuration management for the toolkit.

The configuration manager is responsible for:
- Loading configuration from YAML/JSON files
- Deep-merging successive files over the hardcoded defaults
- Providing typed access to configuration values with dot notation

Configuration Hierarchy:
-----------------------
1. Default config (hardcoded fallbacks, see ``_init_defaults``)
2. Files passed to ``load`` in call order
3. Runtime overrides (``set`` / ``update``)

Each level overrides values from previous levels.

Example Usage:
    ```python
    from inner_speech.core.config import get_config

    config = get_config()
    config.load('configs/local.yaml')

    root = config.get('data.root_dir')
    verbose = config.get('readers.verbose', 'WARNING')
    config.set('time_window.t_end', 3.0)
    ```
"""

from typing import Dict, List, Optional, Any, Union
from pathlib import Path
import yaml
import json
import logging
import threading
from copy import deepcopy

from inner_speech.core.exceptions import ConfigNotFoundError, ConfigurationError

# Configure logging
logger = logging.getLogger(__name__)

# Levels accepted by the MNE readers' ``verbose`` argument
READER_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigManager:
    """
    Central configuration manager.

    Implements the Singleton pattern with thread-safe creation.

    Attributes:
        _instance: Singleton instance
        _lock: Thread lock
        _config: Hierarchical configuration dictionary
        _sources: Track which file each value came from
        _defaults: Default values
    """

    _instance: Optional['ConfigManager'] = None
    _lock: threading.Lock = threading.Lock()

    # =========================================================================
    # SINGLETON PATTERN
    # =========================================================================

    def __new__(cls) -> 'ConfigManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the configuration manager."""
        if self._initialized:
            return

        self._config: Dict[str, Any] = {}
        self._sources: Dict[str, str] = {}
        self._loaded_files: List[str] = []
        self._defaults: Dict[str, Any] = {}

        self._init_defaults()

        self._initialized = True
        logger.debug("ConfigManager initialized")

    @classmethod
    def get_instance(cls) -> 'ConfigManager':
        """Get the singleton configuration manager."""
        return cls()

    @classmethod
    def reset(cls) -> None:
        """Reset the configuration manager (mainly for testing)."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance._config.clear()
                cls._instance._sources.clear()
                cls._instance._loaded_files.clear()
                cls._instance._initialized = False
            cls._instance = None
        logger.debug("ConfigManager reset")

    # =========================================================================
    # DEFAULT CONFIGURATION
    # =========================================================================

    def _init_defaults(self) -> None:
        """Initialize hardcoded default values."""
        self._defaults = {
            'project': {
                'name': 'inner-speech',
                'version': '1.0.0',
            },

            # Dataset locations
            'data': {
                'root_dir': None,
                'tfr_dir': None,
                'sampling_rate': 256,          # BioSemi recordings, decimated
            },

            # Arguments forwarded to the MNE readers
            'readers': {
                'verbose': 'WARNING',
                'preload': True,
            },

            # Action interval of each trial, in seconds from the epoch start
            'time_window': {
                't_start': 1.5,
                't_end': 3.5,
            },

            'logging': {
                'level': 'INFO',
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'file': None,
            },
        }

        self._config = deepcopy(self._defaults)

    # =========================================================================
    # LOADING CONFIGURATION
    # =========================================================================

    def load(self,
             path: Union[str, Path],
             merge: bool = True) -> 'ConfigManager':
        """
        Load configuration from a file.

        Args:
            path: Path to configuration file (YAML or JSON)
            merge: If True, merge with existing config. If False, replace
                everything except the defaults.

        Returns:
            Self for method chaining

        Raises:
            ConfigNotFoundError: If file doesn't exist
            ConfigurationError: If file format is unsupported or unreadable
        """
        path = Path(path)

        if not path.exists():
            raise ConfigNotFoundError(str(path))

        suffix = path.suffix.lower()
        try:
            if suffix in ['.yaml', '.yml']:
                with open(path, 'r') as f:
                    data = yaml.safe_load(f) or {}
            elif suffix == '.json':
                with open(path, 'r') as f:
                    data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported config format: {path.suffix}",
                    suggestion="Use a .yaml, .yml or .json file."
                )
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Could not parse configuration file '{path}'",
                details=str(e)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file '{path}' must contain a mapping",
                details=f"Got {type(data).__name__}"
            )

        if not merge:
            self._config = deepcopy(self._defaults)
            self._sources.clear()
        self._merge_config(data, str(path))

        self._loaded_files.append(str(path))
        logger.info(f"Loaded configuration from {path}")

        return self

    def _merge_config(self,
                      new_config: Dict[str, Any],
                      source: str) -> None:
        """Deep merge new configuration into existing."""
        def deep_merge(base: Dict, update: Dict, prefix: str = '') -> Dict:
            for key, value in update.items():
                full_key = f"{prefix}.{key}" if prefix else key

                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    deep_merge(base[key], value, full_key)
                else:
                    base[key] = value
                    self._sources[full_key] = source

            return base

        deep_merge(self._config, new_config)

    # =========================================================================
    # ACCESSING CONFIGURATION
    # =========================================================================

    def get(self,
            key: str,
            default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Example:
            >>> config.get('readers.verbose')
            'WARNING'
            >>> config.get('nonexistent', default='fallback')
            'fallback'
        """
        value = self._config

        try:
            for k in key.split('.'):
                value = value[k]
        except (KeyError, TypeError):
            return default
        return default if value is None else value

    def get_int(self, key: str, default: int = 0) -> int:
        """Get configuration value as integer."""
        return int(self.get(key, default))

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get configuration value as float."""
        return float(self.get(key, default))

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get configuration value as boolean."""
        value = self.get(key, default)
        if isinstance(value, str):
            return value.lower() in ('true', 'yes', '1', 'on')
        return bool(value)

    def get_section(self, key: str) -> Dict[str, Any]:
        """Get a configuration section as a deep-copied dictionary."""
        value = self.get(key, {})
        return deepcopy(value) if isinstance(value, dict) else {}

    def get_source(self, key: str) -> str:
        """Get the source (file) where a value was defined."""
        return self._sources.get(key, 'default')

    # =========================================================================
    # MODIFYING CONFIGURATION
    # =========================================================================

    def set(self,
            key: str,
            value: Any,
            source: str = 'runtime') -> 'ConfigManager':
        """
        Set a configuration value.

        Example:
            >>> config.set('data.root_dir', '/data/inner_speech')
        """
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        self._sources[key] = source

        logger.debug(f"Set {key} = {value}")
        return self

    def update(self,
               values: Dict[str, Any],
               source: str = 'runtime') -> 'ConfigManager':
        """Update multiple dot-notation keys at once."""
        for key, value in values.items():
            self.set(key, value, source)
        return self

    # =========================================================================
    # SAVING CONFIGURATION
    # =========================================================================

    def save(self,
             path: Union[str, Path],
             sections: Optional[List[str]] = None) -> None:
        """
        Save configuration to a file.

        Args:
            path: Output file path
            sections: If specified, only save these sections
        """
        path = Path(path)

        if sections:
            data = {s: self.get_section(s) for s in sections}
        else:
            data = deepcopy(self._config)

        path.parent.mkdir(parents=True, exist_ok=True)

        if path.suffix.lower() in ['.yaml', '.yml']:
            with open(path, 'w') as f:
                yaml.safe_dump(data, f, default_flow_style=False)
        elif path.suffix.lower() == '.json':
            with open(path, 'w') as f:
                json.dump(data, f, indent=2)
        else:
            raise ConfigurationError(f"Unsupported format: {path.suffix}")

        logger.info(f"Saved configuration to {path}")

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def validate(self) -> List[str]:
        """
        Validate the current configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        verbose = self.get('readers.verbose')
        if not isinstance(verbose, str) or verbose.upper() not in READER_LEVELS:
            errors.append(
                f"readers.verbose must be one of {READER_LEVELS}, got {verbose!r}"
            )

        fs = self.get('data.sampling_rate')
        if not isinstance(fs, (int, float)) or fs <= 0:
            errors.append(f"data.sampling_rate must be positive, got {fs!r}")

        t_start = self.get('time_window.t_start')
        t_end = self.get('time_window.t_end')
        if t_start is None or t_end is None or t_start >= t_end:
            errors.append(
                f"time_window.t_start must be lower than t_end, "
                f"got {t_start!r} >= {t_end!r}"
            )

        return errors

    def __repr__(self) -> str:
        return f"ConfigManager(files={len(self._loaded_files)})"

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def get_config() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    return ConfigManager.get_instance()


def load_config(path: Union[str, Path]) -> ConfigManager:
    """Load configuration from file into the singleton."""
    return get_config().load(path)
