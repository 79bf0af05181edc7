"""
Core Module
===========

This is the core module of the Inner Speech toolkit, containing:
- Dataset vocabularies (datatypes, blocks, label codes)
- Configuration management
- Custom exceptions

Quick Start:
-----------
```python
from inner_speech.core import Datatype, get_config, DataNotFoundError

config = get_config()
print(config.get('readers.verbose'))  # WARNING
```
"""

# =============================================================================
# Data Types
# =============================================================================
from inner_speech.core.types import (
    Datatype,
    BLOCKS,
    CONDITION_CODES,
    CLASS_CODES,
    ALL_LABEL,
)

# =============================================================================
# Configuration
# =============================================================================
from inner_speech.core.config import (
    ConfigManager,
    get_config,
    load_config
)

# =============================================================================
# Exceptions
# =============================================================================
from inner_speech.core.exceptions import (
    InnerSpeechError,

    # Data
    DataError,
    InvalidInputError,
    InvalidDatatypeError,
    DataLoadError,
    DataNotFoundError,
    DeserializationError,
    DimensionMismatchError,

    # Configuration
    ConfigurationError,
    ConfigNotFoundError,
    MissingConfigError,
)

# =============================================================================
# Module Exports
# =============================================================================
__all__ = [
    # Data Types
    'Datatype',
    'BLOCKS',
    'CONDITION_CODES',
    'CLASS_CODES',
    'ALL_LABEL',

    # Configuration
    'ConfigManager',
    'get_config',
    'load_config',

    # Exceptions
    'InnerSpeechError',
    'DataError',
    'InvalidInputError',
    'InvalidDatatypeError',
    'DataLoadError',
    'DataNotFoundError',
    'DeserializationError',
    'DimensionMismatchError',
    'ConfigurationError',
    'ConfigNotFoundError',
    'MissingConfigError',
]
