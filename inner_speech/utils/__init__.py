"""
Utilities Module
================

This module provides common utility functions for the toolkit.

Available Modules:
-----------------
- logging: Centralized logging configuration
- naming: Subject identifiers and label spellings
- validation: Argument checks and row-wise stacking

Example Usage:
    ```python
    from inner_speech.utils import setup_logging, subject_token

    setup_logging(level='INFO')
    subject_token(3)  # 'sub-03'
    ```
"""

# =============================================================================
# Logging Utilities
# =============================================================================
from inner_speech.utils.logging import (
    setup_logging,
    get_logger,
    set_level,
    log_execution_time,
    LogLevel,
    ProgressLogger,
)

# =============================================================================
# Naming Utilities
# =============================================================================
from inner_speech.utils.naming import (
    subject_token,
    normalize_condition,
    normalize_class_label,
    normalize_label_pair,
)

# =============================================================================
# Validation Utilities
# =============================================================================
from inner_speech.utils.validation import (
    check_subject,
    check_block,
    check_positive,
    validate_array,
    validate_same_length,
    stack_rows,
)

# =============================================================================
# Module Exports
# =============================================================================
__all__ = [
    # Logging
    'setup_logging',
    'get_logger',
    'set_level',
    'log_execution_time',
    'LogLevel',
    'ProgressLogger',

    # Naming
    'subject_token',
    'normalize_condition',
    'normalize_class_label',
    'normalize_label_pair',

    # Validation
    'check_subject',
    'check_block',
    'check_positive',
    'validate_array',
    'validate_same_length',
    'stack_rows',
]
