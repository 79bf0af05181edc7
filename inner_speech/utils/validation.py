"""
Validation Utilities
====================

Argument checks shared by the loaders and the selection helpers. Every
check runs before any file is opened, so an invalid call never touches the
disk.

Example Usage:
    ```python
    from inner_speech.utils.validation import check_subject, validate_array

    check_subject(n_s)
    validate_array(X, expected_ndim=3, name='X')
    ```
"""

from typing import Optional, Sequence
import numbers
import numpy as np
import logging

from inner_speech.core.exceptions import InvalidInputError, DimensionMismatchError
from inner_speech.core.types import BLOCKS

logger = logging.getLogger(__name__)


# =============================================================================
# IDENTIFIERS
# =============================================================================

def check_subject(n_s, name: str = 'subject') -> None:
    """
    Check that a subject number is a positive integer.

    Raises:
        InvalidInputError: If ``n_s`` is not a positive integer
    """
    if isinstance(n_s, bool) or not isinstance(n_s, numbers.Integral) or n_s < 1:
        raise InvalidInputError(name, 'a positive integer', n_s)


def check_block(n_b, name: str = 'block') -> None:
    """
    Check that a block index belongs to the recording protocol.

    Raises:
        InvalidInputError: If ``n_b`` is not in ``BLOCKS``
    """
    if isinstance(n_b, bool) or n_b not in BLOCKS:
        raise InvalidInputError(name, f"one of {list(BLOCKS)}", n_b)


def check_positive(value, name: str = 'value') -> None:
    """Check that a number is strictly positive."""
    if not isinstance(value, numbers.Real) or value <= 0:
        raise InvalidInputError(name, 'a positive number', value)


# =============================================================================
# ARRAY VALIDATION
# =============================================================================

def validate_array(array: np.ndarray,
                   expected_ndim: Optional[int] = None,
                   min_ndim: Optional[int] = None,
                   name: str = 'array') -> None:
    """
    Validate a numpy array's type and dimensionality.

    Raises:
        InvalidInputError: If validation fails
    """
    if not isinstance(array, np.ndarray):
        raise InvalidInputError(name, 'numpy.ndarray', type(array).__name__)

    if expected_ndim is not None and array.ndim != expected_ndim:
        raise InvalidInputError(
            f"{name}.ndim", str(expected_ndim), array.ndim
        )

    if min_ndim is not None and array.ndim < min_ndim:
        raise InvalidInputError(
            f"{name}.ndim", f">= {min_ndim}", array.ndim
        )


def validate_same_length(*arrays: np.ndarray,
                         operation: str = 'row alignment') -> None:
    """
    Check that all arrays have the same number of rows.

    Raises:
        DimensionMismatchError: If the leading dimensions differ
    """
    lengths = {len(arr) for arr in arrays}
    if len(lengths) > 1:
        raise DimensionMismatchError(operation, [arr.shape for arr in arrays])


def stack_rows(arrays: Sequence[np.ndarray],
               operation: str = 'stack') -> np.ndarray:
    """
    Concatenate arrays along the first axis, preserving their order.

    Raises:
        InvalidInputError: If ``arrays`` is empty
        DimensionMismatchError: If trailing dimensions differ
    """
    if len(arrays) == 0:
        raise InvalidInputError(operation, 'at least one array', [])

    try:
        return np.concatenate(arrays, axis=0)
    except ValueError as e:
        logger.error(f"{operation}: cannot concatenate {[a.shape for a in arrays]}")
        raise DimensionMismatchError(operation, [a.shape for a in arrays]) from e
