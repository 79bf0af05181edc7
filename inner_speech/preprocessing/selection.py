"""
Trial Selection
===============

NumPy helpers that select trials and time samples from extracted data.

All functions take the (X, Y) pair returned by the extractors:

- X: Epoch data, shape (n_trials, n_channels, n_samples)
- Y: Event matrix, shape (n_trials, 4) with columns
  ``[sample, class, condition, session]``

Condition and class names accept every alias known to
``normalize_label_pair`` ('inner', 'vis', 'up', 'Arriba', ...), plus 'all'.

Usage Example:
    ```python
    from inner_speech.preprocessing import (
        filter_by_condition, filter_by_class,
        select_time_window, transform_for_classifier,
    )

    X_in, Y_in = filter_by_condition(X, Y, 'inner')
    X_up, Y_up = filter_by_class(X_in, Y_in, 'up')

    X_win = select_time_window(X, t_start=1.5, t_end=3.5, fs=256)

    # Two groups: inner 'up' vs inner 'down'
    X_c, y_c = transform_for_classifier(
        X, Y,
        classes=[['up'], ['down']],
        conditions=[['inner'], ['inner']],
    )
    ```
"""

from typing import List, Optional, Sequence, Tuple
import logging
import numpy as np

from inner_speech.core.config import get_config
from inner_speech.core.exceptions import InvalidInputError
from inner_speech.core.types import (
    ALL_LABEL,
    CLASS_CODES,
    CONDITION_CODES,
    EVENT_CLASS,
    EVENT_CONDITION,
)
from inner_speech.utils.naming import normalize_condition, normalize_class_label
from inner_speech.utils.validation import (
    check_positive,
    stack_rows,
    validate_array,
    validate_same_length,
)

logger = logging.getLogger(__name__)


def _check_pair(X: np.ndarray, Y: np.ndarray) -> None:
    validate_array(X, min_ndim=1, name='X')
    validate_array(Y, expected_ndim=2, name='Y')
    validate_same_length(X, Y, operation='X / Y rows')


def _filter_by_column(X: np.ndarray,
                      Y: np.ndarray,
                      column: int,
                      code: int) -> Tuple[np.ndarray, np.ndarray]:
    mask = Y[:, column] == code
    return X[mask], Y[mask]


# =============================================================================
# LABEL FILTERS
# =============================================================================

def filter_by_condition(X: np.ndarray,
                        Y: np.ndarray,
                        condition: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Keep the trials of one condition.

    Args:
        X: Epoch data
        Y: Event matrix
        condition: Condition name or alias; 'all' keeps every trial

    Returns:
        Tuple of (X, Y) restricted to the condition

    Raises:
        InvalidInputError: If the condition is empty or unknown
        DimensionMismatchError: If X and Y are not row aligned
    """
    if not condition:
        raise InvalidInputError('condition', 'a condition name', condition)
    _check_pair(X, Y)

    name = normalize_condition(condition)
    if name == ALL_LABEL:
        return X, Y
    if name not in CONDITION_CODES:
        raise InvalidInputError(
            'condition', ' | '.join(list(CONDITION_CODES) + [ALL_LABEL]), condition
        )

    X_r, Y_r = _filter_by_column(X, Y, EVENT_CONDITION, CONDITION_CODES[name])
    logger.debug(f"Condition {name}: kept {len(Y_r)}/{len(Y)} trials")
    return X_r, Y_r


def filter_by_class(X: np.ndarray,
                    Y: np.ndarray,
                    class_label: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Keep the trials of one class.

    Args:
        X: Epoch data
        Y: Event matrix
        class_label: Class name or alias; 'all' keeps every trial

    Returns:
        Tuple of (X, Y) restricted to the class

    Raises:
        InvalidInputError: If the class is empty or unknown
        DimensionMismatchError: If X and Y are not row aligned
    """
    if not class_label:
        raise InvalidInputError('class_label', 'a class name', class_label)
    _check_pair(X, Y)

    name = normalize_class_label(class_label)
    if name == ALL_LABEL:
        return X, Y
    if name not in CLASS_CODES:
        raise InvalidInputError(
            'class_label', ' | '.join(list(CLASS_CODES) + [ALL_LABEL]), class_label
        )

    X_r, Y_r = _filter_by_column(X, Y, EVENT_CLASS, CLASS_CODES[name])
    logger.debug(f"Class {name}: kept {len(Y_r)}/{len(Y)} trials")
    return X_r, Y_r


def transform_for_classifier(
    X: np.ndarray,
    Y: np.ndarray,
    classes: Sequence[Sequence[str]],
    conditions: Sequence[Sequence[str]]
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Group trials into numbered classes for a classifier.

    Group ``i`` collects the trials matching any of the pairs
    ``(classes[i][j], conditions[i][j])`` and is labelled ``i``.

    Example:
        >>> X_c, y_c = transform_for_classifier(
        ...     X, Y,
        ...     classes=[['up', 'down'], ['left', 'right']],
        ...     conditions=[['inner', 'inner'], ['inner', 'inner']])

    Returns:
        Tuple of (X, labels) with labels of shape (n_trials,)

    Raises:
        InvalidInputError: If the groups are empty or of mismatched length
    """
    _check_pair(X, Y)

    n_groups = len(classes)
    if n_groups == 0:
        raise InvalidInputError('classes', 'at least one group', classes)
    if n_groups != len(conditions):
        raise InvalidInputError(
            'conditions', f"{n_groups} groups (one per class group)", conditions
        )

    x_groups: List[np.ndarray] = []
    y_groups: List[np.ndarray] = []

    for n_group, (group_classes, group_conditions) in enumerate(zip(classes, conditions)):
        if len(group_classes) != len(group_conditions):
            raise InvalidInputError(
                f"conditions[{n_group}]",
                f"{len(group_classes)} entries",
                group_conditions
            )
        for class_label, condition in zip(group_classes, group_conditions):
            X_aux, Y_aux = filter_by_condition(X, Y, condition)
            X_aux, _ = filter_by_class(X_aux, Y_aux, class_label)
            x_groups.append(X_aux)
            y_groups.append(np.full(len(X_aux), n_group, dtype=np.int64))

    X_r = stack_rows(x_groups, operation='classifier groups')
    y_r = np.concatenate(y_groups)

    logger.info(f"Grouped {len(y_r)} trials into {n_groups} classes")
    return X_r, y_r


# =============================================================================
# TIME WINDOW
# =============================================================================

def select_time_window(X: np.ndarray,
                       t_start: Optional[float] = None,
                       t_end: Optional[float] = None,
                       fs: Optional[float] = None) -> np.ndarray:
    """
    Crop the time axis (last axis) of the epochs.

    Args:
        X: Epoch data (..., n_samples)
        t_start: Window start in seconds (default ``time_window.t_start``)
        t_end: Window end in seconds (default ``time_window.t_end``)
        fs: Sampling rate in Hz (default ``data.sampling_rate``)

    Returns:
        np.ndarray: Samples ``[round(t_start*fs), round(t_end*fs))``, clamped
        to the available samples

    Raises:
        InvalidInputError: If ``t_start >= t_end`` or ``fs`` is not positive
    """
    config = get_config()
    if t_start is None:
        t_start = config.get_float('time_window.t_start', 1.5)
    if t_end is None:
        t_end = config.get_float('time_window.t_end', 3.5)
    if fs is None:
        fs = config.get_float('data.sampling_rate', 256)

    validate_array(X, min_ndim=1, name='X')
    check_positive(fs, name='fs')
    if t_start >= t_end:
        raise InvalidInputError('t_end', f"> t_start ({t_start})", t_end)

    t_max = X.shape[-1]
    start = max(int(round(t_start * fs)), 0)
    end = min(int(round(t_end * fs)), t_max)

    return X[..., start:end]
