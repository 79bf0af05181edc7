"""
Preprocessing Module
====================

Trial and time selection over extracted (X, Y) pairs.

Functions:
---------
- filter_by_condition: Keep the trials of one condition
- filter_by_class: Keep the trials of one class
- transform_for_classifier: Group (class, condition) pairs into labels 0..n-1
- select_time_window: Crop the time axis to an interval in seconds

Usage Example:
    ```python
    from inner_speech.preprocessing import filter_by_condition, select_time_window

    X_inner, Y_inner = filter_by_condition(X, Y, 'inner')
    X_inner = select_time_window(X_inner, t_start=1.5, t_end=3.5, fs=256)
    ```
"""

from inner_speech.preprocessing.selection import (
    filter_by_condition,
    filter_by_class,
    transform_for_classifier,
    select_time_window,
)

__all__ = [
    'filter_by_condition',
    'filter_by_class',
    'transform_for_classifier',
    'select_time_window',
]
