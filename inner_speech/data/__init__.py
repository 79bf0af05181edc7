"""
Data Module
===========

Data extraction for the Inner Speech dataset.

Sub-modules:
-----------
- loaders: Path resolution, single-source extractors, aggregators and
  report/TFR readers

Usage Examples:
    ```python
    from inner_speech.data import extract_data_multisubject

    X, Y = extract_data_multisubject('/data/inner_speech', [1, 2, 3], 'eeg')
    print(X.shape, Y.shape)
    ```
"""

from inner_speech.data.loaders import (
    load_events,
    extract_subject_from_bdf,
    extract_block_data_from_subject,
    extract_data_from_subject_block,
    extract_data_from_subject,
    extract_data_multisubject,
    extract_report,
    extract_tfr,
)

__all__ = [
    'load_events',
    'extract_subject_from_bdf',
    'extract_block_data_from_subject',
    'extract_data_from_subject_block',
    'extract_data_from_subject',
    'extract_data_multisubject',
    'extract_report',
    'extract_tfr',
]
