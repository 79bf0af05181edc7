"""
Data Loaders Module
===================

Readers for the Inner Speech dataset directory tree.

Layers:
------
- paths: Path resolution (no I/O)
- events: Event matrix of one subject and block
- extractors: Raw BDF recording, or derived epochs plus events, of one block
- aggregators: All blocks of a subject, or all blocks of several subjects
- reports: Pickled analysis reports and ``-tfr.h5`` TFR files

Usage:
    ```python
    from inner_speech.data.loaders import (
        extract_data_from_subject,
        extract_data_multisubject,
        extract_tfr,
    )

    X, Y = extract_data_from_subject('/data/inner_speech', 1, 'eeg')
    tfr = extract_tfr('/data/tfr/', 'inner', 'up', 'morlet')
    ```
"""

from inner_speech.data.loaders.paths import (
    session_token,
    raw_bdf_path,
    epochs_path,
    events_path,
    report_path,
    tfr_path,
)

from inner_speech.data.loaders.events import (
    read_event_file,
    load_events,
)

from inner_speech.data.loaders.extractors import (
    extract_subject_from_bdf,
    read_epochs_data,
    extract_block_data_from_subject,
    extract_data_from_subject_block,
)

from inner_speech.data.loaders.aggregators import (
    extract_data_from_subject,
    extract_data_multisubject,
)

from inner_speech.data.loaders.reports import (
    read_pickle,
    extract_report,
    extract_tfr,
)

__all__ = [
    # Paths
    'session_token',
    'raw_bdf_path',
    'epochs_path',
    'events_path',
    'report_path',
    'tfr_path',

    # Events
    'read_event_file',
    'load_events',

    # Single source
    'extract_subject_from_bdf',
    'read_epochs_data',
    'extract_block_data_from_subject',
    'extract_data_from_subject_block',

    # Aggregation
    'extract_data_from_subject',
    'extract_data_multisubject',

    # Reports / TFR
    'read_pickle',
    'extract_report',
    'extract_tfr',
]
