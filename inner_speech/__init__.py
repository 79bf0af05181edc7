"""
Inner Speech Toolkit
====================

Loading and reassembly of the Inner Speech EEG dataset (BIDS-like layout):
raw BDF recordings, derived epochs and event matrices, per-block analysis
reports and time-frequency representations.

Features:
---------
- Path resolution for subjects, blocks and derived files
- Single-block extractors backed by MNE readers
- Block and multi-subject stacking with row alignment checks
- Trial selection by condition, class and time window
- PyTorch Dataset over the stacked trials

Quick Start:
-----------
```python
import inner_speech

inner_speech.setup_logging(level='INFO')

X, Y = inner_speech.extract_data_multisubject('/data/inner_speech', [1, 2, 3], 'eeg')
X_inner, Y_inner = inner_speech.filter_by_condition(X, Y, 'inner')
```

Project Structure:
-----------------
inner_speech/
├── core/               # Datatypes, config, exceptions
├── data/               # Paths, extractors, aggregators, report/TFR readers
├── preprocessing/      # Trial and time-window selection
├── datasets/           # PyTorch Dataset
└── utils/              # Logging, naming, validation
"""

# Version
__version__ = '1.0.0'

from inner_speech import core
from inner_speech import utils

from inner_speech.core import (
    Datatype,
    BLOCKS,
    get_config,
    load_config,
    ConfigManager,
    InnerSpeechError,
)

from inner_speech.utils import (
    setup_logging,
    get_logger,
    subject_token,
    normalize_label_pair,
)

from inner_speech.data import (
    load_events,
    extract_subject_from_bdf,
    extract_block_data_from_subject,
    extract_data_from_subject_block,
    extract_data_from_subject,
    extract_data_multisubject,
    extract_report,
    extract_tfr,
)

from inner_speech.preprocessing import (
    filter_by_condition,
    filter_by_class,
    transform_for_classifier,
    select_time_window,
)

__all__ = [
    # Modules
    'core',
    'utils',

    # Core
    'Datatype',
    'BLOCKS',
    'get_config',
    'load_config',
    'ConfigManager',
    'InnerSpeechError',

    # Utilities
    'setup_logging',
    'get_logger',
    'subject_token',
    'normalize_label_pair',

    # Extraction
    'load_events',
    'extract_subject_from_bdf',
    'extract_block_data_from_subject',
    'extract_data_from_subject_block',
    'extract_data_from_subject',
    'extract_data_multisubject',
    'extract_report',
    'extract_tfr',

    # Selection
    'filter_by_condition',
    'filter_by_class',
    'transform_for_classifier',
    'select_time_window',

    '__version__',
]
