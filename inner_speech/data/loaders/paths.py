"""
Dataset Paths
=============

Path resolution for the BIDS-like layout of the Inner Speech dataset.

Directory Layout:
----------------
```
{root}/
├── sub-01/
│   └── ses-01/eeg/sub-01_ses-01_task-innerspeech_eeg.bdf     # raw recording
└── derivatives/
    └── sub-01/
        └── ses-01/
            ├── sub-01_ses-01_eeg-epo.fif                      # EEG epochs
            ├── sub-01_ses-01_exg-epo.fif                      # EXG epochs
            ├── sub-01_ses-01_baseline-epo.fif                 # baseline
            ├── sub-01_ses-01_events.dat                       # event matrix
            └── sub-01_ses-01_report.pkl                       # analysis report

{tfr_dir}{method}_{condition}_{class}-tfr.h5                   # TFRs
```

Resolving a path never touches the file system.
"""

from pathlib import Path
from typing import Optional, Union

from inner_speech.core.types import Datatype
from inner_speech.utils.naming import subject_token, normalize_label_pair
from inner_speech.utils.validation import check_subject, check_block


PathLike = Union[str, Path]

TASK_NAME = 'innerspeech'
DERIVATIVES_DIR = 'derivatives'


def session_token(n_b: int) -> str:
    """BIDS session identifier of a block, e.g. ``ses-01``."""
    return f"ses-0{n_b}"


def _derivative_stem(root_dir: PathLike, n_s: int, n_b: int) -> Path:
    check_subject(n_s)
    check_block(n_b)
    num_s = subject_token(n_s)
    ses = session_token(n_b)
    return Path(root_dir) / DERIVATIVES_DIR / num_s / ses / f"{num_s}_{ses}"


def raw_bdf_path(root_dir: PathLike, n_s: int, n_b: int) -> Path:
    """
    Path of the raw BDF recording of a subject and block.

    Example:
        >>> str(raw_bdf_path('/data', 3, 1))
        '/data/sub-03/ses-01/eeg/sub-03_ses-01_task-innerspeech_eeg.bdf'
    """
    check_subject(n_s)
    check_block(n_b)
    num_s = subject_token(n_s)
    ses = session_token(n_b)
    return (Path(root_dir) / num_s / ses / 'eeg'
            / f"{num_s}_{ses}_task-{TASK_NAME}_eeg.bdf")


def epochs_path(root_dir: PathLike,
                n_s: int,
                n_b: int,
                datatype: Union[str, Datatype]) -> Path:
    """Path of the derived epoch file of one datatype."""
    datatype = Datatype.parse(datatype)
    stem = _derivative_stem(root_dir, n_s, n_b)
    return stem.with_name(f"{stem.name}_{datatype.suffix}")


def events_path(root_dir: PathLike, n_s: int, n_b: int) -> Path:
    """Path of the event matrix of a subject and block."""
    stem = _derivative_stem(root_dir, n_s, n_b)
    return stem.with_name(f"{stem.name}_events.dat")


def report_path(root_dir: PathLike, n_s: int, n_b: int) -> Path:
    """Path of the pickled analysis report of a subject and block."""
    stem = _derivative_stem(root_dir, n_s, n_b)
    return stem.with_name(f"{stem.name}_report.pkl")


def tfr_path(tfr_dir: PathLike,
             condition: str,
             class_label: str,
             tfr_method: str,
             tfr_type: Optional[str] = None) -> str:
    """
    Path of a time-frequency representation file.

    ``tfr_dir`` is used as a plain prefix, so it normally ends with a
    separator. Condition and class are normalized first.

    ``tfr_type`` is an optional extra token placed after the class, for
    variants stored side by side (e.g. ``avg``). The TFRs of the dataset
    carry no such token, so the default None resolves them.

    Example:
        >>> tfr_path('/tfr/', 'vis', 'up', 'morlet')
        '/tfr/morlet_Visualized_Arriba-tfr.h5'
    """
    condition, class_label = normalize_label_pair(condition, class_label)
    name = f"{tfr_method}_{condition}_{class_label}"
    if tfr_type:
        name += f"_{tfr_type}"
    return f"{tfr_dir}{name}-tfr.h5"
