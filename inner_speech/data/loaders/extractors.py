"""
Single-Source Extractors
========================

Functions that read one recording or one derived epoch file of a subject.

The binary formats are parsed by MNE:

- Raw recordings (BDF) with ``mne.io.read_raw_bdf``, fully preloaded
- Derived epochs (FIF) with ``mne.read_epochs``

The verbosity handed to MNE defaults to the ``readers.verbose``
configuration value (``'WARNING'``).

Usage Example:
    ```python
    from inner_speech.data.loaders import (
        extract_subject_from_bdf,
        extract_block_data_from_subject,
    )

    raw, num_s = extract_subject_from_bdf('/data/inner_speech', 3, 1)

    X, Y = extract_block_data_from_subject('/data/inner_speech', 3, 'EEG', 1)
    print(X.shape)  # (n_trials, n_channels, n_samples)
    print(Y.shape)  # (n_trials, 4)
    ```
"""

from pathlib import Path
from typing import Optional, Tuple, Union
import logging
import numpy as np
import mne

from inner_speech.core.config import get_config
from inner_speech.core.exceptions import (
    DataLoadError,
    DataNotFoundError,
    DeserializationError,
    DimensionMismatchError,
)
from inner_speech.core.types import Datatype
from inner_speech.data.loaders.events import load_events
from inner_speech.data.loaders.paths import PathLike, raw_bdf_path, epochs_path
from inner_speech.utils.naming import subject_token


# Configure module logger
logger = logging.getLogger(__name__)


def _reader_verbosity(verbose: Optional[Union[str, bool]]) -> Union[str, bool]:
    if verbose is None:
        return get_config().get('readers.verbose', 'WARNING')
    return verbose


def _require_file(file_path: Path, kind: str) -> None:
    if not file_path.is_file():
        raise DataNotFoundError(str(file_path), kind)


# =============================================================================
# RAW RECORDINGS
# =============================================================================

def extract_subject_from_bdf(
    root_dir: PathLike,
    n_s: int,
    n_b: int,
    verbose: Optional[Union[str, bool]] = None
) -> Tuple[mne.io.BaseRaw, str]:
    """
    Load the raw BDF recording of a subject and block.

    The whole file is read into memory.

    Args:
        root_dir: Dataset root
        n_s: Subject number
        n_b: Block index (1, 2 or 3)
        verbose: MNE verbosity (default from configuration)

    Returns:
        Tuple of (raw recording, subject token)

    Raises:
        InvalidInputError: If the subject or block is invalid
        DataNotFoundError: If the BDF file does not exist
        DataLoadError: If MNE cannot read the file
    """
    file_path = raw_bdf_path(root_dir, n_s, n_b)
    num_s = subject_token(n_s)
    logger.debug(f"Reading raw recording {file_path}")

    _require_file(file_path, 'raw recording')

    preload = get_config().get_bool('readers.preload', True)
    try:
        raw_data = mne.io.read_raw_bdf(
            str(file_path),
            preload=preload,
            verbose=_reader_verbosity(verbose)
        )
    except (OSError, ValueError, RuntimeError) as e:
        logger.error(f"MNE could not read {file_path}: {e}")
        raise DataLoadError(str(file_path), 'BDF reader failed', e) from e

    logger.info(
        f"Loaded raw {num_s} block {n_b}: "
        f"{len(raw_data.ch_names)} channels, {raw_data.n_times} samples"
    )
    return raw_data, num_s


# =============================================================================
# DERIVED EPOCHS
# =============================================================================

def read_epochs_data(
    file_path: PathLike,
    verbose: Optional[Union[str, bool]] = None
) -> np.ndarray:
    """
    Read a derived epoch file and return its data array.

    Returns:
        np.ndarray: Array of shape (n_epochs, n_channels, n_samples)

    Raises:
        DataNotFoundError: If the file does not exist
        DeserializationError: If the content is not a FIF epoch file
        DataLoadError: If MNE cannot read the file
    """
    file_path = Path(file_path)
    _require_file(file_path, 'epoch file')

    try:
        epochs = mne.read_epochs(str(file_path), verbose=_reader_verbosity(verbose))
    except ValueError as e:
        logger.error(f"Malformed epoch file {file_path}: {e}")
        raise DeserializationError(str(file_path), 'not a FIF epoch file', e) from e
    except (OSError, RuntimeError) as e:
        logger.error(f"MNE could not read {file_path}: {e}")
        raise DataLoadError(str(file_path), 'epoch reader failed', e) from e

    return epochs.get_data()


def extract_block_data_from_subject(
    root_dir: PathLike,
    n_s: int,
    datatype: Union[str, Datatype],
    n_b: int,
    verbose: Optional[Union[str, bool]] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Load the derived epochs and events of one subject and block.

    The datatype is parsed before any file is touched.

    Args:
        root_dir: Dataset root
        n_s: Subject number
        datatype: 'eeg', 'exg' or 'baseline' (any letter case)
        n_b: Block index (1, 2 or 3)
        verbose: MNE verbosity (default from configuration)

    Returns:
        Tuple of (X, Y):
            - X: Epoch data (n_epochs, n_channels, n_samples)
            - Y: Event matrix (n_trials, 4)

    Raises:
        InvalidDatatypeError: If the datatype is not recognized
        InvalidInputError: If the subject or block is invalid
        DataNotFoundError: If the epoch or event file does not exist
        DataLoadError / DeserializationError: If a file cannot be decoded
        DimensionMismatchError: If trial-locked epochs and events disagree
            on the number of trials
    """
    datatype = Datatype.parse(datatype)
    file_path = epochs_path(root_dir, n_s, n_b, datatype)
    logger.debug(f"Reading {datatype} epochs from {file_path}")

    events = load_events(root_dir, n_s, n_b)
    data = read_epochs_data(file_path, verbose)

    if datatype.is_trial_locked and data.shape[0] != events.shape[0]:
        raise DimensionMismatchError(
            f"{subject_token(n_s)} block {n_b} {datatype} epochs vs events",
            [data.shape, events.shape]
        )

    logger.info(
        f"Loaded {datatype} {subject_token(n_s)} block {n_b}: "
        f"X{data.shape}, Y{events.shape}"
    )
    return data, events


# Name used by callers that address data as (subject, block)
extract_data_from_subject_block = extract_block_data_from_subject
