"""
Report and TFR Deserializers
============================

Readers for analysis artifacts produced after preprocessing:

- Reports: pickled ``mne.Report`` objects, one per subject and block
- TFRs: time-frequency representations saved by MNE as ``-tfr.h5``,
  one per (method, condition, class)

Both objects are returned as they were stored; nothing here modifies them.
"""

from pathlib import Path
from typing import Any, Optional
import logging
import pickle

import h5py
import mne

from inner_speech.core.config import get_config
from inner_speech.core.exceptions import (
    DataLoadError,
    DataNotFoundError,
    DeserializationError,
    MissingConfigError,
)
from inner_speech.data.loaders.paths import PathLike, report_path, tfr_path


# Configure module logger
logger = logging.getLogger(__name__)


def read_pickle(file_path: PathLike) -> Any:
    """
    Deserialize a pickled object from disk.

    Raises:
        DataNotFoundError: If the file does not exist
        DeserializationError: If the content is not a valid pickle
        DataLoadError: If the file cannot be read
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise DataNotFoundError(str(file_path), 'pickle file')

    try:
        with open(file_path, 'rb') as f:
            return pickle.load(f)
    except (pickle.UnpicklingError, EOFError, ValueError, AttributeError,
            ImportError, IndexError, TypeError) as e:
        raise DeserializationError(str(file_path), 'invalid pickle stream', e) from e
    except OSError as e:
        raise DataLoadError(str(file_path), 'read failed', e) from e


def extract_report(root_dir: PathLike, n_s: int, n_b: int) -> Any:
    """
    Load the analysis report of a subject and block.

    Args:
        root_dir: Dataset root
        n_s: Subject number
        n_b: Block index (1, 2 or 3)

    Returns:
        The deserialized report (normally an ``mne.Report``)
    """
    file_path = report_path(root_dir, n_s, n_b)
    logger.debug(f"Reading report {file_path}")

    report = read_pickle(file_path)
    logger.info(f"Loaded report {file_path.name} ({type(report).__name__})")
    return report


def extract_tfr(
    tfr_dir: Optional[PathLike],
    condition: str,
    class_label: str,
    tfr_method: str,
    tfr_type: Optional[str] = None,
    verbose: Optional[str] = None
) -> Any:
    """
    Load a time-frequency representation.

    Args:
        tfr_dir: Directory prefix of the TFR files (default ``data.tfr_dir``)
        condition: Condition name or alias ('inner', 'vis', 'Pronounced', ...)
        class_label: Class name or alias ('up', 'Arriba', 'all', ...)
        tfr_method: Method token of the file name (e.g. 'morlet')
        tfr_type: Optional type token appended after the class. Files written
            without one (the usual case) are resolved with the default None
        verbose: MNE verbosity (default from configuration)

    Returns:
        The first TFR object stored in the file

    Raises:
        MissingConfigError: If no directory is passed or configured
        DataNotFoundError: If the file does not exist
        DeserializationError: If the file is not an HDF5 TFR container
        DataLoadError: If the file cannot be read

    Example:
        >>> tfr = extract_tfr('/data/tfr/', 'inner', 'up', 'morlet')
    """
    config = get_config()
    if tfr_dir is None:
        tfr_dir = config.get('data.tfr_dir')
        if tfr_dir is None:
            raise MissingConfigError('data.tfr_dir')

    file_path = Path(tfr_path(tfr_dir, condition, class_label, tfr_method, tfr_type))
    logger.debug(f"Reading TFR {file_path}")

    if not file_path.is_file():
        raise DataNotFoundError(str(file_path), 'TFR file')

    if verbose is None:
        verbose = config.get('readers.verbose', 'WARNING')

    if not h5py.is_hdf5(str(file_path)):
        raise DeserializationError(str(file_path), 'not an HDF5 file')

    try:
        tfr = mne.time_frequency.read_tfrs(str(file_path), verbose=verbose)
    except (KeyError, ValueError, TypeError) as e:
        raise DeserializationError(str(file_path), 'not a TFR container', e) from e
    except OSError as e:
        raise DataLoadError(str(file_path), 'TFR reader failed', e) from e

    if isinstance(tfr, list):
        if not tfr:
            raise DeserializationError(str(file_path), 'file holds no TFR')
        tfr = tfr[0]

    logger.info(f"Loaded TFR {file_path.name}")
    return tfr
