"""
Event Loader
============

Reads the per-block event matrix stored next to the derived epochs.

Each row describes one trial as ``[sample, class, condition, session]``
and lines up with the same row of the block's EEG / EXG epochs.
"""

from pathlib import Path
import logging
import pickle
import numpy as np

from inner_speech.core.exceptions import (
    DataLoadError,
    DataNotFoundError,
    DeserializationError,
)
from inner_speech.data.loaders.paths import PathLike, events_path


# Configure module logger
logger = logging.getLogger(__name__)


def read_event_file(file_path: PathLike) -> np.ndarray:
    """
    Read an event matrix file.

    Args:
        file_path: Path to a ``*_events.dat`` file (NumPy format)

    Returns:
        np.ndarray: Integer matrix of shape (n_trials, n_columns)

    Raises:
        DataNotFoundError: If the file does not exist
        DeserializationError: If the content is not a 2-D array
        DataLoadError: If the file cannot be read
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise DataNotFoundError(str(file_path), 'event file')

    try:
        with open(file_path, 'rb') as f:
            events = np.load(f, allow_pickle=True)
    except (ValueError, EOFError, pickle.UnpicklingError) as e:
        raise DeserializationError(
            str(file_path), 'not a NumPy array file', e
        ) from e
    except OSError as e:
        raise DataLoadError(str(file_path), 'read failed', e) from e

    if not isinstance(events, np.ndarray) or events.ndim != 2:
        shape = getattr(events, 'shape', None)
        raise DeserializationError(
            str(file_path), f"expected a 2-D event matrix, got shape {shape}"
        )

    return events


def load_events(root_dir: PathLike, n_s: int, n_b: int) -> np.ndarray:
    """
    Load the event matrix of a subject and block.

    Args:
        root_dir: Dataset root
        n_s: Subject number
        n_b: Block index (1, 2 or 3)

    Returns:
        np.ndarray: Event matrix, one row per trial

    Example:
        >>> events = load_events('/data/inner_speech', 1, 1)
        >>> events.shape
        (200, 4)
    """
    file_path = events_path(root_dir, n_s, n_b)
    logger.debug(f"Loading events from {file_path}")

    events = read_event_file(file_path)
    logger.debug(f"Loaded {events.shape[0]} events for subject {n_s}, block {n_b}")

    return events
