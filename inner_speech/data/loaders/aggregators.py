"""
Multi-Block and Multi-Subject Aggregators
=========================================

Stack the per-block extractions of one subject, or of a list of subjects,
into a single (X, Y) pair.

Stacking Rules:
--------------
- Blocks are visited in the order of ``BLOCKS`` (1, 2, 3)
- Subjects are visited in the order they are given
- X and Y are concatenated along their first axis, so row ``i`` of Y still
  describes row ``i`` of X for trial-locked datatypes
- Any failing block or subject aborts the whole call; no partial results

Usage Example:
    ```python
    from inner_speech.data.loaders import (
        extract_data_from_subject,
        extract_data_multisubject,
    )

    X, Y = extract_data_from_subject('/data/inner_speech', 1, 'eeg')

    X_all, Y_all = extract_data_multisubject('/data/inner_speech', [1, 2, 3], 'eeg')
    X_sig, _ = extract_data_multisubject(root, [1, 2], 'exg', with_events=False)
    ```
"""

from typing import List, Optional, Sequence, Tuple, Union
import logging
import numpy as np

from inner_speech.core.exceptions import InvalidInputError
from inner_speech.core.types import BLOCKS, Datatype
from inner_speech.data.loaders.extractors import (
    extract_block_data_from_subject,
    read_epochs_data,
)
from inner_speech.data.loaders.paths import PathLike, epochs_path
from inner_speech.utils.logging import log_execution_time, ProgressLogger
from inner_speech.utils.naming import subject_token
from inner_speech.utils.validation import check_subject, stack_rows


# Configure module logger
logger = logging.getLogger(__name__)


@log_execution_time()
def extract_data_from_subject(
    root_dir: PathLike,
    n_s: int,
    datatype: Union[str, Datatype] = Datatype.EEG,
    verbose: Optional[str] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Load and stack all blocks of one subject.

    Args:
        root_dir: Dataset root
        n_s: Subject number
        datatype: 'eeg', 'exg' or 'baseline' (any letter case)
        verbose: MNE verbosity (default from configuration)

    Returns:
        Tuple of (X, Y) stacked over blocks 1, 2 and 3

    Raises:
        InvalidDatatypeError: If the datatype is not recognized
        DataNotFoundError, DataLoadError, DeserializationError: From the
            first block that fails
        DimensionMismatchError: If the blocks cannot be stacked
    """
    datatype = Datatype.parse(datatype)
    check_subject(n_s)

    data: List[np.ndarray] = []
    y: List[np.ndarray] = []

    for n_b in BLOCKS:
        data_tmp, events = extract_block_data_from_subject(
            root_dir, n_s, datatype, n_b, verbose=verbose
        )
        data.append(data_tmp)
        y.append(events)

    num_s = subject_token(n_s)
    X = stack_rows(data, operation=f"{num_s} {datatype} blocks")
    Y = stack_rows(y, operation=f"{num_s} event blocks")

    logger.info(f"Subject {num_s} ({datatype}): X{X.shape}, Y{Y.shape}")
    return X, Y


def _extract_signals_from_subject(
    root_dir: PathLike,
    n_s: int,
    datatype: Datatype,
    verbose: Optional[str]
) -> np.ndarray:
    num_s = subject_token(n_s)
    blocks = [
        read_epochs_data(epochs_path(root_dir, n_s, n_b, datatype), verbose)
        for n_b in BLOCKS
    ]
    X = stack_rows(blocks, operation=f"{num_s} {datatype} blocks")

    logger.info(f"Subject {num_s} ({datatype}): X{X.shape}")
    return X


@log_execution_time(level=logging.INFO)
def extract_data_multisubject(
    root_dir: PathLike,
    n_s_list: Sequence[int],
    datatype: Union[str, Datatype] = Datatype.EEG,
    with_events: bool = True,
    verbose: Optional[str] = None
) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """
    Load and stack all blocks of several subjects.

    Args:
        root_dir: Dataset root
        n_s_list: Subject numbers, stacked in this order
        datatype: 'eeg', 'exg' or 'baseline' (any letter case)
        with_events: If False, event files are not read and Y is None
        verbose: MNE verbosity (default from configuration)

    Returns:
        Tuple of (X, Y); Y is None when ``with_events`` is False

    Raises:
        InvalidInputError: If the subject list is empty or holds an
            invalid subject number
        InvalidDatatypeError: If the datatype is not recognized
        DataNotFoundError, DataLoadError, DeserializationError: From the
            first subject and block that fail
        DimensionMismatchError: If subjects cannot be stacked
    """
    datatype = Datatype.parse(datatype)
    n_s_list = list(n_s_list)
    if not n_s_list:
        raise InvalidInputError('n_s_list', 'at least one subject', n_s_list)
    for n_s in n_s_list:
        check_subject(n_s, name='n_s_list')

    tmp_list_x: List[np.ndarray] = []
    tmp_list_y: List[np.ndarray] = []

    progress = ProgressLogger(
        total=len(n_s_list), desc=f"Extracting {datatype}", logger=logger
    )
    for n_s in n_s_list:
        if with_events:
            X, Y = extract_data_from_subject(root_dir, n_s, datatype, verbose=verbose)
            tmp_list_y.append(Y)
        else:
            X = _extract_signals_from_subject(root_dir, n_s, datatype, verbose)
        tmp_list_x.append(X)
        progress.update()
    progress.finish()

    X = stack_rows(tmp_list_x, operation=f"{datatype} subjects")
    Y = stack_rows(tmp_list_y, operation="event subjects") if with_events else None

    logger.info(
        f"Stacked {len(n_s_list)} subjects ({datatype}): X{X.shape}"
        + (f", Y{Y.shape}" if Y is not None else "")
    )
    return X, Y
