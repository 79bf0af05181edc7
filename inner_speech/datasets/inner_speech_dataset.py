"""
PyTorch Inner Speech Dataset
============================

PyTorch Dataset over trials extracted from the Inner Speech dataset,
so that stacked subject data can be fed to a ``torch.utils.data.DataLoader``.

Dataset Classes:
---------------
- InnerSpeechDataset: Trials (n_trials, n_channels, n_samples) + labels

Utility Functions:
-----------------
- train_val_test_split: Split a dataset into train/val(/test)
- create_cv_folds: Cross-validation folds

Usage Example:
    ```python
    from torch.utils.data import DataLoader
    from inner_speech.datasets import InnerSpeechDataset

    # Inner speech, four directions, subjects 1-3
    dataset = InnerSpeechDataset.from_subjects(
        [1, 2, 3],
        root_dir='/data/inner_speech',
    )

    loader = DataLoader(dataset, batch_size=32, shuffle=True)
    for batch_x, batch_y in loader:
        # batch_x: (batch, channels, samples)
        # batch_y: (batch,)
        ...
    ```
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union
import logging
import numpy as np
import torch
from torch.utils.data import Dataset

from inner_speech.core.config import get_config
from inner_speech.core.exceptions import InvalidInputError, MissingConfigError
from inner_speech.core.types import Datatype
from inner_speech.data.loaders import extract_data_multisubject
from inner_speech.data.loaders.paths import PathLike
from inner_speech.preprocessing import select_time_window, transform_for_classifier
from inner_speech.utils.validation import validate_array, validate_same_length


# Configure module logger
logger = logging.getLogger(__name__)

# Four directions of the inner speech condition, one label each
DEFAULT_CLASSES: List[List[str]] = [['up'], ['down'], ['right'], ['left']]
DEFAULT_CONDITIONS: List[List[str]] = [['inner'], ['inner'], ['inner'], ['inner']]


class InnerSpeechDataset(Dataset):
    """
    PyTorch Dataset for Inner Speech trials.

    Attributes:
        _trials (np.ndarray): Trial data (n_trials, n_channels, n_samples)
        _labels (np.ndarray): Labels (n_trials,)
        _transform (Callable): Optional transform applied to each trial
        _label_transform (Callable): Optional transform applied to each label
        _return_numpy (bool): Return numpy arrays instead of tensors

    Example:
        >>> dataset = InnerSpeechDataset(X, y)
        >>> x, label = dataset[0]
        >>> x.shape
        torch.Size([128, 512])
    """

    def __init__(
        self,
        trials: np.ndarray,
        labels: np.ndarray,
        transform: Optional[Callable] = None,
        label_transform: Optional[Callable] = None,
        return_numpy: bool = False
    ):
        """
        Initialize the dataset.

        Args:
            trials: Array of shape (n_trials, n_channels, n_samples)
            labels: Array of shape (n_trials,)
            transform: Optional transform function for trials
            label_transform: Optional transform for labels
            return_numpy: If True, return numpy arrays instead of tensors

        Raises:
            InvalidInputError: If the arrays have the wrong dimensionality
            DimensionMismatchError: If trials and labels differ in length
        """
        trials = np.asarray(trials)
        labels = np.asarray(labels)

        validate_array(trials, expected_ndim=3, name='trials')
        validate_array(labels, expected_ndim=1, name='labels')
        validate_same_length(trials, labels, operation='trials / labels')

        self._trials = trials
        self._labels = labels.astype(np.int64)
        self._transform = transform
        self._label_transform = label_transform
        self._return_numpy = return_numpy

        logger.info(
            f"InnerSpeechDataset created: {self.n_trials} trials, "
            f"{self.n_channels} channels, {self.n_samples} samples, "
            f"{self.n_classes} classes"
        )

    def __len__(self) -> int:
        return len(self._trials)

    def __getitem__(self, idx: int) -> Tuple[Any, Any]:
        """
        Get a single trial and its label.

        Returns:
            Tuple of (trial, label): float32 tensor (n_channels, n_samples)
            and long tensor, or numpy values when ``return_numpy`` is set
        """
        trial = self._trials[idx].astype(np.float32)
        label = self._labels[idx]

        if self._transform is not None:
            trial = self._transform(trial)

        if self._label_transform is not None:
            label = self._label_transform(label)

        if not self._return_numpy:
            trial = torch.from_numpy(trial) if isinstance(trial, np.ndarray) else trial
            label = torch.tensor(label, dtype=torch.long)

        return trial, label

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def n_trials(self) -> int:
        return self._trials.shape[0]

    @property
    def n_channels(self) -> int:
        return self._trials.shape[1]

    @property
    def n_samples(self) -> int:
        return self._trials.shape[2]

    @property
    def n_classes(self) -> int:
        return len(np.unique(self._labels))

    @property
    def shape(self) -> Tuple[int, int, int]:
        """Shape of the data (n_trials, n_channels, n_samples)."""
        return tuple(self._trials.shape)

    @property
    def class_distribution(self) -> Dict[int, int]:
        """Number of trials per label."""
        unique, counts = np.unique(self._labels, return_counts=True)
        return dict(zip(unique.tolist(), counts.tolist()))

    # =========================================================================
    # DATA ACCESS
    # =========================================================================

    def get_data(self) -> Tuple[np.ndarray, np.ndarray]:
        """Copies of the (trials, labels) arrays."""
        return self._trials.copy(), self._labels.copy()

    def get_subset(self, indices: Sequence[int]) -> 'InnerSpeechDataset':
        """New dataset holding the given trial indices."""
        indices = np.asarray(indices, dtype=np.int64)
        return InnerSpeechDataset(
            trials=self._trials[indices],
            labels=self._labels[indices],
            transform=self._transform,
            label_transform=self._label_transform,
            return_numpy=self._return_numpy
        )

    def get_class_subset(self, classes: Sequence[int]) -> 'InnerSpeechDataset':
        """New dataset holding only the given labels."""
        indices = np.where(np.isin(self._labels, classes))[0]
        return self.get_subset(indices)

    # =========================================================================
    # CLASS METHODS
    # =========================================================================

    @classmethod
    def from_subjects(
        cls,
        subjects: Sequence[int],
        root_dir: Optional[PathLike] = None,
        datatype: Union[str, Datatype] = Datatype.EEG,
        classes: Sequence[Sequence[str]] = DEFAULT_CLASSES,
        conditions: Sequence[Sequence[str]] = DEFAULT_CONDITIONS,
        t_start: Optional[float] = None,
        t_end: Optional[float] = None,
        fs: Optional[float] = None,
        **kwargs
    ) -> 'InnerSpeechDataset':
        """
        Build a dataset from the derived epochs of several subjects.

        Trials are stacked with ``extract_data_multisubject``, cropped to the
        time window and grouped with ``transform_for_classifier``.

        Args:
            subjects: Subject numbers
            root_dir: Dataset root (default ``data.root_dir``)
            datatype: 'eeg' or 'exg'
            classes: Class groups, one label per group
            conditions: Condition groups matching ``classes``
            t_start, t_end: Time window in seconds (default from configuration)
            fs: Sampling rate (default ``data.sampling_rate``)
            **kwargs: Passed to ``__init__``

        Raises:
            MissingConfigError: If no root is passed or configured
            InvalidInputError: If the datatype is not trial-locked
        """
        if root_dir is None:
            root_dir = get_config().get('data.root_dir')
            if root_dir is None:
                raise MissingConfigError('data.root_dir')

        datatype = Datatype.parse(datatype)
        if not datatype.is_trial_locked:
            raise InvalidInputError(
                'datatype', 'a trial-locked datatype (eeg | exg)', datatype.value
            )

        X, Y = extract_data_multisubject(root_dir, subjects, datatype)
        X = select_time_window(X, t_start=t_start, t_end=t_end, fs=fs)
        X, y = transform_for_classifier(X, Y, classes, conditions)

        return cls(trials=X, labels=y, **kwargs)

    def __repr__(self) -> str:
        return (
            f"InnerSpeechDataset(trials={self.n_trials}, "
            f"channels={self.n_channels}, "
            f"samples={self.n_samples}, "
            f"classes={self.n_classes})"
        )


# =============================================================================
# DATA SPLITTING UTILITIES
# =============================================================================

def train_val_test_split(
    dataset: InnerSpeechDataset,
    val_ratio: float = 0.2,
    test_ratio: float = 0.0,
    shuffle: bool = True,
    random_seed: int = 42
) -> Tuple[InnerSpeechDataset, ...]:
    """
    Split dataset into train/validation/test sets.

    Returns:
        (train, val) or (train, val, test) when ``test_ratio > 0``

    Example:
        >>> train_ds, val_ds = train_val_test_split(dataset, val_ratio=0.2)
    """
    if not 0 <= val_ratio < 1 or not 0 <= test_ratio < 1 or val_ratio + test_ratio >= 1:
        raise InvalidInputError(
            'val_ratio + test_ratio', 'ratios in [0, 1) summing below 1',
            (val_ratio, test_ratio)
        )

    n_samples = len(dataset)
    indices = np.arange(n_samples)

    if shuffle:
        np.random.default_rng(random_seed).shuffle(indices)

    n_test = int(n_samples * test_ratio)
    n_val = int(n_samples * val_ratio)
    n_train = n_samples - n_val - n_test

    train_ds = dataset.get_subset(indices[:n_train])
    val_ds = dataset.get_subset(indices[n_train:n_train + n_val])

    if test_ratio > 0:
        test_ds = dataset.get_subset(indices[n_train + n_val:])
        return train_ds, val_ds, test_ds

    return train_ds, val_ds


def create_cv_folds(
    dataset: InnerSpeechDataset,
    n_folds: int = 5,
    shuffle: bool = True,
    random_seed: int = 42
) -> List[Tuple[InnerSpeechDataset, InnerSpeechDataset]]:
    """
    Create cross-validation folds.

    The last fold absorbs the remainder when the trial count is not a
    multiple of ``n_folds``.

    Returns:
        List of (train_dataset, val_dataset) tuples
    """
    n_samples = len(dataset)
    if n_folds < 2 or n_folds > n_samples:
        raise InvalidInputError('n_folds', f"2 <= n_folds <= {n_samples}", n_folds)

    indices = np.arange(n_samples)
    if shuffle:
        np.random.default_rng(random_seed).shuffle(indices)

    fold_size = n_samples // n_folds
    folds = []

    for fold in range(n_folds):
        start = fold * fold_size
        end = (fold + 1) * fold_size if fold < n_folds - 1 else n_samples

        val_indices = indices[start:end]
        train_indices = np.concatenate([indices[:start], indices[end:]])

        folds.append((dataset.get_subset(train_indices), dataset.get_subset(val_indices)))

    return folds
