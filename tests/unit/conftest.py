"""
Shared fixtures for the unit tests.

The dataset fixtures write a miniature Inner Speech tree under ``tmp_path``:
event matrices are real NumPy files, and the ``-epo.fif`` files hold NumPy
arrays that the ``fake_read_epochs`` fixture hands back through a stand-in
for ``mne.read_epochs``.
"""

from pathlib import Path

import mne
import numpy as np
import pytest

from inner_speech.core.config import ConfigManager
from inner_speech.data.loaders.paths import epochs_path, events_path


N_CHANNELS = 2
N_SAMPLES = 8

# Trials per block for the subjects of the ``dataset_root`` fixture
TRIALS = {
    1: (4, 5, 6),
    2: (3, 3, 3),
}


def write_npy(path: Path, array) -> None:
    """Write an array in NumPy format without the .npy suffix."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'wb') as f:
        np.save(f, array)


def trial_ids(n_s: int, n_b: int, n_trials: int) -> np.ndarray:
    """Values encoding subject, block and trial: 1000*s + 100*b + i."""
    return 1000 * n_s + 100 * n_b + np.arange(n_trials)


def make_events(n_s: int, n_b: int, n_trials: int) -> np.ndarray:
    """Event rows ``[sample, class, condition, session]``."""
    ids = trial_ids(n_s, n_b, n_trials)
    idx = np.arange(n_trials)
    return np.column_stack([ids, idx % 4, (idx // 4) % 3, np.full(n_trials, n_b)])


def make_epochs(n_s: int, n_b: int, n_trials: int,
                n_channels: int = N_CHANNELS,
                n_samples: int = N_SAMPLES) -> np.ndarray:
    """Epoch data whose every value of trial i equals its trial id."""
    ids = trial_ids(n_s, n_b, n_trials).astype(float)
    return np.broadcast_to(
        ids[:, None, None], (n_trials, n_channels, n_samples)
    ).copy()


def build_block(root: Path, n_s: int, n_b: int, n_trials: int,
                n_channels: int = N_CHANNELS,
                n_samples: int = N_SAMPLES) -> None:
    """Write events plus eeg, exg and baseline epochs for one block."""
    write_npy(events_path(root, n_s, n_b), make_events(n_s, n_b, n_trials))
    for datatype in ('eeg', 'exg'):
        write_npy(
            epochs_path(root, n_s, n_b, datatype),
            make_epochs(n_s, n_b, n_trials, n_channels, n_samples)
        )
    write_npy(
        epochs_path(root, n_s, n_b, 'baseline'),
        make_epochs(n_s, n_b, 1, n_channels, n_samples)
    )


class FakeEpochs:
    """Minimal object exposing ``get_data`` like ``mne.Epochs``."""

    def __init__(self, data: np.ndarray):
        self._data = data

    def get_data(self) -> np.ndarray:
        return self._data


@pytest.fixture(autouse=True)
def reset_config():
    """Give every test a fresh configuration singleton."""
    ConfigManager.reset()
    yield
    ConfigManager.reset()


@pytest.fixture
def fake_read_epochs(monkeypatch):
    """Replace ``mne.read_epochs`` with a NumPy reader; returns the call log."""
    calls = []

    def _read_epochs(fname, verbose=None):
        calls.append((fname, verbose))
        with open(fname, 'rb') as f:
            return FakeEpochs(np.load(f))

    monkeypatch.setattr(mne, 'read_epochs', _read_epochs)
    return calls


@pytest.fixture
def dataset_root(tmp_path, fake_read_epochs) -> Path:
    """Dataset tree with subjects 1 and 2, blocks 1-3 (see ``TRIALS``)."""
    for n_s, per_block in TRIALS.items():
        for n_b, n_trials in zip((1, 2, 3), per_block):
            build_block(tmp_path, n_s, n_b, n_trials)
    return tmp_path
