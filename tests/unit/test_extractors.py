"""
Unit Tests for Single-Source Extractors
=======================================

Test Coverage:
- Event loading and its error paths
- Raw BDF extraction (reader arguments, missing file, reader failure)
- Block extraction for every datatype, letter case and error path
- A real FIF round trip through mne.read_epochs, and a malformed FIF file
"""

from unittest.mock import Mock

import mne
import numpy as np
import pytest

from inner_speech.core.config import get_config
from inner_speech.core.exceptions import (
    DataLoadError,
    DataNotFoundError,
    DeserializationError,
    DimensionMismatchError,
    InvalidDatatypeError,
)
from inner_speech.data.loaders import extractors
from inner_speech.data.loaders import (
    epochs_path,
    events_path,
    extract_block_data_from_subject,
    extract_data_from_subject_block,
    extract_subject_from_bdf,
    load_events,
    raw_bdf_path,
    read_epochs_data,
)

from conftest import make_epochs, make_events, write_npy


class TestLoadEvents:
    """Test cases for the event loader."""

    def test_load_events(self, dataset_root):
        events = load_events(dataset_root, 1, 2)

        np.testing.assert_array_equal(events, make_events(1, 2, 5))

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataNotFoundError) as exc_info:
            load_events(tmp_path, 1, 1)

        assert exc_info.value.file_path == str(events_path(tmp_path, 1, 1))

    def test_malformed_file(self, tmp_path):
        path = events_path(tmp_path, 1, 1)
        path.parent.mkdir(parents=True)
        path.write_bytes(b'not an array at all')

        with pytest.raises(DeserializationError):
            load_events(tmp_path, 1, 1)

    def test_empty_file(self, tmp_path):
        path = events_path(tmp_path, 1, 1)
        path.parent.mkdir(parents=True)
        path.write_bytes(b'')

        with pytest.raises(DeserializationError):
            load_events(tmp_path, 1, 1)

    def test_not_a_matrix(self, tmp_path):
        write_npy(events_path(tmp_path, 1, 1), np.arange(5))

        with pytest.raises(DeserializationError) as exc_info:
            load_events(tmp_path, 1, 1)

        assert "2-D" in str(exc_info.value)


class TestExtractSubjectFromBdf:
    """Test cases for raw recording extraction."""

    @pytest.fixture
    def bdf_file(self, tmp_path):
        path = raw_bdf_path(tmp_path, 3, 1)
        path.parent.mkdir(parents=True)
        path.write_bytes(b'BDF')
        return path

    def test_reader_arguments(self, tmp_path, bdf_file, monkeypatch):
        raw = Mock(ch_names=['Fp1', 'Fp2'], n_times=1024)
        reader = Mock(return_value=raw)
        monkeypatch.setattr(mne.io, 'read_raw_bdf', reader)

        raw_data, num_s = extract_subject_from_bdf(tmp_path, 3, 1)

        assert raw_data is raw
        assert num_s == 'sub-03'
        reader.assert_called_once_with(str(bdf_file), preload=True, verbose='WARNING')

    def test_verbosity_from_config(self, tmp_path, bdf_file, monkeypatch):
        reader = Mock(return_value=Mock(ch_names=[], n_times=0))
        monkeypatch.setattr(mne.io, 'read_raw_bdf', reader)
        get_config().set('readers.verbose', 'ERROR')

        extract_subject_from_bdf(tmp_path, 3, 1)

        assert reader.call_args.kwargs['verbose'] == 'ERROR'

    def test_missing_file(self, tmp_path, monkeypatch):
        reader = Mock()
        monkeypatch.setattr(mne.io, 'read_raw_bdf', reader)

        with pytest.raises(DataNotFoundError):
            extract_subject_from_bdf(tmp_path, 3, 1)

        reader.assert_not_called()

    def test_reader_failure(self, tmp_path, bdf_file, monkeypatch):
        error = ValueError("bad header")
        monkeypatch.setattr(mne.io, 'read_raw_bdf', Mock(side_effect=error))

        with pytest.raises(DataLoadError) as exc_info:
            extract_subject_from_bdf(tmp_path, 3, 1)

        assert exc_info.value.original_error is error
        assert exc_info.value.__cause__ is error


class TestExtractBlockData:
    """Test cases for derived epoch extraction of one block."""

    @pytest.mark.parametrize("datatype", ['eeg', 'exg'])
    def test_trial_locked_datatypes(self, dataset_root, datatype):
        X, Y = extract_block_data_from_subject(dataset_root, 1, datatype, 3)

        np.testing.assert_array_equal(X, make_epochs(1, 3, 6))
        np.testing.assert_array_equal(Y, make_events(1, 3, 6))
        assert X.shape[0] == Y.shape[0]

    def test_baseline_is_not_row_checked(self, dataset_root):
        X, Y = extract_block_data_from_subject(dataset_root, 1, 'baseline', 1)

        assert X.shape == (1, 2, 8)
        assert Y.shape == (4, 4)

    def test_datatype_case_resolves_same_file(self, dataset_root, fake_read_epochs):
        X_upper, Y_upper = extract_block_data_from_subject(dataset_root, 2, 'EEG', 1)
        X_lower, Y_lower = extract_block_data_from_subject(dataset_root, 2, 'eeg', 1)

        assert fake_read_epochs[0][0] == fake_read_epochs[1][0]
        assert fake_read_epochs[0][0] == str(epochs_path(dataset_root, 2, 1, 'eeg'))
        np.testing.assert_array_equal(X_upper, X_lower)
        np.testing.assert_array_equal(Y_upper, Y_lower)

    def test_reader_verbosity(self, dataset_root, fake_read_epochs):
        extract_block_data_from_subject(dataset_root, 1, 'eeg', 1)
        extract_block_data_from_subject(dataset_root, 1, 'eeg', 1, verbose='ERROR')

        assert [verbose for _, verbose in fake_read_epochs] == ['WARNING', 'ERROR']

    def test_invalid_datatype_performs_no_io(self, tmp_path, monkeypatch):
        read_epochs = Mock()
        load = Mock()
        monkeypatch.setattr(mne, 'read_epochs', read_epochs)
        monkeypatch.setattr(extractors, 'load_events', load)

        with pytest.raises(InvalidDatatypeError):
            extract_block_data_from_subject(tmp_path, 1, 'meg', 1)

        read_epochs.assert_not_called()
        load.assert_not_called()
        assert list(tmp_path.iterdir()) == []

    def test_missing_epochs(self, dataset_root):
        epochs_path(dataset_root, 1, 2, 'exg').unlink()

        with pytest.raises(DataNotFoundError):
            extract_block_data_from_subject(dataset_root, 1, 'exg', 2)

    def test_missing_events(self, dataset_root):
        events_path(dataset_root, 2, 1).unlink()

        with pytest.raises(DataNotFoundError):
            extract_block_data_from_subject(dataset_root, 2, 'eeg', 1)

    def test_misaligned_rows(self, dataset_root):
        write_npy(epochs_path(dataset_root, 1, 1, 'eeg'), make_epochs(1, 1, 3))

        with pytest.raises(DimensionMismatchError) as exc_info:
            extract_block_data_from_subject(dataset_root, 1, 'eeg', 1)

        assert exc_info.value.shapes == [(3, 2, 8), (4, 4)]

    def test_reader_failure(self, dataset_root, monkeypatch):
        monkeypatch.setattr(mne, 'read_epochs', Mock(side_effect=OSError("truncated")))

        with pytest.raises(DataLoadError):
            extract_block_data_from_subject(dataset_root, 1, 'eeg', 1)

    def test_subject_block_name(self):
        assert extract_data_from_subject_block is extract_block_data_from_subject


class TestRealEpochFile:
    """Actual FIF files read through mne.read_epochs."""

    def test_read_fif(self, tmp_path):
        n_trials = 4
        data = np.random.default_rng(0).standard_normal((n_trials, 2, 16)) * 1e-6
        info = mne.create_info(['C3', 'C4'], sfreq=256.0, ch_types='eeg')
        epochs = mne.EpochsArray(data, info, verbose=False)

        fname = epochs_path(tmp_path, 1, 1, 'eeg')
        fname.parent.mkdir(parents=True)
        epochs.save(fname, verbose=False)
        write_npy(events_path(tmp_path, 1, 1), make_events(1, 1, n_trials))

        X, Y = extract_block_data_from_subject(tmp_path, 1, 'EEG', 1)

        assert X.shape == (n_trials, 2, 16)
        np.testing.assert_allclose(X, data, rtol=1e-5, atol=1e-12)
        assert Y.shape == (n_trials, 4)

    def test_malformed_fif(self, tmp_path):
        fname = epochs_path(tmp_path, 1, 1, 'eeg')
        fname.parent.mkdir(parents=True)
        fname.write_bytes(b'garbage' * 50)

        with pytest.raises(DeserializationError) as exc_info:
            read_epochs_data(fname)

        assert not isinstance(exc_info.value, DataLoadError)
        assert isinstance(exc_info.value.original_error, ValueError)
