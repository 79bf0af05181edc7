"""
Unit Tests for Trial Selection
==============================

This module contains unit tests for the selection helpers applied to
extracted (X, Y) pairs.

Test Coverage:
- filter_by_condition
- filter_by_class
- transform_for_classifier
- select_time_window
"""

import pytest
import numpy as np

from inner_speech.core.config import get_config
from inner_speech.core.exceptions import DimensionMismatchError, InvalidInputError
from inner_speech.preprocessing import (
    filter_by_condition,
    filter_by_class,
    transform_for_classifier,
    select_time_window,
)


@pytest.fixture
def trials():
    """24 trials covering every (class, condition) pair twice."""
    n_trials = 24
    idx = np.arange(n_trials)
    Y = np.column_stack([
        idx * 10,           # sample
        idx % 4,            # class
        (idx // 4) % 3,     # condition
        np.ones(n_trials, dtype=int),
    ])
    X = np.broadcast_to(idx[:, None, None].astype(float), (n_trials, 2, 16)).copy()
    return X, Y


class TestFilterByCondition:
    """Test cases for filter_by_condition."""

    @pytest.mark.parametrize("condition,code", [
        ('pron', 0), ('Pronounced', 0),
        ('inner', 1), ('INNER', 1),
        ('vis', 2), ('Visualized', 2),
    ])
    def test_keeps_matching_rows(self, trials, condition, code):
        X, Y = trials
        X_r, Y_r = filter_by_condition(X, Y, condition)

        assert len(X_r) == 8
        assert np.all(Y_r[:, 2] == code)
        np.testing.assert_array_equal(X_r[:, 0, 0], Y_r[:, 0] / 10)

    def test_all_keeps_everything(self, trials):
        X, Y = trials
        X_r, Y_r = filter_by_condition(X, Y, 'all')

        assert X_r is X
        assert Y_r is Y

    @pytest.mark.parametrize("condition", ['', None, 'imagined'])
    def test_invalid_condition(self, trials, condition):
        X, Y = trials
        with pytest.raises(InvalidInputError):
            filter_by_condition(X, Y, condition)

    def test_misaligned_rows(self, trials):
        X, Y = trials
        with pytest.raises(DimensionMismatchError):
            filter_by_condition(X[:-1], Y, 'inner')


class TestFilterByClass:
    """Test cases for filter_by_class."""

    @pytest.mark.parametrize("class_label,code", [
        ('up', 0), ('Arriba', 0),
        ('down', 1), ('right', 2), ('Izquierda', 3),
    ])
    def test_keeps_matching_rows(self, trials, class_label, code):
        X, Y = trials
        X_r, Y_r = filter_by_class(X, Y, class_label)

        assert len(Y_r) == 6
        assert np.all(Y_r[:, 1] == code)

    def test_all_keeps_everything(self, trials):
        X, Y = trials
        X_r, _ = filter_by_class(X, Y, 'All')

        assert X_r is X

    def test_unknown_class(self, trials):
        X, Y = trials
        with pytest.raises(InvalidInputError):
            filter_by_class(X, Y, 'forward')

    def test_chained_filters(self, trials):
        """Condition then class selects a single (class, condition) cell."""
        X, Y = trials
        X_r, Y_r = filter_by_class(*filter_by_condition(X, Y, 'inner'), 'left')

        assert len(Y_r) == 2
        assert np.all(Y_r[:, 1] == 3)
        assert np.all(Y_r[:, 2] == 1)


class TestTransformForClassifier:
    """Test cases for transform_for_classifier."""

    def test_two_groups(self, trials):
        X, Y = trials
        X_c, y_c = transform_for_classifier(
            X, Y,
            classes=[['up'], ['down']],
            conditions=[['inner'], ['inner']],
        )

        assert X_c.shape == (4, 2, 16)
        assert y_c.tolist() == [0, 0, 1, 1]
        assert y_c.dtype == np.int64

    def test_merged_pairs_in_one_group(self, trials):
        X, Y = trials
        X_c, y_c = transform_for_classifier(
            X, Y,
            classes=[['up', 'down'], ['all']],
            conditions=[['inner', 'inner'], ['vis']],
        )

        assert np.bincount(y_c).tolist() == [4, 8]
        assert len(X_c) == len(y_c)

    def test_rows_follow_labels(self, trials):
        X, Y = trials
        X_c, y_c = transform_for_classifier(
            X, Y, classes=[['right'], ['left']], conditions=[['pron'], ['pron']]
        )

        trial_idx = X_c[:, 0, 0].astype(int)
        np.testing.assert_array_equal(Y[trial_idx, 1], np.where(y_c == 0, 2, 3))

    def test_empty_groups(self, trials):
        X, Y = trials
        with pytest.raises(InvalidInputError):
            transform_for_classifier(X, Y, classes=[], conditions=[])

    def test_group_count_mismatch(self, trials):
        X, Y = trials
        with pytest.raises(InvalidInputError):
            transform_for_classifier(X, Y, classes=[['up'], ['down']], conditions=[['inner']])

    def test_pair_count_mismatch(self, trials):
        X, Y = trials
        with pytest.raises(InvalidInputError) as exc_info:
            transform_for_classifier(
                X, Y, classes=[['up', 'down']], conditions=[['inner']]
            )

        assert exc_info.value.field == 'conditions[0]'


class TestSelectTimeWindow:
    """Test cases for select_time_window."""

    def test_explicit_window(self):
        X = np.arange(40, dtype=float).reshape(1, 1, 40)
        X_w = select_time_window(X, t_start=0.5, t_end=1.5, fs=10)

        assert X_w.ravel().tolist() == list(range(5, 15))

    def test_defaults_from_config(self):
        X = np.zeros((3, 2, 1152))
        X_w = select_time_window(X)

        assert X_w.shape == (3, 2, round(3.5 * 256) - round(1.5 * 256))

    def test_configured_window(self):
        get_config().update({
            'time_window.t_start': 0.0,
            'time_window.t_end': 1.0,
            'data.sampling_rate': 4,
        })
        X = np.arange(10, dtype=float)

        assert select_time_window(X).tolist() == [0, 1, 2, 3]

    def test_clamped_to_available_samples(self):
        X = np.zeros((2, 1, 20))

        assert select_time_window(X, t_start=1.0, t_end=5.0, fs=10).shape == (2, 1, 10)

    def test_invalid_window(self):
        with pytest.raises(InvalidInputError):
            select_time_window(np.zeros((1, 1, 10)), t_start=2.0, t_end=1.0, fs=10)

    def test_invalid_sampling_rate(self):
        with pytest.raises(InvalidInputError):
            select_time_window(np.zeros((1, 1, 10)), t_start=0.0, t_end=1.0, fs=0)
