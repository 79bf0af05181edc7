"""
Datasets Module
===============

PyTorch-compatible Dataset over Inner Speech trials.

Dataset Classes:
---------------
- InnerSpeechDataset: Trials and integer labels

Utility Functions:
-----------------
- train_val_test_split: Split dataset into train/val/test
- create_cv_folds: Create cross-validation folds

Usage:
    ```python
    from inner_speech.datasets import InnerSpeechDataset, train_val_test_split

    dataset = InnerSpeechDataset.from_subjects([1, 2], root_dir='/data/inner_speech')
    train_ds, val_ds = train_val_test_split(dataset, val_ratio=0.2)
    ```
"""

from inner_speech.datasets.inner_speech_dataset import (
    InnerSpeechDataset,
    DEFAULT_CLASSES,
    DEFAULT_CONDITIONS,
    train_val_test_split,
    create_cv_folds,
)

__all__ = [
    'InnerSpeechDataset',
    'DEFAULT_CLASSES',
    'DEFAULT_CONDITIONS',
    'train_val_test_split',
    'create_cv_folds',
]
