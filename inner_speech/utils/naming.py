"""
Naming Utilities
================

Subject identifiers and label spellings used across the dataset.

The derivative files were produced over several analysis rounds and use
inconsistent spellings for conditions and classes ("vis", "Visualized",
"up", "Arriba", ...). ``normalize_label_pair`` maps every known alias to the
spelling used in the file names; unknown tokens pass through unchanged.
"""

from typing import Dict, Tuple


SUBJECT_PREFIX = 'sub-'

# Lowercase alias -> canonical condition name
CONDITION_ALIASES: Dict[str, str] = {
    'inner': 'Inner',
    'vis': 'Visualized',
    'visualized': 'Visualized',
    'pron': 'Pronounced',
    'pronounced': 'Pronounced',
    'all': 'All',
}

# Lowercase alias -> canonical class name
CLASS_ALIASES: Dict[str, str] = {
    'all': 'All',
    'up': 'Arriba',
    'arriba': 'Arriba',
    'down': 'Abajo',
    'abajo': 'Abajo',
    'right': 'Derecha',
    'derecha': 'Derecha',
    'left': 'Izquierda',
    'izquierda': 'Izquierda',
}


def subject_token(n_s: int) -> str:
    """
    Canonical identifier of a subject number.

    Single-digit numbers are zero padded to two digits.

    Example:
        >>> subject_token(3)
        'sub-03'
        >>> subject_token(10)
        'sub-10'
    """
    if n_s < 10:
        return f"{SUBJECT_PREFIX}0{n_s}"
    return f"{SUBJECT_PREFIX}{n_s}"


def normalize_condition(condition: str) -> str:
    """Canonical spelling of a condition name."""
    return CONDITION_ALIASES.get(condition.strip().lower(), condition)


def normalize_class_label(class_label: str) -> str:
    """Canonical spelling of a class name."""
    return CLASS_ALIASES.get(class_label.strip().lower(), class_label)


def normalize_label_pair(condition: str, class_label: str) -> Tuple[str, str]:
    """
    Canonical spelling of a (condition, class) pair.

    Example:
        >>> normalize_label_pair('vis', 'up')
        ('Visualized', 'Arriba')
    """
    return normalize_condition(condition), normalize_class_label(class_label)
