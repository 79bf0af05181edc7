"""
Dataset Enumerations and Constants
==================================

Closed vocabularies of the Inner Speech dataset.

Recording Protocol:
------------------
- 3 blocks (sessions) per subject, ``ses-01`` .. ``ses-03``
- 3 conditions: Pronounced, Inner, Visualized
- 4 classes (directions): Up, Down, Right, Left; the derivative files
  use the Spanish names Arriba, Abajo, Derecha, Izquierda
- Event rows: ``[sample, class, condition, session]``

Derived epoch files come in three flavours, one per ``Datatype``:

=========  ======================  ============================
Datatype   File suffix             One epoch per event row
=========  ======================  ============================
EEG        ``eeg-epo.fif``         yes
EXG        ``exg-epo.fif``         yes
BASELINE   ``baseline-epo.fif``    no (one rest segment)
=========  ======================  ============================
"""

from enum import Enum
from typing import Dict, Tuple, Union

from inner_speech.core.exceptions import InvalidDatatypeError


# =============================================================================
# BLOCKS
# =============================================================================

# Fixed, ordered set of recording blocks for every subject
BLOCKS: Tuple[int, ...] = (1, 2, 3)


# =============================================================================
# EVENT MATRIX LAYOUT
# =============================================================================

EVENT_SAMPLE: int = 0
EVENT_CLASS: int = 1
EVENT_CONDITION: int = 2
EVENT_SESSION: int = 3

N_EVENT_COLUMNS: int = 4


# =============================================================================
# LABEL CODES
# =============================================================================

# Canonical condition name -> code stored in the condition column
CONDITION_CODES: Dict[str, int] = {
    'Pronounced': 0,
    'Inner': 1,
    'Visualized': 2,
}

# Canonical class name -> code stored in the class column
CLASS_CODES: Dict[str, int] = {
    'Arriba': 0,      # Up
    'Abajo': 1,       # Down
    'Derecha': 2,     # Right
    'Izquierda': 3,   # Left
}

# Wildcard accepted by the selection helpers for both conditions and classes
ALL_LABEL: str = 'All'


# =============================================================================
# DATATYPE
# =============================================================================

class Datatype(str, Enum):
    """
    Flavour of derived epoch file.

    Raw strings are parsed once with ``Datatype.parse``; everything below the
    public extraction functions works with the enum only.
    """

    EEG = 'eeg'
    EXG = 'exg'
    BASELINE = 'baseline'

    @property
    def suffix(self) -> str:
        """File suffix of the derived epoch file for this datatype."""
        return _DATATYPE_SUFFIXES[self]

    @property
    def is_trial_locked(self) -> bool:
        """True when the epochs line up row for row with the event matrix."""
        return self is not Datatype.BASELINE

    @classmethod
    def parse(cls, value: Union[str, 'Datatype']) -> 'Datatype':
        """
        Parse a datatype token, ignoring letter case.

        Raises:
            InvalidDatatypeError: If the token is not eeg, exg or baseline
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDatatypeError(value, [d.value for d in cls])

    def __str__(self) -> str:
        return self.value


_DATATYPE_SUFFIXES: Dict[Datatype, str] = {
    Datatype.EEG: 'eeg-epo.fif',
    Datatype.EXG: 'exg-epo.fif',
    Datatype.BASELINE: 'baseline-epo.fif',
}
