"""
Core Types Module
=================

This module exports the closed vocabularies of the Inner Speech dataset.

Available Types:
---------------
- Datatype: Flavour of derived epoch file (eeg, exg, baseline)
- BLOCKS: Ordered recording blocks of every subject
- CONDITION_CODES / CLASS_CODES: Label name to event code tables
- EVENT_*: Column indices of the event matrix

Example Usage:
    ```python
    from inner_speech.core.types import Datatype, BLOCKS

    datatype = Datatype.parse('EEG')
    print(datatype.suffix)  # eeg-epo.fif
    ```
"""

from inner_speech.core.types.datatypes import (
    Datatype,
    BLOCKS,
    EVENT_SAMPLE,
    EVENT_CLASS,
    EVENT_CONDITION,
    EVENT_SESSION,
    N_EVENT_COLUMNS,
    CONDITION_CODES,
    CLASS_CODES,
    ALL_LABEL,
)

__all__ = [
    'Datatype',
    'BLOCKS',
    'EVENT_SAMPLE',
    'EVENT_CLASS',
    'EVENT_CONDITION',
    'EVENT_SESSION',
    'N_EVENT_COLUMNS',
    'CONDITION_CODES',
    'CLASS_CODES',
    'ALL_LABEL',
]
