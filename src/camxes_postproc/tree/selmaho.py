"""Terminal category (selma'o) classifier.

A selma'o name is written in capitals with ``h`` standing for the
apostrophe: an optional leading consonant, a vowel or diphthong, then any
number of ``h`` + vowel-or-diphthong groups (``KOhA``, ``ZAhO``, ``NAI``,
``UI``).  Recognition is structural, so names that appear nowhere else in
this package are still accepted.
"""

from __future__ import annotations

import re
from typing import Any

# Vowel core: one of the four diphthongs or a single vowel
_CORE = r"(?:AI|EI|OI|AU|[AEIOUY])"

# Full selma'o name; used with fullmatch so it is anchored at both ends
_SELMAHO = re.compile(rf"[IUBCDFGJKLMNPRSTVXZ]?{_CORE}(?:h{_CORE})*")


def is_selmaho(value: Any) -> bool:
    """Return True if ``value`` is a string naming a terminal category.

    Args:
        value: Candidate label.  Non-string values are never selma'o.

    Returns:
        True when the whole string matches the selma'o pattern.
    """
    if not isinstance(value, str):
        return False
    return _SELMAHO.fullmatch(value) is not None
