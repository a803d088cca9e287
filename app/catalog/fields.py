"""Field helpers for raw catalog records: slugs, text cleaning and fuzzy key lookup."""

import math
import re
from typing import Any, Collection, List, Mapping, Tuple

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

TRUE_WORDS = frozenset({"yes", "y", "true", "1", "available", "in stock", "featured"})
FALSE_WORDS = frozenset({"no", "n", "false", "0", "unavailable", "out of stock"})


def slugify(name: str) -> str:
    """Lower-case ``name``, collapse non-alphanumeric runs to ``-`` and trim hyphens.

    Names made only of punctuation produce an empty string.
    """
    return _NON_ALNUM.sub("-", (name or "").lower()).strip("-")


def clean_text(value: Any) -> str:
    """Render a spreadsheet cell as trimmed text; blanks and NaN become ``""``."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def parse_flag(value: Any, default: bool) -> bool:
    """Interpret a free-text yes/no cell."""
    if isinstance(value, bool):
        return value
    text = clean_text(value).lower()
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    return default


class RecordKeyIndex:
    """Case-insensitive index over one raw record's keys.

    ``lookup("height")`` returns the value stored under the first key (in
    record order) whose lower-cased name contains ``"height"``, so
    ``"Plant Height (cm)"`` and ``"HEIGHT"`` both resolve.
    """

    def __init__(self, record: Mapping[str, Any]):
        self._record = record
        self._keys: List[Tuple[str, str]] = [
            (str(key).strip().lower(), key) for key in record.keys()
        ]

    def find_key(self, pattern: str, exclude: Collection[Any] = ()):
        """Return the original key matching ``pattern``, or None.

        Keys in ``exclude`` are skipped.
        """
        needle = pattern.lower()
        for lowered, original in self._keys:
            if needle in lowered and original not in exclude:
                return original
        return None

    def lookup(self, pattern: str) -> str:
        """Return the cleaned value for ``pattern``, or ``""`` when no key matches."""
        key = self.find_key(pattern)
        if key is None:
            return ""
        return clean_text(self._record[key])
