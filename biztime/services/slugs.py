"""Slug normalization for company and industry codes."""
import re
import unicodedata
from typing import Optional

# Symbols and letters spelled out before anything is stripped; letters that
# NFKD cannot fold to ASCII are listed here too.
_CHAR_MAP = str.maketrans({
    "$": "dollar",
    "%": "percent",
    "&": "and",
    "<": "less",
    ">": "greater",
    "|": "or",
    "¢": "cent",
    "£": "pound",
    "¤": "currency",
    "¥": "yen",
    "€": "euro",
    "©": "c",
    "®": "r",
    "™": "tm",
    "∞": "infinity",
    "♥": "love",
    "∑": "sum",
    "∆": "delta",
    "Æ": "AE",
    "æ": "ae",
    "Ð": "D",
    "ð": "d",
    "Ø": "O",
    "ø": "o",
    "Þ": "TH",
    "þ": "th",
    "ß": "ss",
    "Đ": "DJ",
    "đ": "dj",
    "Ł": "L",
    "ł": "l",
    "Œ": "OE",
    "œ": "oe",
})

_STRIP = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")


def slugify(value: Optional[str]) -> Optional[str]:
    """
    Turn a display string into a lowercase, URL-safe code.

    Symbols with a spoken form are replaced by it, accented letters are
    folded to ASCII, remaining punctuation is dropped and runs of
    whitespace or hyphens become a single hyphen:

        >>> slugify("Apple Computer")
        'apple-computer'
        >>> slugify("AT&T")
        'atandt'

    ``None`` passes through so the store can reject a missing code.
    """
    if value is None:
        return None
    spelled = unicodedata.normalize("NFC", str(value)).translate(_CHAR_MAP)
    folded = unicodedata.normalize("NFKD", spelled)
    folded = folded.encode("ascii", "ignore").decode("ascii").lower()
    folded = _STRIP.sub("", folded)
    return _SEPARATORS.sub("-", folded).strip("-")
