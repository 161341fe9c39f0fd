"""Static character tables used by text normalization.

All tables are keyed by single code points so they can be fed to
``str.maketrans`` directly.
"""
from __future__ import annotations

# Modern Georgian (Mkhedruli) alphabet, 33 letters, in dictionary order.
GEORGIAN_ALPHABET = "აბგდევზთიკლმნოპჟრსტუფქღყშჩცძწჭხჯჰ"

GEORGIAN_TO_LATIN: dict[str, str] = {
    "ა": "a",
    "ბ": "b",
    "გ": "g",
    "დ": "d",
    "ე": "e",
    "ვ": "v",
    "ზ": "z",
    "თ": "t",
    "ი": "i",
    "კ": "k",
    "ლ": "l",
    "მ": "m",
    "ნ": "n",
    "ო": "o",
    "პ": "p",
    "ჟ": "zh",
    "რ": "r",
    "ს": "s",
    "ტ": "t",
    "უ": "u",
    "ფ": "f",
    "ქ": "q",
    "ღ": "gh",
    "ყ": "y",
    "შ": "sh",
    "ჩ": "ch",
    "ც": "ts",
    "ძ": "dz",
    "წ": "ts",
    "ჭ": "ch",
    "ხ": "kh",
    "ჯ": "j",
    "ჰ": "h",
}

# Extra Latin spellings people type for Georgian letters.
LATIN_ALIASES: dict[str, str] = {
    "w": "ვ",
    "x": "ხ",
    "c": "ც",
    "ph": "ფ",
}

LATIN_DIACRITICS: dict[str, str] = {
    "á": "a", "à": "a", "ä": "a", "â": "a", "ã": "a", "å": "a", "ā": "a", "ă": "a", "ą": "a",
    "é": "e", "è": "e", "ë": "e", "ê": "e", "ē": "e", "ė": "e", "ę": "e", "ě": "e",
    "í": "i", "ì": "i", "ï": "i", "î": "i", "ī": "i", "į": "i", "ı": "i",
    "ó": "o", "ò": "o", "ö": "o", "ô": "o", "õ": "o", "ø": "o", "ō": "o", "ő": "o",
    "ú": "u", "ù": "u", "ü": "u", "û": "u", "ū": "u", "ů": "u", "ű": "u", "ų": "u",
    "ý": "y", "ÿ": "y",
    "ñ": "n", "ń": "n", "ň": "n",
    "ç": "c", "ć": "c", "č": "c",
    "ś": "s", "š": "s", "ş": "s",
    "ź": "z", "ż": "z", "ž": "z",
    "ł": "l", "ľ": "l", "ĺ": "l",
    "đ": "d", "ď": "d",
    "ř": "r", "ŕ": "r",
    "ť": "t", "ţ": "t",
    "ğ": "g",
    "ß": "ss", "æ": "ae", "œ": "oe",
}

# Combining Diacritical Marks block, dropped so decomposed input folds too.
COMBINING_MARKS = range(0x0300, 0x0370)


def build_latin_to_georgian() -> dict[str, str]:
    """Invert the Georgian table; the first letter in alphabet order wins collisions."""
    inverse: dict[str, str] = {}
    for letter in GEORGIAN_ALPHABET:
        inverse.setdefault(GEORGIAN_TO_LATIN[letter], letter)
    for spelling, letter in LATIN_ALIASES.items():
        inverse.setdefault(spelling, letter)
    return inverse


LATIN_TO_GEORGIAN = build_latin_to_georgian()


__all__ = [
    "COMBINING_MARKS",
    "GEORGIAN_ALPHABET",
    "GEORGIAN_TO_LATIN",
    "LATIN_ALIASES",
    "LATIN_DIACRITICS",
    "LATIN_TO_GEORGIAN",
    "build_latin_to_georgian",
]
