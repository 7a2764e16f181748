# soundex.py
# American Soundex: name -> 4-char phonetic code
from typing import Optional

from soundex_utils import ascii_upper

CLASSES = {
    "BFPV": "1", "CGJKQSXZ": "2",
    "DT": "3", "L": "4",
    "MN": "5", "R": "6"
}
_CLASS_OF = {c: digit for letters, digit in CLASSES.items() for c in letters}

CODE_LEN = 4


def soundex_class(c: str) -> Optional[str]:
    """class digit for one normalized char, None for vowels/H/W/non-letters"""
    return _CLASS_OF.get(c)


def soundex(word: str) -> str:
    """
    classic american soundex -> 4-char code

    the first ascii char is kept verbatim (even a digit or punctuation),
    later runs of the same class collapse to one digit and unclassed
    runs are skipped. never raises for str input; "" -> "0000".
    """
    chars = ascii_upper(word)

    # H and W vanish everywhere except the first position
    seq = chars[:1] + "".join(c for c in chars[1:] if c not in ("H", "W"))

    # collapse runs sharing a class (None counts as one class too)
    runs = []
    prev = None
    for c in seq:
        code = soundex_class(c)
        if runs and code == prev:
            continue
        runs.append((c, code))
        prev = code

    out = []
    for i, (c, code) in enumerate(runs):
        if i == 0:
            out.append(c)
        elif code:
            out.append(code)

    s = "".join(out)[:CODE_LEN].ljust(CODE_LEN, "0")

    # a leading class digit gets its original char back; '0' stays
    if "1" <= s[0] <= "9":
        s = chars[0] + s[1:]

    assert len(s) == CODE_LEN and s.isascii()
    return s


encode = soundex


if __name__ == "__main__":
    print(soundex("Robert"))   # expectation: R163
    print(soundex("Rupert"))
    print(soundex("Rubin"))
    print(soundex("007bond"))  # expectation: 0153
