"""String algorithms: parsing, parentheses and character counting."""

from __future__ import annotations

from collections import Counter

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether a one-to-one character mapping turns ``s`` into ``t``."""
    if len(s) != len(t):
        return False
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for a, b in zip(s, t):
        if a in mapping:
            if mapping[a] != b:
                return False
        elif b in used:
            return False
        else:
            mapping[a] = b
            used.add(b)
    return True


def largest_odd(num: str) -> str:
    """Return the longest prefix of the digit string ``num`` that ends in an odd digit."""
    for i in range(len(num) - 1, -1, -1):
        if num[i] in "13579":
            return num[: i + 1]
    return ""


def max_nesting_depth(s: str) -> int:
    """Return the deepest nesting of parentheses in ``s``."""
    depth = deepest = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        deepest = max(deepest, depth)
    return deepest


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost parentheses of every primitive group in ``s``."""
    parts: list[str] = []
    opened = closed = 0
    start = 0
    for i, ch in enumerate(s):
        if ch == "(":
            opened += 1
        elif ch == ")":
            closed += 1
        if opened == closed and opened > 0:
            parts.append(s[start + 1 : i])
            start = i + 1
            opened = closed = 0
    return "".join(parts)


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order, single-spaced."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters count as zero."""
    values = [_ROMAN.get(ch, 0) for ch in s]
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += value if value >= following else -value
    return total


def frequency_sort(s: str) -> str:
    """Return ``s`` regrouped by character, most frequent first; ties in character order."""
    counts = Counter(s)
    ordered = sorted(sorted(counts), key=lambda ch: -counts[ch])
    return "".join(ch * counts[ch] for ch in ordered)


def my_atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit range."""
    i = 0
    while i < len(s) and s[i] == " ":
        i += 1
    sign = 1
    if i < len(s) and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    value = 0
    for ch in s[i:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + ord(ch) - ord("0")
        if value > INT32_MAX:
            return INT32_MAX if sign == 1 else INT32_MIN
    return sign * value


def beauty_sum(s: str) -> int:
    """Sum, over all substrings, the gap between the most and least frequent character."""
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            frequencies = counts.values()
            total += max(frequencies) - min(frequencies)
    return total


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and sorted(s) == sorted(t)