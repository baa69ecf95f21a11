"""String algorithms: substrings, palindromes, parsing and anagrams."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, ch in enumerate(s):
        previous = last_seen.get(ch)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring, found by expanding around each centre.

    Of several palindromes of the same length the leftmost one is returned.
    """
    best_start, best_stop = 0, 0
    for index in range(len(s)):
        for left, right in ((index, index), (index, index + 1)):
            start, stop = _expand(s, left, right)
            if stop - start > best_stop - best_start:
                best_start, best_stop = start, stop
    return s[best_start:best_stop]


def longest_palindrome_manacher(s: str) -> str:
    """Longest palindromic substring in linear time (Manacher's algorithm).

    Of several palindromes of the same length the leftmost one is returned.
    """
    if not s:
        return s
    padded = "#" + "#".join(s) + "#"
    radius = [0] * len(padded)
    right_edge, centre = -1, -1
    best_len, best_centre = -1, -1
    for index in range(len(padded)):
        if index < right_edge:
            radius[index] = min(radius[2 * centre - index], right_edge - index)
        r = radius[index]
        while (
            index - r - 1 >= 0
            and index + r + 1 < len(padded)
            and padded[index - r - 1] == padded[index + r + 1]
        ):
            r += 1
        radius[index] = r
        if index + r > right_edge:
            right_edge, centre = index + r, index
        if r > best_len:
            best_len, best_centre = r, index
    start = (best_centre - best_len) // 2
    return s[start:start + best_len]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")
    if num_rows == 1:
        return s
    cycle = 2 * num_rows - 2
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for index, ch in enumerate(s):
        offset = index % cycle
        rows[min(offset, cycle - offset)].append(ch)
    return "".join("".join(row) for row in rows)


def my_atoi(s: str) -> int:
    """Convert ``s`` to a 32-bit signed integer the way C's ``atoi`` would.

    Leading spaces are skipped, one optional sign is read, then as many
    digits as follow.  Results outside the 32-bit range are clamped.
    """
    text = s.lstrip(" ")
    negative = text.startswith("-")
    if text[:1] in ("-", "+"):
        text = text[1:]
    digits = "".join(
        next(groupby(text, key=lambda ch: ch in string.digits), (False, ""))[1]
    ) if text[:1].isdigit() and text[:1] in string.digits else ""
    value = int(digits) if digits else 0
    if value > INT32_MAX:
        return INT32_MIN if negative else INT32_MAX
    return -value if negative else value


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("no strings given")
    first, last = min(strs), max(strs)
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def _parentheses(prefix: str, remaining: int, unmatched: int, n: int) -> Iterator[str]:
    if remaining == 0:
        yield prefix + ")" * (2 * n - len(prefix))
        return
    if unmatched:
        yield from _parentheses(prefix + ")", remaining, unmatched - 1, n)
    yield from _parentheses(prefix + "(", remaining - 1, unmatched + 1, n)


def generate_parenthesis(n: int) -> list[str]:
    """Every well-formed string of ``n`` pairs of parentheses.

    Closing a pair is tried before opening a new one, which fixes the order.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return list(_parentheses("", n, 0, n))


def _group(strs: Iterable[str], key) -> list[list[str]]:
    groups: dict[object, list[str]] = {}
    for word in strs:
        groups.setdefault(key(word), []).append(word)
    return list(groups.values())


def group_anagrams_sorted(strs: Iterable[str]) -> list[list[str]]:
    """Group anagrams together, keyed by each word's sorted letters."""
    return _group(strs, lambda word: "".join(sorted(word)))


def _letter_counts(word: str) -> tuple[int, ...]:
    counts = [0] * 26
    for ch in word:
        if ch not in string.ascii_lowercase:
            raise ValueError(f"{word!r} holds a character other than a-z: {ch!r}")
        counts[ord(ch) - ord("a")] += 1
    return tuple(counts)


def group_anagrams_counted(strs: Iterable[str]) -> list[list[str]]:
    """Group lower-case anagrams together, keyed by each word's letter counts."""
    return _group(strs, _letter_counts)


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t``, with repeats.

    Returns an empty string when there is none; of several shortest windows
    the one that ends first is returned.
    """
    if not t or len(s) < len(t):
        return ""
    need = Counter(t)
    missing = len(t)
    best: tuple[int, int] | None = None
    left = 0
    for right, ch in enumerate(s):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        if missing:
            continue
        while need[s[left]] < 0:
            need[s[left]] += 1
            left += 1
        if best is None or right + 1 - left < best[1] - best[0]:
            best = (left, right + 1)
        need[s[left]] += 1
        missing += 1
        left += 1
    return s[best[0]:best[1]] if best else ""


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` uses exactly the characters of ``s``."""
    return Counter(s) == Counter(t)


def _shift(diff: dict[str, int], ch: str, delta: int) -> None:
    value = diff.get(ch, 0) + delta
    if value:
        diff[ch] = value
    else:
        diff.pop(ch, None)


def check_inclusion(s1: str, s2: str) -> bool:
    """Whether some permutation of ``s1`` is a substring of ``s2``."""
    width = len(s1)
    if width > len(s2):
        return False
    diff: dict[str, int] = {}
    for ch in s1:
        _shift(diff, ch, -1)
    for ch in s2[:width]:
        _shift(diff, ch, 1)
    if not diff:
        return True
    for leaving, entering in zip(s2, s2[width:]):
        _shift(diff, leaving, -1)
        _shift(diff, entering, 1)
        if not diff:
            return True
    return False


def _word_count(sentence: str) -> int:
    if not sentence:
        return 0
    return 1 + sum(1 for is_space, _ in groupby(sentence, key=lambda ch: ch == " ") if is_space)


def most_words_found(sentences: Iterable[str]) -> int:
    """Largest number of space-separated words in any one sentence."""
    return max(map(_word_count, sentences), default=0)