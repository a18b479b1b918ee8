"""String matching (Knuth-Morris-Pratt, Rabin-Karp) and longest common subsequence."""

from __future__ import annotations

_RADIX = 256


def compute_prefix(pattern: str) -> list[int]:
    """Return the KMP prefix function: for each position, the length of the
    longest proper prefix of ``pattern[:i + 1]`` that is also its suffix."""
    prefix = [0] * len(pattern)
    matched = 0
    for i in range(1, len(pattern)):
        while matched > 0 and pattern[i] != pattern[matched]:
            matched = prefix[matched - 1]
        if pattern[matched] == pattern[i]:
            matched += 1
        prefix[i] = matched
    return prefix


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every shift at which ``pattern`` occurs in ``text``, in order."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    prefix = compute_prefix(pattern)
    shifts: list[int] = []
    matched = 0
    for i, char in enumerate(text):
        while matched > 0 and char != pattern[matched]:
            matched = prefix[matched - 1]
        if char == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            shifts.append(i - len(pattern) + 1)
            matched = prefix[matched - 1]
    return shifts


def rabin_karp_search(text: str, pattern: str, modulus: int = 101) -> list[int]:
    """Return every shift at which ``pattern`` occurs in ``text`` using a
    rolling hash modulo ``modulus``; hash hits are verified character by character."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    m, n = len(pattern), len(text)
    if m > n:
        return []

    high = pow(_RADIX, m - 1, modulus)
    text_hash = pattern_hash = 0
    for t_char, p_char in zip(text[:m], pattern):
        text_hash = (_RADIX * text_hash + ord(t_char)) % modulus
        pattern_hash = (_RADIX * pattern_hash + ord(p_char)) % modulus

    shifts: list[int] = []
    for shift in range(n - m + 1):
        if text_hash == pattern_hash and text[shift:shift + m] == pattern:
            shifts.append(shift)
        if shift < n - m:
            text_hash = (
                _RADIX * (text_hash - ord(text[shift]) * high) + ord(text[shift + m])
            ) % modulus
    return shifts


def longest_common_subsequence(x: str, y: str) -> str:
    """Return a longest common subsequence of ``x`` and ``y``.

    On ties the table walk prefers dropping a character of ``x``.
    """
    m, n = len(x), len(y)
    lengths = [[0] * (n + 1) for _ in range(m + 1)]
    for i, x_char in enumerate(x, start=1):
        row, above = lengths[i], lengths[i - 1]
        for j, y_char in enumerate(y, start=1):
            if x_char == y_char:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])

    chars: list[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            chars.append(x[i - 1])
            i -= 1
            j -= 1
        elif lengths[i - 1][j] >= lengths[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))