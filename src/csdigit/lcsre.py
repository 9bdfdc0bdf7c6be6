"""
Longest repeated non-overlapping substring.

Used to find digit patterns that occur more than once in a CSD string,
so the shifted partial sum they describe can be computed once and reused.
"""

from typing import List


def longest_repeated_substring(text: str) -> str:
    """
    Return the longest substring occurring at least twice without overlap.

    Dynamic programming over end positions (i, j), i < j: L[i][j] is the
    length of the common suffix of text[:i] and text[:j], extended only
    while the two copies stay apart ((j - i) > L[i-1][j-1]). Row i depends
    on row i - 1 alone, so two rows indexed by parity are kept.

    The best match is replaced only on strict improvement, so among equal
    lengths the one whose earlier copy ends first wins.

    Args:
        text: Any string (may be empty)

    Returns:
        The repeated substring, or "" if no character repeats

    Examples:
        >>> longest_repeated_substring("banana")
        'an'
        >>> longest_repeated_substring("abcdefghij")
        ''
    """
    n = len(text)
    rows: List[List[int]] = [[0] * (n + 1), [0] * (n + 1)]

    res_length = 0
    index = 0  # end (exclusive) of the earlier copy

    for i in range(1, n + 1):
        prev = rows[(i - 1) & 1]
        curr = rows[i & 1]
        char = text[i - 1]
        for j in range(i + 1, n + 1):
            if char == text[j - 1] and prev[j - 1] < (j - i):
                curr[j] = prev[j - 1] + 1
                if curr[j] > res_length:
                    res_length = curr[j]
                    index = i
            else:
                curr[j] = 0

    return text[index - res_length:index]


__all__ = ["longest_repeated_substring"]
