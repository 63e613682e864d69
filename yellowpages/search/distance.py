# Levenshtein edit distance over already-normalized strings.
# Single rolling row: O(len(a) * len(b)) time, O(len(b)) space.

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # column[j] = distance between a[:i] and b[:j] for the current row i
    column = list(range(len(b) + 1))

    for i in range(1, len(a) + 1):
        prev_diagonal = column[0]
        column[0] = i
        for j in range(1, len(b) + 1):
            temp = column[j]
            cost = 0 if a[i - 1] == b[j - 1] else 1
            column[j] = min(
                column[j] + 1,          # deletion
                column[j - 1] + 1,      # insertion
                prev_diagonal + cost,   # substitution
            )
            prev_diagonal = temp

    return column[len(b)]
