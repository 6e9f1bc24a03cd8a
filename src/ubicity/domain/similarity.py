"""Set similarity over domain tags."""

from __future__ import annotations

from collections.abc import Iterable


def jaccard_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """Return ``|A ∩ B| / |A ∪ B|`` over the de-duplicated inputs.

    Matching is exact and case-sensitive.  Two empty inputs score ``0.0``.

    Examples:
        >>> jaccard_similarity(["a", "b"], ["b", "c"])
        0.3333333333333333
        >>> jaccard_similarity([], [])
        0.0
    """
    set_a = set(a)
    set_b = set(b)
    union = len(set_a | set_b)
    if union == 0:
        return 0.0
    return len(set_a & set_b) / union
