"""Z-function of a string."""

from __future__ import annotations

from collections.abc import Sequence


def z_function(text: Sequence) -> list[int]:
    """Return ``z`` where ``z[i]`` is the longest common prefix of ``text`` and ``text[i:]``.

    ``z[0]`` is left at 0.
    """
    n = len(text)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i > right:
            left = right = i
            while right < n and text[right - left] == text[right]:
                right += 1
            z[i] = right - left
            right -= 1
        else:
            k = i - left
            if z[k] < right - i + 1:
                z[i] = z[k]
            else:
                left = i
                while right < n and text[right - left] == text[right]:
                    right += 1
                z[i] = right - left
                right -= 1
    return z