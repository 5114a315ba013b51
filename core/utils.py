from __future__ import annotations

from typing import Iterable


def unique(seq: Iterable[str]) -> list[str]:
    seen = set()
    out: list[str] = []
    for item in seq:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out
