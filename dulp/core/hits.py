from __future__ import annotations

from enum import StrEnum


class HitResult(StrEnum):
    hit = "hit"
    miss = "miss"


def resolve(exposed_color: str | None, projectile_color: str | None) -> HitResult:
    # A gap in the wheel (no exposed sector) is never a match.
    if exposed_color is not None and exposed_color == projectile_color:
        return HitResult.hit
    return HitResult.miss
