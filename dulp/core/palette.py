from __future__ import annotations

import random
from collections.abc import Sequence

COLOR_PALETTE: tuple[str, ...] = (
    "#f44336",
    "#FF4081",
    "#9C27B0",
    "#3F51B5",
    "#42A5F5",
    "#18FFFF",
    "#76FF03",
    "#EEFF41",
    "#FFCA28",
    "#FF5722",
    "#424242",
    "#795548",
    "#CFD8DC",
)


def select_colors(palette: Sequence[str], count: int, rng: random.Random | None = None) -> tuple[str, ...]:
    """Pick `count` distinct colors from `palette` in random order.

    Partial Fisher-Yates: only the trailing `count` positions of a working copy are
    shuffled, then returned. Each ordered subset is equally likely.
    """

    if count < 1 or count > len(palette):
        raise ValueError(f"count must be between 1 and {len(palette)}, got {count}")

    rnd = rng or random
    colors = list(palette)
    stop = len(colors) - count
    for i in range(len(colors) - 1, stop - 1, -1):
        j = rnd.randint(0, i)
        colors[i], colors[j] = colors[j], colors[i]
    return tuple(colors[stop:])
