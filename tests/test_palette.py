from __future__ import annotations

import random

import pytest

from dulp.core.palette import COLOR_PALETTE, select_colors


@pytest.mark.parametrize("count", [1, 2, 5, len(COLOR_PALETTE)])
def test_select_colors_returns_unique_palette_colors(count: int) -> None:
    colors = select_colors(COLOR_PALETTE, count, random.Random(count))

    assert len(colors) == count
    assert len(set(colors)) == count
    assert set(colors) <= set(COLOR_PALETTE)


def test_select_colors_does_not_mutate_palette() -> None:
    palette = list(COLOR_PALETTE)
    select_colors(palette, 6, random.Random(3))
    assert palette == list(COLOR_PALETTE)


@pytest.mark.parametrize("count", [0, -1, len(COLOR_PALETTE) + 1])
def test_select_colors_rejects_out_of_range_count(count: int) -> None:
    with pytest.raises(ValueError):
        select_colors(COLOR_PALETTE, count)


def test_select_colors_varies_between_calls() -> None:
    rng = random.Random(7)
    orders = {select_colors(COLOR_PALETTE, 4, rng) for _ in range(200)}
    assert len(orders) > 1


def test_select_colors_is_reproducible_with_a_seed() -> None:
    assert select_colors(COLOR_PALETTE, 5, random.Random(42)) == select_colors(COLOR_PALETTE, 5, random.Random(42))


def test_every_color_can_be_picked() -> None:
    rng = random.Random(11)
    seen = {select_colors(COLOR_PALETTE, 1, rng)[0] for _ in range(2000)}
    assert seen == set(COLOR_PALETTE)
