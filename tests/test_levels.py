from __future__ import annotations

from pathlib import Path

import pytest

from dulp.core.errors import LevelLoadError, UnknownLevel
from dulp.core.levels import Level, LevelCatalog, default_catalog, load_level_catalog
from dulp.core.palette import COLOR_PALETTE

HEADER = "number,color_slots,rotation_speed,projectile_speed,projectile_distance\n"


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "levels.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_default_catalog_loads_and_is_consistent() -> None:
    catalog = default_catalog()

    assert catalog.numbers[0] == 1
    assert catalog.numbers == tuple(range(1, catalog.last_level + 1))
    for number in catalog.numbers:
        level = catalog.level_config(number)
        assert sum(level.color_slots) == 360
        assert 1 <= level.sector_count <= len(COLOR_PALETTE)


def test_unknown_level_raises() -> None:
    catalog = default_catalog()
    with pytest.raises(UnknownLevel) as exc:
        catalog.level_config(999)
    assert exc.value.level_number == 999
    assert isinstance(exc.value, LookupError)


def test_catalog_membership(catalog: LevelCatalog) -> None:
    assert 2 in catalog
    assert 9 not in catalog
    assert "2" not in catalog
    assert len(catalog) == 3
    assert catalog.last_level == 3


def test_load_csv_parses_rows_and_skips_blank_lines(tmp_path: Path) -> None:
    path = _write(tmp_path, "2,90 90 180,-30,300,150\n\n1,360,10,200,100\n")
    catalog = load_level_catalog(path)

    assert catalog.numbers == (1, 2)
    level = catalog.level_config(2)
    assert level == Level(number=2, color_slots=(90, 90, 180), rotation_speed=-30, projectile_speed=300, projectile_distance=150)
    assert level.sector_count == 3


@pytest.mark.parametrize(
    "body",
    [
        "1,180 90,10,200,100\n",  # arcs do not cover the wheel
        "1,360,10,200,100\n1,360,10,200,100\n",  # duplicate number
        "1,0 360,10,200,100\n",  # empty sector
        "1,360,10,0,100\n",  # marker never moves
        "1,abc,10,200,100\n",  # not a number
        "0,360,10,200,100\n",  # levels start at 1
        "2,360,10,200,100\n3,360,10,200,100\n",  # no first level to start from
        "1," + " ".join(["24"] * 15) + ",10,200,100\n",  # more sectors than colors
        "",  # empty catalog
    ],
)
def test_load_csv_rejects_bad_levels(tmp_path: Path, body: str) -> None:
    with pytest.raises(LevelLoadError):
        load_level_catalog(_write(tmp_path, body))


def test_load_csv_requires_columns(tmp_path: Path) -> None:
    path = tmp_path / "levels.csv"
    path.write_text("number,color_slots\n1,360\n", encoding="utf-8")
    with pytest.raises(LevelLoadError, match="rotation_speed"):
        load_level_catalog(path)


def test_load_csv_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LevelLoadError):
        load_level_catalog(tmp_path / "nope.csv")


def test_catalog_needs_level_one() -> None:
    with pytest.raises(LevelLoadError, match="no level 1"):
        LevelCatalog.from_levels(
            [Level(number=2, color_slots=(360,), rotation_speed=0, projectile_speed=100, projectile_distance=100)]
        )
