import pytest
from conftest import ScriptedRandom, snapshot, team_of

from app.core.enums import Country
from app.game.battle import (
    DEFAULT_SKILL_NAME,
    compute_battle,
    decide_outcome,
    exp_to_next_level,
    gain_experience,
    proc_chance,
    roll_member_power,
)
from app.schemas.battle import WinPath


def test_proc_chance_grows_with_luck() -> None:
    assert proc_chance(0) == pytest.approx(0.2)
    assert proc_chance(50) == pytest.approx(0.3)
    assert proc_chance(100) == pytest.approx(0.4)


def test_skill_proc_boosts_member_power() -> None:
    log: list[str] = []
    general = snapshot("张绣", luck=50, skill_name="北地枪王")

    assert roll_member_power(general, ScriptedRandom(0.29), log) == 280
    assert log == ["张绣 发动了 【北地枪王】! 战力激增!"]


def test_no_proc_leaves_power_unchanged() -> None:
    log: list[str] = []
    general = snapshot("张绣", luck=50)

    assert roll_member_power(general, ScriptedRandom(0.31), log) == 200
    assert log == []


def test_proc_without_skill_uses_default_name() -> None:
    log: list[str] = []
    roll_member_power(snapshot("无名"), ScriptedRandom(0.0), log)
    assert DEFAULT_SKILL_NAME in log[0]


def test_exact_power_wins_without_escape_roll() -> None:
    rng = ScriptedRandom(0.0)
    assert decide_outcome(1000, 1000, rng) == (True, WinPath.POWER)
    assert rng.values == [0.0]


@pytest.mark.parametrize(
    ("roll", "outcome"),
    [(0.81, (True, WinPath.FORTUNE)), (0.8, (False, None)), (0.1, (False, None))],
)
def test_escape_roll_only_saves_underpowered_team(roll: float, outcome: tuple) -> None:
    assert decide_outcome(999, 1000, ScriptedRandom(roll)) == outcome


def test_compute_battle_applies_bonds_after_procs() -> None:
    team = team_of("刘备", "关羽", "张飞", country=Country.SHU)
    # First member procs, the rest and the escape roll do not matter
    battle = compute_battle(team, 10_000, ScriptedRandom(0.0, 0.99, 0.99, 0.5))

    assert battle.raw_power == 280 + 200 + 200
    assert battle.bonds.multiplier == 1.25
    assert battle.final_power == 850
    assert battle.win is False
    assert battle.win_path is None
    assert len(battle.log) == 1


def test_compute_battle_win_by_power() -> None:
    countries = (Country.WEI, Country.SHU, Country.WU, Country.QUN, Country.WEI)
    team = [
        snapshot(f"将{i}", country=country, owned_id=i, general_id=i)
        for i, country in enumerate(countries)
    ]
    battle = compute_battle(team, 1000, ScriptedRandom())

    assert battle.final_power == 1000
    assert battle.win is True
    assert battle.win_path == WinPath.POWER


def test_exp_threshold_grows_with_level() -> None:
    assert exp_to_next_level(1) == 100
    assert exp_to_next_level(7) == 700


def test_gain_experience_rolls_over_several_levels() -> None:
    assert gain_experience(1, 0, 350) == (3, 50)


def test_gain_experience_without_level_up() -> None:
    assert gain_experience(2, 50, 100) == (2, 150)


def test_gain_experience_exact_threshold() -> None:
    assert gain_experience(1, 40, 60) == (2, 0)
