import pytest
from conftest import MakeGeneral, OwnGeneral, ScriptedRandom
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.enums import Country, EventType
from app.core.errors import NotFoundError, PreconditionError
from app.models import Campaign, EventLog, OwnedEquipment, OwnedGeneral, Player
from app.schemas.battle import WinPath
from app.services.battle import BattleService
from app.services.roster import RosterStore

# No three members share a faction, so no fallback bond kicks in
MIXED_COUNTRIES = (Country.WEI, Country.SHU, Country.WU, Country.QUN, Country.WEI)

NO_PROCS = (0.99,) * 5


@pytest.fixture
async def team(
    player: Player, make_general: MakeGeneral, own_general: OwnGeneral
) -> list[OwnedGeneral]:
    """Five generals of 200 power each, already on the team."""
    members = []
    for index, country in enumerate(MIXED_COUNTRIES):
        general = await make_general(f"将{index}", stats=200, country=country)
        members.append(await own_general(player, general, in_team=True))
    return members


async def make_campaign(db: AsyncSession, *, required_power: int, exp_reward: int = 150) -> Campaign:
    campaign = Campaign(
        name=f"关卡{required_power}-{exp_reward}",
        required_power=required_power,
        gold_reward=300,
        exp_reward=exp_reward,
    )
    db.add(campaign)
    await db.commit()
    return campaign


async def test_exact_power_wins_and_pays_rewards(
    db: AsyncSession, player: Player, team: list[OwnedGeneral], campaign: Campaign
) -> None:
    result = await BattleService(db, ScriptedRandom()).resolve_battle(player.id, campaign.id)

    assert result.win is True
    assert result.win_path == WinPath.POWER
    assert result.final_power == 1000
    assert result.rewards is not None
    assert result.rewards.gold == 300
    assert result.dropped_equipment is None
    assert len(result.level_ups) == 5

    roster = RosterStore(db)
    assert (await roster.read_player(player.id)).gold == 1300
    for member in await roster.read_team(player.id):
        assert (member.level, member.exp) == (2, 50)
    assert await roster.read_campaign_progress(player.id) == {campaign.id: 3}

    events = (await db.exec(select(EventLog))).all()
    assert [event.event_type for event in events] == [EventType.BATTLE_WIN]


async def test_exp_rolls_over_multiple_levels(
    db: AsyncSession, player: Player, team: list[OwnedGeneral]
) -> None:
    campaign = await make_campaign(db, required_power=100, exp_reward=350)
    result = await BattleService(db, ScriptedRandom()).resolve_battle(player.id, campaign.id)

    assert {(up.from_level, up.to_level) for up in result.level_ups} == {(1, 3)}
    for member in await RosterStore(db).read_team(player.id):
        assert (member.level, member.exp) == (3, 50)


async def test_winning_again_keeps_three_stars(
    db: AsyncSession, player: Player, team: list[OwnedGeneral], campaign: Campaign
) -> None:
    service = BattleService(db, ScriptedRandom())
    await service.resolve_battle(player.id, campaign.id)
    await service.resolve_battle(player.id, campaign.id)

    assert await RosterStore(db).read_campaign_progress(player.id) == {campaign.id: 3}
    assert (await RosterStore(db).read_player(player.id)).gold == 1600


async def test_loss_changes_nothing(
    db: AsyncSession, player: Player, team: list[OwnedGeneral]
) -> None:
    campaign = await make_campaign(db, required_power=5000)
    rng = ScriptedRandom(*NO_PROCS, 0.5)

    result = await BattleService(db, rng).resolve_battle(player.id, campaign.id)

    assert result.win is False
    assert result.win_path is None
    assert result.rewards is None
    roster = RosterStore(db)
    assert (await roster.read_player(player.id)).gold == 1000
    for member in await roster.read_team(player.id):
        assert (member.level, member.exp) == (1, 0)
    assert await roster.read_campaign_progress(player.id) == {}
    assert (await db.exec(select(EventLog))).all() == []


async def test_escape_roll_can_win_an_underpowered_battle(
    db: AsyncSession, player: Player, team: list[OwnedGeneral]
) -> None:
    campaign = await make_campaign(db, required_power=5000)
    rng = ScriptedRandom(*NO_PROCS, 0.9)

    result = await BattleService(db, rng).resolve_battle(player.id, campaign.id)

    assert result.win is True
    assert result.win_path == WinPath.FORTUNE
    assert (await RosterStore(db).read_player(player.id)).gold == 1300


async def test_sufficient_power_skips_escape_roll(
    db: AsyncSession, player: Player, team: list[OwnedGeneral], campaign: Campaign
) -> None:
    # The roll after the procs goes straight to the item drop
    rng = ScriptedRandom(*NO_PROCS, 0.1)

    result = await BattleService(db, rng).resolve_battle(player.id, campaign.id)

    assert result.win_path == WinPath.POWER
    assert result.dropped_equipment is not None
    assert result.dropped_equipment.name == "铁剑"
    assert result.dropped_equipment.stars <= 3

    dropped = await db.get(OwnedEquipment, result.dropped_equipment.owned_id)
    assert dropped is not None
    assert dropped.player_id == player.id
    assert dropped.owned_general_id is None


async def test_skill_proc_shows_in_log(
    db: AsyncSession,
    player: Player,
    make_general: MakeGeneral,
    own_general: OwnGeneral,
    campaign: Campaign,
) -> None:
    general = await make_general("张任", stats=200, luck=50, skill_name="落凤")
    await own_general(player, general, in_team=True)

    result = await BattleService(db, ScriptedRandom(0.1)).resolve_battle(player.id, campaign.id)

    assert result.raw_power == 280
    assert result.battle_log == ["张任 发动了 【落凤】! 战力激增!"]


async def test_empty_team_is_rejected(db: AsyncSession, player: Player, campaign: Campaign) -> None:
    with pytest.raises(PreconditionError):
        await BattleService(db, ScriptedRandom()).resolve_battle(player.id, campaign.id)


async def test_unknown_campaign(db: AsyncSession, player: Player, team: list[OwnedGeneral]) -> None:
    with pytest.raises(NotFoundError):
        await BattleService(db, ScriptedRandom()).resolve_battle(player.id, 999)


async def test_unknown_player(db: AsyncSession, campaign: Campaign) -> None:
    with pytest.raises(NotFoundError):
        await BattleService(db, ScriptedRandom()).resolve_battle(999, campaign.id)
