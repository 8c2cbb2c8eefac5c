import pytest
from conftest import MakeGeneral, OwnGeneral
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.enums import TeamAction
from app.core.errors import NotFoundError, PreconditionError
from app.models import General, Player
from app.services.roster import RosterStore
from app.services.team import MAX_TEAM_SIZE, TeamService


async def test_team_is_capped_at_five(
    db: AsyncSession, player: Player, make_general: MakeGeneral, own_general: OwnGeneral
) -> None:
    player_id = player.id
    service = TeamService(db)
    owned = [
        await own_general(player, await make_general(f"将{index}"))
        for index in range(MAX_TEAM_SIZE + 1)
    ]

    for size, member in enumerate(owned[:MAX_TEAM_SIZE], start=1):
        response = await service.add_to_team(player_id, member.id)
        assert response.action == TeamAction.ADD
        assert response.team_size == size

    last_id = owned[-1].id
    with pytest.raises(PreconditionError):
        await service.add_to_team(player_id, last_id)
    assert len(await RosterStore(db).read_team(player_id)) == MAX_TEAM_SIZE


async def test_same_catalog_general_only_once(
    db: AsyncSession, player: Player, catalog: dict[str, General], own_general: OwnGeneral
) -> None:
    first = await own_general(player, catalog["刘备"])
    second = await own_general(player, catalog["刘备"])
    player_id, first_id, second_id = player.id, first.id, second.id
    service = TeamService(db)
    await service.add_to_team(player_id, first_id)

    with pytest.raises(PreconditionError):
        await service.add_to_team(player_id, second_id)
    with pytest.raises(PreconditionError):
        await service.add_to_team(player_id, first_id)


async def test_cannot_field_another_players_general(
    db: AsyncSession, player: Player, catalog: dict[str, General], own_general: OwnGeneral
) -> None:
    other = Player(name="玩家二")
    db.add(other)
    await db.commit()
    owned = await own_general(other, catalog["关羽"])

    with pytest.raises(NotFoundError):
        await TeamService(db).add_to_team(player.id, owned.id)


async def test_remove_from_team(
    db: AsyncSession, player: Player, catalog: dict[str, General], own_general: OwnGeneral
) -> None:
    owned = await own_general(player, catalog["关羽"], in_team=True)

    response = await TeamService(db).remove_from_team(player.id, owned.id)

    assert response.action == TeamAction.REMOVE
    assert response.team_size == 0
    assert owned.is_in_team is False


async def test_auto_team_picks_strongest_distinct_generals(
    db: AsyncSession, player: Player, make_general: MakeGeneral, own_general: OwnGeneral
) -> None:
    generals = [await make_general(f"将{stats}", stats=stats) for stats in range(100, 700, 100)]
    owned = [await own_general(player, general) for general in generals]
    weakest, strongest = owned[0], owned[-1]
    duplicate = await own_general(player, generals[-1])
    await RosterStore(db).set_team_flag(weakest.id, in_team=True)
    await db.commit()
    expected = [strongest.id, owned[4].id, owned[3].id, owned[2].id, owned[1].id]
    duplicate_id = duplicate.id

    response = await TeamService(db).auto_team(player.id)

    assert response.team_size == 5
    assert response.owned_general_ids == expected
    team_ids = [member.owned_id for member in await RosterStore(db).read_team(player.id)]
    assert sorted(team_ids) == sorted(expected)
    assert duplicate_id not in team_ids


async def test_auto_team_with_few_generals(
    db: AsyncSession, player: Player, catalog: dict[str, General], own_general: OwnGeneral
) -> None:
    await own_general(player, catalog["关羽"])
    await own_general(player, catalog["张飞"])

    response = await TeamService(db).auto_team(player.id)
    assert response.team_size == 2


async def test_team_power_applies_bonds(
    db: AsyncSession, player: Player, catalog: dict[str, General], own_general: OwnGeneral
) -> None:
    for name in ("刘备", "关羽", "张飞"):
        await own_general(player, catalog[name], in_team=True)
    service = TeamService(db)

    power = await service.compute_team_power(player.id)

    assert power.members == 3
    assert power.raw_power == 250 + 268 + 224
    assert power.multiplier == 1.25
    assert power.final_power == 927
    assert [bond.name for bond in power.active_bonds] == ["桃园结义"]

    evaluation = await service.evaluate_bonds(player.id)
    assert evaluation.multiplier == 1.25


async def test_empty_team_power(db: AsyncSession, player: Player) -> None:
    power = await TeamService(db).compute_team_power(player.id)
    assert (power.members, power.raw_power, power.final_power) == (0, 0, 0)
