import pytest
from conftest import ScriptedRandom
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.enums import EventType, StarTier
from app.core.errors import InsufficientResourceError, NotFoundError
from app.models import EventLog, GachaPull, General, OwnedGeneral, Player
from app.services.gacha import GachaService
from app.services.roster import RosterStore


async def owned_generals(db: AsyncSession, player_id: int) -> list[OwnedGeneral]:
    result = await db.exec(select(OwnedGeneral).where(OwnedGeneral.player_id == player_id))
    return list(result.all())


async def test_single_draw_charges_one_token(db: AsyncSession, player: Player) -> None:
    service = GachaService(db, ScriptedRandom())
    response = await service.draw_single(player.id)

    [draw] = response.draws
    assert draw.stars == StarTier.THREE
    assert draw.general_name == "廖化"
    assert draw.was_duplicate is False
    assert draw.owned_general_id is not None
    assert response.remaining_tokens == 99
    assert response.current_pity == 1

    stored = await RosterStore(db).read_player(player.id)
    assert stored.tokens == 99
    assert stored.pity_counter == 1
    assert len(await owned_generals(db, player.id)) == 1


async def test_duplicate_draw_becomes_shards(db: AsyncSession, player: Player) -> None:
    service = GachaService(db, ScriptedRandom(0.0, 0.0))
    first = (await service.draw_single(player.id)).draws[0]
    second = (await service.draw_single(player.id)).draws[0]

    assert first.general_name == second.general_name == "刘备"
    assert first.was_duplicate is False
    assert second.was_duplicate is True
    assert second.owned_general_id is None
    assert second.shard_count == 10

    assert len(await owned_generals(db, player.id)) == 1
    assert await RosterStore(db).read_shard(player.id, second.general_id) == 10


async def test_pity_guarantees_five_star(db: AsyncSession, player: Player) -> None:
    await RosterStore(db).write_pity_counter(player.id, 59)
    await db.commit()

    response = await GachaService(db, ScriptedRandom()).draw_single(player.id)

    assert response.draws[0].stars == StarTier.FIVE
    assert response.draws[0].was_pity is True
    assert response.current_pity == 0


async def test_ten_draw_threads_pity_between_draws(db: AsyncSession, player: Player) -> None:
    await RosterStore(db).write_pity_counter(player.id, 55)
    await db.commit()

    response = await GachaService(db, ScriptedRandom()).draw_ten(player.id)

    stars = [draw.stars for draw in response.draws]
    assert stars == [3, 3, 3, 3, 5, 3, 3, 3, 3, 3]
    assert response.draws[4].was_pity is True
    assert response.current_pity == 5
    assert response.remaining_tokens == 90

    pulls = (await db.exec(select(GachaPull).where(GachaPull.player_id == player.id))).all()
    assert len(pulls) == 10
    events = (await db.exec(select(EventLog).where(EventLog.player_id == player.id))).all()
    assert [event.event_type for event in events] == [EventType.GACHA_PULL]


async def test_ten_draw_duplicates_accumulate_shards(db: AsyncSession, player: Player) -> None:
    response = await GachaService(db, ScriptedRandom()).draw_ten(player.id)

    assert [draw.was_duplicate for draw in response.draws] == [False] + [True] * 9
    assert response.draws[-1].shard_count == 90
    assert len(await owned_generals(db, player.id)) == 1


async def test_ten_draw_without_enough_tokens_changes_nothing(
    db: AsyncSession, player: Player
) -> None:
    player_id = player.id
    roster = RosterStore(db)
    await roster.write_player_currency(player_id, 1000, 5)
    await roster.write_pity_counter(player_id, 20)
    await db.commit()

    with pytest.raises(InsufficientResourceError) as exc_info:
        await GachaService(db, ScriptedRandom()).draw_ten(player_id)

    assert exc_info.value.owned == 5
    assert exc_info.value.required == 10
    stored = await roster.read_player(player_id)
    assert stored.tokens == 5
    assert stored.pity_counter == 20
    assert await owned_generals(db, player_id) == []
    assert (await db.exec(select(GachaPull))).all() == []


async def test_draw_for_unknown_player(db: AsyncSession, catalog: dict[str, General]) -> None:
    with pytest.raises(NotFoundError):
        await GachaService(db, ScriptedRandom()).draw_single(404)


async def test_get_pity(db: AsyncSession, player: Player) -> None:
    service = GachaService(db, ScriptedRandom())
    await service.draw_single(player.id)

    pity = await service.get_pity(player.id)
    assert pity.current_pity == 1
    assert pity.max_pity == 60
