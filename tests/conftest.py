import random
from typing import TypeVar
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import locks
from app.core.db import create_db_and_tables
from app.core.enums import Country, EquipmentType
from app.models import Campaign, Equipment, General, OwnedEquipment, OwnedGeneral, Player
from app.schemas.roster import EquipmentSnapshot, GeneralSnapshot

T = TypeVar("T")

# name, stars, strength, intellect, leadership, luck, country, skill
CATALOG_GENERALS = (
    ("刘备", 5, 75, 80, 95, 95, Country.SHU, "惟贤惟德"),
    ("关羽", 5, 98, 75, 95, 60, Country.SHU, "武圣显灵"),
    ("张飞", 5, 99, 40, 85, 60, Country.SHU, "当阳怒吼"),
    ("徐晃", 4, 91, 70, 85, 60, Country.WEI, "统军"),
    ("廖化", 3, 78, 65, 75, 90, Country.SHU, "猛击"),
    ("张绣", 3, 80, 60, 75, 50, Country.QUN, "猛击"),
)

# name, type, stat bonus, stars
CATALOG_EQUIPMENTS = (
    ("铁剑", EquipmentType.WEAPON, 10, 2),
    ("青龙偃月刀", EquipmentType.WEAPON, 50, 5),
    ("锁子甲", EquipmentType.ARMOR, 20, 3),
    ("赤兔马", EquipmentType.TREASURE, 40, 5),
)


class ScriptedRandom(random.Random):
    """Random source that replays queued ``random()`` values.

    Once the queue runs dry it keeps returning ``default``, which is high
    enough that no skill procs, no item drops and every draw is a 3-star.
    ``choice`` always picks the first candidate.
    """

    def __init__(self, *values: float, default: float = 0.99) -> None:
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def queue(self, *values: float) -> None:
        self.values.extend(values)

    def random(self) -> float:
        return self.values.pop(0) if self.values else self.default

    def choice(self, seq: Sequence[T]) -> T:
        return seq[0]


@pytest.fixture(autouse=True)
def reset_player_locks() -> None:
    # Locks bind to the event loop that first waits on them
    locks._player_locks.clear()
    locks._lock_users.clear()


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with AsyncSession(
        engine, autocommit=False, autoflush=False, expire_on_commit=False
    ) as session:
        yield session


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
async def catalog(db: AsyncSession) -> dict[str, General]:
    generals = {}
    for name, stars, strength, intellect, leadership, luck, country, skill in CATALOG_GENERALS:
        general = General(
            name=name,
            stars=stars,
            strength=strength,
            intellect=intellect,
            leadership=leadership,
            luck=luck,
            country=country,
            skill_name=skill,
        )
        db.add(general)
        generals[name] = general
    for name, equipment_type, stat_bonus, stars in CATALOG_EQUIPMENTS:
        db.add(Equipment(name=name, type=equipment_type, stat_bonus=stat_bonus, stars=stars))
    await db.commit()
    return generals


@pytest.fixture
async def equipments(db: AsyncSession, catalog: dict[str, General]) -> dict[str, Equipment]:
    result = await db.exec(select(Equipment))
    return {equipment.name: equipment for equipment in result.all()}


@pytest.fixture
async def player(db: AsyncSession, catalog: dict[str, General]) -> Player:
    player = Player(name="玩家一", gold=1000, tokens=100)
    db.add(player)
    await db.commit()
    return player


@pytest.fixture
async def campaign(db: AsyncSession) -> Campaign:
    campaign = Campaign(name="虎牢关之战", required_power=1000, gold_reward=300, exp_reward=150)
    db.add(campaign)
    await db.commit()
    return campaign


MakeGeneral = Callable[..., Awaitable[General]]
OwnGeneral = Callable[..., Awaitable[OwnedGeneral]]
OwnEquipment = Callable[..., Awaitable[OwnedEquipment]]


@pytest.fixture
def make_general(db: AsyncSession) -> MakeGeneral:
    """Add a catalog general whose three stats sum to ``stats``."""

    async def factory(
        name: str,
        *,
        stats: int = 200,
        luck: int = 0,
        country: Country = Country.QUN,
        stars: int = 3,
        skill_name: str | None = None,
    ) -> General:
        strength = stats // 3
        intellect = stats // 3
        general = General(
            name=name,
            stars=stars,
            strength=strength,
            intellect=intellect,
            leadership=stats - strength - intellect,
            luck=luck,
            country=country,
            skill_name=skill_name,
        )
        db.add(general)
        await db.commit()
        return general

    return factory


@pytest.fixture
def own_general(db: AsyncSession) -> OwnGeneral:
    async def factory(
        player: Player,
        general: General,
        *,
        level: int = 1,
        exp: int = 0,
        evolution: int = 0,
        in_team: bool = False,
    ) -> OwnedGeneral:
        owned = OwnedGeneral(
            player_id=player.id,
            general_id=general.id,
            level=level,
            exp=exp,
            evolution=evolution,
            is_in_team=in_team,
        )
        db.add(owned)
        await db.commit()
        return owned

    return factory


@pytest.fixture
def own_equipment(db: AsyncSession) -> OwnEquipment:
    async def factory(
        player: Player, equipment: Equipment, holder: OwnedGeneral | None = None
    ) -> OwnedEquipment:
        owned = OwnedEquipment(
            player_id=player.id,
            equipment_id=equipment.id,
            owned_general_id=holder.id if holder else None,
        )
        db.add(owned)
        await db.commit()
        return owned

    return factory


def snapshot(
    name: str,
    *,
    stats: tuple[int, int, int] = (60, 70, 70),
    country: Country = Country.QUN,
    luck: int = 0,
    level: int = 1,
    evolution: int = 0,
    bonuses: tuple[int, ...] = (),
    skill_name: str | None = None,
    owned_id: int = 1,
    general_id: int = 1,
) -> GeneralSnapshot:
    """An owned general as the game formulas see it, without touching the database."""
    strength, intellect, leadership = stats
    return GeneralSnapshot(
        owned_id=owned_id,
        general_id=general_id,
        name=name,
        country=country,
        stars=3,
        strength=strength,
        intellect=intellect,
        leadership=leadership,
        luck=luck,
        level=level,
        evolution=evolution,
        skill_name=skill_name,
        equipments=[
            EquipmentSnapshot(
                owned_id=index,
                equipment_id=index,
                name=f"装备{index}",
                type=EquipmentType.WEAPON,
                stat_bonus=bonus,
                stars=3,
                owned_general_id=owned_id,
            )
            for index, bonus in enumerate(bonuses, start=1)
        ],
    )


def team_of(*names: str, country: Country = Country.QUN) -> list[GeneralSnapshot]:
    return [
        snapshot(name, country=country, owned_id=index, general_id=index)
        for index, name in enumerate(names, start=1)
    ]
