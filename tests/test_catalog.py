from conftest import MakeGeneral, OwnGeneral, ScriptedRandom
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.enums import Country
from app.core.seed import CAMPAIGNS, EQUIPMENTS, GENERALS, SKILLS, default_skill, seed_catalog
from app.game.bonds import BONDS, FACTION_BONDS
from app.models import Campaign, Equipment, General, Player
from app.services.battle import BattleService
from app.services.campaign import CampaignService
from app.services.catalog import CatalogService


async def test_gallery_lists_strongest_first(db: AsyncSession, catalog: dict[str, General]) -> None:
    gallery = await CatalogService(db).get_gallery()

    assert [general.stars for general in gallery.generals] == [5, 5, 5, 4, 3, 3]
    assert gallery.equipments[0].stars == 5
    assert len(gallery.equipments) == 4


def test_bond_listing_covers_all_bonds() -> None:
    bonds = CatalogService.get_bonds()

    assert len(bonds) == len(BONDS) + len(FACTION_BONDS)
    oath = next(bond for bond in bonds if bond.name == "桃园结义")
    assert oath.members == ["刘备", "关羽", "张飞"]
    assert oath.bonuses == {3: 0.25}


async def test_bonds_of_catalog_general(db: AsyncSession, catalog: dict[str, General]) -> None:
    bonds = await CatalogService(db).get_general_bonds(catalog["徐晃"].id)
    assert {bond.name for bond in bonds} == {"五子良将", "魏国精锐"}


async def test_campaign_listing_tracks_progress(
    db: AsyncSession, player: Player, make_general: MakeGeneral, own_general: OwnGeneral
) -> None:
    easy = Campaign(name="黄巾之乱", required_power=100, gold_reward=100, exp_reward=50)
    hard = Campaign(name="五丈原", required_power=12000, gold_reward=10000, exp_reward=5000)
    db.add(easy)
    db.add(hard)
    await db.commit()
    await own_general(player, await make_general("张角", stats=200), in_team=True)

    await BattleService(db, ScriptedRandom()).resolve_battle(player.id, easy.id)
    campaigns = await CampaignService(db).get_campaigns(player.id)

    assert [(view.name, view.passed, view.stars) for view in campaigns] == [
        ("黄巾之乱", True, 3),
        ("五丈原", False, 0),
    ]


async def test_seed_catalog_is_idempotent(db: AsyncSession) -> None:
    await seed_catalog(db)
    await seed_catalog(db)

    generals = (await db.exec(select(General))).all()
    assert len(generals) == len(GENERALS)
    assert len((await db.exec(select(Equipment))).all()) == len(EQUIPMENTS)
    assert len((await db.exec(select(Campaign))).all()) == len(CAMPAIGNS)

    by_name = {general.name: general for general in generals}
    assert by_name["关羽"].skill_name == SKILLS["关羽"][0]
    assert by_name["关羽"].country == Country.SHU
    assert all(general.skill_name for general in generals)


def test_default_skill_follows_best_stat() -> None:
    assert default_skill(50, 90, 70)[0] == "奇策"
    assert default_skill(50, 60, 90)[0] == "统军"
    assert default_skill(90, 60, 70)[0] == "猛击"
    assert default_skill(80, 80, 80)[0] == "猛击"
