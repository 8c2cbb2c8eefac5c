from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from app.core.enums import Country
from app.schemas.roster import GeneralSnapshot
from app.schemas.team import ActiveBond, BondEvaluation

FACTION_BOND_SIZE = 3
FACTION_BOND_BONUS = 0.10


@dataclass(frozen=True)
class BondTier:
    required: int
    """Members of the bond that must be on the team"""
    bonus: float


@dataclass(frozen=True)
class Bond:
    """A formation synergy.

    Tiers are ordered from the strongest requirement to the weakest; only the
    first satisfied tier counts, so a full formation never also collects its
    partial bonus.
    """

    name: str
    description: str
    members: tuple[str, ...] = ()
    tiers: tuple[BondTier, ...] = ()
    country: Country | None = None

    def matched(self, names: set[str], countries: Counter[Country]) -> int:
        if self.country is not None:
            return countries[self.country]
        return len(names.intersection(self.members))

    def satisfied_tier(self, names: set[str], countries: Counter[Country]) -> BondTier | None:
        matched = self.matched(names, countries)
        return next((tier for tier in self.tiers if matched >= tier.required), None)


def _members(names: str) -> tuple[str, ...]:
    return tuple(names.split("/"))


def _full(name: str, description: str, members: str, bonus: float = 0.0) -> Bond:
    """Bond that needs every listed general on the team."""
    roster = _members(members)
    return Bond(name, description, roster, (BondTier(len(roster), bonus),))


def _tiered(name: str, description: str, members: str, *tiers: tuple[int, float]) -> Bond:
    ordered = sorted(tiers, reverse=True)
    return Bond(name, description, _members(members), tuple(BondTier(*tier) for tier in ordered))


def _faction(name: str, description: str, country: Country) -> Bond:
    return Bond(
        name, description, country=country, tiers=(BondTier(FACTION_BOND_SIZE, FACTION_BOND_BONUS),)
    )


BONDS: tuple[Bond, ...] = (
    # Wei
    _tiered(
        "曹魏奠基",
        "曹操/夏侯惇/夏侯渊/曹仁/曹洪 (≥3人)",
        "曹操/夏侯惇/夏侯渊/曹仁/曹洪",
        (5, 0.20),
        (3, 0.12),
    ),
    _tiered(
        "五子良将",
        "张辽/张郃/徐晃/于禁/乐进 (≥3人)",
        "张辽/张郃/徐晃/于禁/乐进",
        (5, 0.25),
        (3, 0.18),
    ),
    _full("虎卫双雄", "典韦+许褚", "典韦/许褚"),
    _tiered(
        "司马之心",
        "司马懿/司马师/司马昭/邓艾/钟会 (≥3人)",
        "司马懿/司马师/司马昭/邓艾/钟会",
        (3, 0.0),
    ),
    # Shu
    _full("桃园结义", "刘备+关羽+张飞", "刘备/关羽/张飞", 0.25),
    _tiered(
        "五虎上将",
        "关羽/张飞/赵云/马超/黄忠 (≥3人)",
        "关羽/张飞/赵云/马超/黄忠",
        (5, 0.30),
        (3, 0.18),
    ),
    _full("卧龙凤雏", "诸葛亮+庞统", "诸葛亮/庞统"),
    _tiered("北伐支柱", "诸葛亮/姜维/魏延/王平 (≥3人)", "诸葛亮/姜维/魏延/王平", (3, 0.0)),
    # Wu
    _full("江东双璧", "孙策+周瑜", "孙策/周瑜"),
    _full("东吴四英", "周瑜/鲁肃/吕蒙/陆逊 (4人)", "周瑜/鲁肃/吕蒙/陆逊", 0.40),
    _tiered(
        "江表虎臣",
        "程普/黄盖/甘宁/周泰... (≥4人)",
        "程普/黄盖/韩当/周泰/蒋钦/陈武/董袭/甘宁/凌统/徐盛/潘璋/丁奉",
        (4, 0.0),
    ),
    _tiered("孙氏宗亲", "孙坚/孙策/孙权... (≥3人)", "孙坚/孙策/孙权/孙桓/孙韶", (3, 0.0)),
    # Qun
    _tiered(
        "乱世开端",
        "董卓/吕布/华雄/李傕/郭汜 (≥3人)",
        "董卓/吕布/华雄/李傕/郭汜",
        (5, 0.25),
        (3, 0.0),
    ),
    _full("河北庭柱", "颜良/文丑/张郃/高览 (4人)", "颜良/文丑/张郃/高览"),
    _full("白马义从", "公孙瓒+赵云", "公孙瓒/赵云"),
    _full("汉室余晖", "卢植/皇甫嵩/朱儁 (3人)", "卢植/皇甫嵩/朱儁"),
    # Cross-faction
    _full("君臣相知", "刘备+诸葛亮", "刘备/诸葛亮"),
    _full("宿命之敌", "关羽+庞德", "关羽/庞德"),
    _full("忠义两全", "关羽+张辽", "关羽/张辽"),
    _tiered(
        "武之极境",
        "吕布/关羽/典韦... (≥3人)",
        "吕布/关羽/张飞/赵云/马超/典韦/许褚",
        (3, 0.0),
    ),
)

# Only considered when nothing in BONDS raised the multiplier, first match wins.
FACTION_BONDS: tuple[Bond, ...] = (
    _faction("魏国精锐", "魏国 ≥ 3人", Country.WEI),
    _faction("蜀汉英杰", "蜀国 ≥ 3人", Country.SHU),
    _faction("江东虎臣", "吴国 ≥ 3人", Country.WU),
    _faction("群雄割据", "群雄 ≥ 3人", Country.QUN),
)


@dataclass
class _Tally:
    multiplier: float = 1.0
    active: list[ActiveBond] = field(default_factory=list)

    def add(self, bond: Bond, tier: BondTier) -> None:
        self.multiplier += tier.bonus
        self.active.append(
            ActiveBond(name=bond.name, description=bond.description, bonus=tier.bonus)
        )


def evaluate(
    team: Sequence[GeneralSnapshot],
    bonds: Iterable[Bond] = BONDS,
    faction_bonds: Iterable[Bond] = FACTION_BONDS,
) -> BondEvaluation:
    """Collect every satisfied bond of a team and the resulting power multiplier.

    Bonuses add onto 1.0. The faction fallback only applies to a team that no
    other bond has boosted, and at most one faction can trigger it.
    """
    names = {member.name for member in team}
    countries = Counter(member.country for member in team)

    tally = _Tally()
    for bond in bonds:
        tier = bond.satisfied_tier(names, countries)
        if tier is not None:
            tally.add(bond, tier)

    if tally.multiplier == 1.0:
        for bond in faction_bonds:
            tier = bond.satisfied_tier(names, countries)
            if tier is not None:
                tally.add(bond, tier)
                break

    # Bonuses are whole percents, keep 1.0 + 0.12 + 0.18 at exactly 1.3
    return BondEvaluation(active_bonds=tally.active, multiplier=round(tally.multiplier, 2))


def bonds_of(general_name: str, country: Country) -> list[Bond]:
    """Bonds a single general can take part in, for display."""
    return [
        bond
        for bond in (*BONDS, *FACTION_BONDS)
        if general_name in bond.members or bond.country == country
    ]
