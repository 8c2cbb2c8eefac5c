from .campaign import Campaign
from .campaign_progress import CampaignProgress
from .equipment import Equipment
from .event_log import EventLog
from .gacha_pull import GachaPull
from .general import General
from .general_shard import GeneralShard
from .owned_equipment import OwnedEquipment
from .owned_general import OwnedGeneral
from .player import Player

__all__ = (
    "Campaign",
    "CampaignProgress",
    "Equipment",
    "EventLog",
    "GachaPull",
    "General",
    "GeneralShard",
    "OwnedEquipment",
    "OwnedGeneral",
    "Player",
)
