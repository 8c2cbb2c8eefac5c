from pydantic import BaseModel


class CampaignView(BaseModel):
    id: int
    name: str
    required_power: int
    gold_reward: int
    exp_reward: int
    passed: bool
    stars: int
