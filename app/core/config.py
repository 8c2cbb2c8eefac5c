from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    db_url: str = "sqlite+aiosqlite:///./sanguo.db"
    env: Literal["prod", "dev"] = "prod"

    # Catalog
    seed_catalog: bool = True

    # New players
    starter_general_name: str = "廖化"
    starter_equipment_name: str = "铁剑"
    new_player_gold: int = 1000
    new_player_tokens: int = 10

    # Daily sign-in rewards
    daily_signin_gold: int = 500
    daily_signin_tokens: int = 10

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"


load_dotenv()
settings = Config()
