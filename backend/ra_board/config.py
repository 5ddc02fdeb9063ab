from pydantic import Field
from pydantic_settings import BaseSettings

from ra_board.models.application import STATEMENT_MAX_CHARS


class Settings(BaseSettings):
    api_prefix: str = "/api/v1"
    # May tighten the statement bound, never loosen it past the model's limit.
    statement_max_chars: int = Field(STATEMENT_MAX_CHARS, gt=0, le=STATEMENT_MAX_CHARS)
    # Lets a professor move a REJECTED application back into review.
    # ACCEPTED stays terminal either way.
    allow_reopen: bool = False
    seed_demo_data: bool = True
    log_level: str = "INFO"

    model_config = {"env_prefix": "RA_BOARD_"}


settings = Settings()
