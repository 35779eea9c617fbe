from pydantic import BaseModel, Field, field_validator

from rotating_csrf.adapters.env_salts import DEFAULT_SALTS_ENV_KEY
from rotating_csrf.core.services.tokens import TOKEN_LENGTH


class SaltRules(BaseModel):
    env_key: str = Field(default=DEFAULT_SALTS_ENV_KEY, min_length=1)
    require_at_startup: bool = False

class TokenRules(BaseModel):
    length: int = TOKEN_LENGTH

    @field_validator("length")
    @classmethod
    def check_length(cls, v: int) -> int:
        # Stored hashes are only comparable for a single token shape.
        if v != TOKEN_LENGTH:
            raise ValueError(f"token length is fixed at {TOKEN_LENGTH}")
        return v

class LoggingRules(BaseModel):
    log_retired_salt_matches: bool = True

class CsrfRules(BaseModel):
    salts: SaltRules = Field(default_factory=SaltRules)
    tokens: TokenRules = Field(default_factory=TokenRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)

class Rules(BaseModel):
    csrf: CsrfRules = Field(default_factory=CsrfRules)
