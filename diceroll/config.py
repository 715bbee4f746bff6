from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICEROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    # Defaults used when the matching command-line option is omitted.
    default_number_of_dice: int = Field(1, ge=0)
    default_number_of_sides: int = Field(6, ge=1)
    default_glyphs: bool = False

    # Upper bound on --number; 0 disables the cap.
    max_number_of_dice: int = Field(10_000, ge=0)

    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


settings = Settings()
