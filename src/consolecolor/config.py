"""CLI configuration via environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """consolecolor configuration, loaded from the environment or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CONSOLECOLOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Color even when the stream is not a terminal (pipes into ``less -R``)
    force_colors: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    stream: Literal["stdout", "stderr"] = "stdout"
