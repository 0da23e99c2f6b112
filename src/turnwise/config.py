from pydantic_settings import BaseSettings, SettingsConfigDict


class TurnwiseConfig(BaseSettings):
    """Configuration for turnwise.

    Settings can be provided via environment variables with TURNWISE_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="TURNWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Whether the backend consumes the reasoning side channel at all.
    # When False, traces are stripped from every request.
    reasoning_side_channel: bool = True

    # Wire key carrying the reasoning trace on assistant messages
    reasoning_field: str = "reasoning_content"
