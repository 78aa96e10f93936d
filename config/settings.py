from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Admin: no default, MUST be set in .env
    ADMIN_API_KEY: str

    # Pool (defaults give a one-week pool starting at process start)
    REWARD_PER_SECOND: float = 1.0
    POOL_START_TIME: int | None = None  # epoch seconds; None = now
    POOL_DURATION: int = 7 * 24 * 3600
    LOCK_DURATION: int = 24 * 3600
    INITIAL_REWARD_TOKENS: float = 0

    # Token symbols shown in logs and ledger responses
    STAKED_TOKEN_SYMBOL: str = "USD"
    REWARD_TOKEN_SYMBOL: str = "ETH"

    # App
    APP_NAME: str = "Staking Pool"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()
