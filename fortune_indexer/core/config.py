"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3001
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./fortune_tickets.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class ContractSettings(BaseModel):
    """Addresses of the two tracked ticket contracts."""

    erc721_address: str = "0xE64Ea2215CD88a5d3cfe764bCEB2c1e3C60ECfC4"
    erc404_address: str = "0x99A8374c5cf5E45151102F367ada3B47F636951c"
    chains: list[str] = Field(default_factory=lambda: ["eth"])


class MoralisSettings(BaseModel):
    api_key: str = ""
    webhook_url: str = "http://localhost:3001/webhook"
    streams_api_url: str = "https://api.moralis-streams.com"
    description: str = "Fortune Tickets Transfer Events Stream"
    tag: str = "fortune-tickets-transfers"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Fortune Tickets Indexer"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    contracts: ContractSettings = ContractSettings()
    moralis: MoralisSettings = MoralisSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def erc721_address(self) -> str:
        return self.contracts.erc721_address

    @property
    def erc404_address(self) -> str:
        return self.contracts.erc404_address

    @property
    def moralis_api_key(self) -> str:
        return self.moralis.api_key

    @property
    def webhook_url(self) -> str:
        return self.moralis.webhook_url


@lru_cache()
def get_settings() -> Settings:
    return Settings()
