from datetime import datetime, timedelta, timezone

import pytest

from fortune_indexer.core.config import ContractSettings, MoralisSettings, Settings
from fortune_indexer.domain.events import TICKET_MINTED, get_event
from fortune_indexer.integrations.moralis import build_stream_config, chain_id
from fortune_indexer.schemas import isoformat_utc


def test_stream_config_targets_both_contracts():
    settings = Settings(
        _env_file=None,
        moralis=MoralisSettings(webhook_url="https://indexer.example.com/webhook"),
    )

    config = build_stream_config(settings)

    assert config["chainIds"] == ["0x1"]
    assert config["webhookUrl"] == "https://indexer.example.com/webhook"
    assert config["contractAddresses"] == [ContractSettings().erc721_address, ContractSettings().erc404_address]
    assert get_event(TICKET_MINTED).signature in config["topic0"]
    assert len(config["topic0"]) == len(set(config["topic0"]))
    assert {entry["name"] for entry in config["abi"]} >= {"Transfer", "TicketMinted", "RewardPaid"}


def test_chain_id():
    assert chain_id("sepolia") == "0xaa36a7"
    assert chain_id("0x89") == "0x89"
    with pytest.raises(ValueError):
        chain_id("moonbase")


def test_isoformat_utc():
    naive = datetime(2024, 3, 1, 12, 30, 5, 123456)
    assert isoformat_utc(naive) == "2024-03-01T12:30:05.123Z"

    shifted = datetime(2024, 3, 1, 14, 30, 5, tzinfo=timezone(timedelta(hours=2)))
    assert isoformat_utc(shifted) == "2024-03-01T12:30:05.000Z"
