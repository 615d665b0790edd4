import pytest
from eth_abi import encode
from eth_utils import encode_hex

from fortune_indexer.domain.events import (
    POOL_DEPOSITED,
    POOL_WITHDRAWN,
    REWARD_PAID,
    TICKET_EVENTS,
    TICKET_MINTED,
    TICKET_OPENING_INITIATED,
    TICKET_RESOLVED,
    EventDecoder,
    Matched,
    MintedLevel,
    RawLog,
    Unmatched,
    decode_log,
    get_event,
)

from .stream import (
    ALICE,
    BOB,
    ERC721_ADDRESS,
    address_topic,
    minted_log,
    opening_log,
    pool_log,
    resolved_log,
    reward_log,
    topic,
    uint_topic,
)


def _raw(entry: dict) -> RawLog:
    return RawLog.from_slots(
        address=entry["address"],
        data=entry["data"],
        topic0=entry["topic0"],
        topic1=entry["topic1"],
        topic2=entry["topic2"],
        topic3=entry["topic3"],
    )


def test_catalog_priority_order():
    assert EventDecoder().event_names == [
        TICKET_MINTED,
        TICKET_OPENING_INITIATED,
        TICKET_RESOLVED,
        REWARD_PAID,
        POOL_DEPOSITED,
        POOL_WITHDRAWN,
    ]


def test_event_signatures():
    assert get_event(TICKET_MINTED).signature == "TicketMinted(address,uint256,bool,(uint256,uint256,uint256)[])"
    assert get_event(TICKET_OPENING_INITIATED).signature == "TicketOpeningInitiated(uint256,address)"
    assert get_event(REWARD_PAID).signature == "RewardPaid(address,uint256,uint256)"


def test_raw_log_drops_empty_topic_slots():
    log = RawLog.from_slots(address=ERC721_ADDRESS, data=None, topic0="0x01", topic1=None, topic2="0x02")
    assert log.topics == ("0x01", "0x02")
    assert log.data == "0x"


def test_decode_ticket_minted():
    levels = [(1, 50, 10**18), (2, 25, 3 * 10**18)]
    result = decode_log(_raw(minted_log(42, levels, to=BOB)))

    assert isinstance(result, Matched)
    assert result.event_name == TICKET_MINTED
    assert result.args["tokenId"] == 42
    assert result.args["to"] == BOB
    assert result.args["isETHVersion"] is True
    assert result.args["levels"] == [
        MintedLevel(roll_number=1, win_percentage=50, win_amount=10**18),
        MintedLevel(roll_number=2, win_percentage=25, win_amount=3 * 10**18),
    ]


def test_decode_ticket_minted_without_levels():
    result = decode_log(_raw(minted_log(1, [])))
    assert isinstance(result, Matched)
    assert result.args["levels"] == []


def test_decode_opening_initiated_has_empty_data():
    result = decode_log(_raw(opening_log(7, opener=ALICE)))

    assert isinstance(result, Matched)
    assert result.event_name == TICKET_OPENING_INITIATED
    assert result.args == {"tokenId": 7, "opener": ALICE}


def test_decode_ticket_resolved():
    result = decode_log(_raw(resolved_log(7, roll_result=3, win_amount=5 * 10**17)))

    assert isinstance(result, Matched)
    assert result.event_name == TICKET_RESOLVED
    assert result.args == {"tokenId": 7, "rollResult": 3, "winAmount": 5 * 10**17}


def test_decode_reward_paid():
    result = decode_log(_raw(reward_log(9, amount=123, winner=BOB)))

    assert isinstance(result, Matched)
    assert result.event_name == REWARD_PAID
    assert result.args == {"winner": BOB, "tokenId": 9, "amount": 123}


@pytest.mark.parametrize("name", [POOL_DEPOSITED, POOL_WITHDRAWN])
def test_decode_pool_events(name):
    result = decode_log(_raw(pool_log(1000, name=name)))

    assert isinstance(result, Matched)
    assert result.event_name == name
    assert result.args["amount"] == 1000


def test_unknown_signature_is_unmatched():
    transfer_topic = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
    entry = minted_log(1, [])
    entry["topic0"] = transfer_topic

    assert isinstance(decode_log(_raw(entry)), Unmatched)


def test_log_without_topics_is_unmatched():
    result = decode_log(RawLog(address=ERC721_ADDRESS, data="0x", topics=()))
    assert isinstance(result, Unmatched)


def test_wrong_topic_count_is_unmatched():
    entry = resolved_log(7, 1, 1)
    entry["topic2"] = uint_topic(8)

    assert isinstance(decode_log(_raw(entry)), Unmatched)


def test_truncated_data_is_unmatched_not_raised():
    entry = resolved_log(7, 1, 1)
    entry["data"] = entry["data"][:40]

    assert isinstance(decode_log(_raw(entry)), Unmatched)


def test_invalid_hex_is_unmatched_not_raised():
    entry = reward_log(7, 1)
    entry["data"] = "0xnothex"

    assert isinstance(decode_log(_raw(entry)), Unmatched)


def test_minted_never_classified_as_later_event():
    # a later-priority shape listed first must still not claim a TicketMinted log
    decoder = EventDecoder(reversed(TICKET_EVENTS))
    result = decoder.decode(_raw(minted_log(5, [(1, 1, 1)])))

    assert isinstance(result, Matched)
    assert result.event_name == TICKET_MINTED


def test_layout_mismatch_under_known_signature_falls_through():
    # right signature and topics, but the data blob stops before the levels array
    data = encode_hex(encode(["uint256"], [1]))
    log = RawLog.from_slots(
        address=ERC721_ADDRESS,
        data=data,
        topic0=topic(TICKET_MINTED),
        topic1=address_topic(ALICE),
        topic2=uint_topic(1),
    )
    assert isinstance(decode_log(log), Unmatched)
