import pytest

from fortune_indexer.domain.holdings import (
    ERC404,
    ERC721,
    HOLDER_ERC404_FUNGIBLE,
    HOLDER_ERC404_NFT,
    HOLDER_ERC721,
    FungibleBalance,
    HoldingService,
    UnknownTokenTypeError,
)

from .stream import ALICE, BOB, CAROL, ZERO


@pytest.fixture
def service(session) -> HoldingService:
    return HoldingService.with_session(session)


async def test_unknown_address_has_zero_balance(service):
    assert await service.get_balance(ALICE) == "0"


async def test_mint_then_transfer_fungible(service):
    await service.apply_fungible_transfer(ZERO, ALICE, 100)
    await service.apply_fungible_transfer(ALICE, BOB, 40)

    assert await service.get_balance(ALICE) == "60"
    assert await service.get_balance(BOB) == "40"
    assert await service.get_balance(ZERO) == "0"


async def test_fungible_inverse_restores_exact_balance(service):
    start = 10**30 + 7
    await service.apply_fungible_transfer(ZERO, ALICE, start)
    amount = 123456789012345678901234567

    await service.apply_fungible_transfer(ALICE, BOB, amount)
    await service.apply_fungible_transfer(BOB, ALICE, amount)

    assert await service.get_balance(ALICE) == str(start)
    assert await service.get_balance(BOB) == "0"


async def test_addresses_are_stored_lowercase(service):
    await service.apply_fungible_transfer(ZERO, ALICE.upper().replace("0X", "0x"), 5)
    assert await service.get_balance(ALICE) == "5"


async def test_negative_balance_is_not_blocked(service):
    await service.apply_fungible_transfer(ALICE, BOB, 3)
    assert await service.get_balance(ALICE) == "-3"
    assert await service.get_balance(BOB) == "3"


async def test_transfer_leaves_single_owner(service):
    await service.apply_token_transfer(ERC721, "1", ZERO, ALICE)
    await service.apply_token_transfer(ERC721, "1", ALICE, BOB)

    holdings_alice = await service.get_holdings(ALICE)
    holdings_bob = await service.get_holdings(BOB)
    assert holdings_alice.erc721_tokens == []
    assert holdings_bob.erc721_tokens == ["1"]
    assert await service.erc721_tokens.get_owner("1") == BOB


async def test_token_classes_are_separate(service):
    await service.apply_token_transfer(ERC721, "1", ZERO, ALICE)
    await service.apply_token_transfer(ERC404, "1", ZERO, BOB)

    assert await service.erc721_tokens.get_owner("1") == ALICE
    assert await service.erc404_nfts.get_owner("1") == BOB


async def test_remint_of_burned_token_replaces_owner(service):
    await service.apply_token_transfer(ERC404, "9", ZERO, ALICE)
    await service.apply_token_transfer(ERC404, "9", ALICE, ZERO)
    await service.apply_token_transfer(ERC404, "9", ZERO, CAROL)

    assert await service.erc404_nfts.get_owner("9") == CAROL


async def test_empty_holdings(service):
    holdings = await service.get_holdings(ALICE)

    assert holdings.fungible == "0"
    assert holdings.erc404_nfts == []
    assert holdings.erc721_tokens == []


async def test_owned_token_ids_across_classes(service):
    await service.apply_token_transfer(ERC721, "1", ZERO, ALICE)
    await service.apply_token_transfer(ERC404, "2", ZERO, ALICE)
    await service.apply_token_transfer(ERC404, "3", ZERO, BOB)

    assert await service.owned_token_ids(ALICE) == ["1", "2"]
    assert await service.owned_token_ids(ALICE, ERC721) == ["1"]


async def test_list_holders(service):
    await service.apply_fungible_transfer(ZERO, ALICE, 10)
    await service.apply_fungible_transfer(ALICE, BOB, 10)
    await service.apply_fungible_transfer(ZERO, CAROL, 1)
    await service.apply_token_transfer(ERC721, "1", ZERO, ALICE)
    await service.apply_token_transfer(ERC721, "2", ZERO, ALICE)
    await service.apply_token_transfer(ERC404, "5", ZERO, CAROL)

    assert await service.list_holders(HOLDER_ERC404_FUNGIBLE) == [
        FungibleBalance(address=BOB, balance="10"),
        FungibleBalance(address=CAROL, balance="1"),
    ]
    assert await service.list_holders(HOLDER_ERC721) == [ALICE]
    assert await service.list_holders(HOLDER_ERC404_NFT) == [CAROL]


async def test_unknown_holder_type(service):
    with pytest.raises(UnknownTokenTypeError):
        await service.list_holders("erc1155")
