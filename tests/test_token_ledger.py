"""Tests for the token ledger collaborator."""

import pytest
from sqlalchemy.orm import Session

from sponsor_vesting.core.errors import ArithmeticOverflow, InsufficientBalance, InvalidAmount
from sponsor_vesting.core.schedule import MAX_AMOUNT
from sponsor_vesting.services.token_ledger import TokenLedger


@pytest.fixture()
def tokens(db_session: Session) -> TokenLedger:
    return TokenLedger(db_session)


def test_mint_and_burn_track_supply(tokens: TokenLedger) -> None:
    assert tokens.balance_of("alice") == 0
    assert tokens.total_supply() == 0
    assert tokens.mint("alice", 10) == 10
    assert tokens.mint("bob", 5) == 5
    assert tokens.burn("alice", 4) == 6
    assert tokens.total_supply() == 11


def test_burn_beyond_balance_fails(tokens: TokenLedger) -> None:
    tokens.mint("alice", 3)
    with pytest.raises(InsufficientBalance):
        tokens.burn("alice", 4)
    assert tokens.balance_of("alice") == 3
    assert tokens.total_supply() == 3


def test_transfer_moves_units(tokens: TokenLedger) -> None:
    tokens.mint("alice", 10)
    tokens.transfer("alice", "bob", 7)
    assert tokens.balance_of("alice") == 3
    assert tokens.balance_of("bob") == 7
    assert tokens.total_supply() == 10
    with pytest.raises(InsufficientBalance):
        tokens.transfer("alice", "bob", 4)


def test_transfer_to_self_is_a_no_op(tokens: TokenLedger) -> None:
    tokens.mint("alice", 2)
    tokens.transfer("alice", "alice", 2)
    assert tokens.balance_of("alice") == 2


@pytest.mark.parametrize("amount", [0, -1, False])
def test_amounts_must_be_positive(tokens: TokenLedger, amount: int) -> None:
    with pytest.raises(InvalidAmount):
        tokens.mint("alice", amount)
    with pytest.raises(InvalidAmount):
        tokens.burn("alice", amount)


def test_supply_cannot_overflow(tokens: TokenLedger) -> None:
    tokens.mint("alice", MAX_AMOUNT)
    with pytest.raises(ArithmeticOverflow):
        tokens.mint("bob", 1)
