"""
Domain models and value objects.

Contains ledger entities built on top of Dec: Coin, Event, Operation and
module account addresses.
"""

from src.core.domain.accounts import (
    BONDED_POOL,
    DISTRIBUTOR,
    FEE_COLLECTOR,
    NOT_BONDED_POOL,
    STAKING_ACCOUNT,
    module_address,
)
from src.core.domain.coin import DENOM_PATTERN, Coin, parse_coin, parse_coins
from src.core.domain.operation import (
    ATTRIBUTE_KEY_AMOUNT,
    ATTRIBUTE_KEY_FEE,
    ATTRIBUTE_KEY_FEE_PAYER,
    ATTRIBUTE_KEY_RECEIVER,
    ATTRIBUTE_KEY_SPENDER,
    EVENT_TYPE_COIN_RECEIVED,
    EVENT_TYPE_COIN_SPENT,
    EVENT_TYPE_TX,
    FEE_PAYER_OPERATION,
    FEE_RECEIVER_OPERATION,
    STATUS_TX_REVERTED,
    STATUS_TX_SUCCESS,
    Attribute,
    Event,
    Operation,
    OperationStatus,
)

__all__ = [
    # Accounts
    "BONDED_POOL",
    "DISTRIBUTOR",
    "FEE_COLLECTOR",
    "NOT_BONDED_POOL",
    "STAKING_ACCOUNT",
    "module_address",
    # Coin
    "DENOM_PATTERN",
    "Coin",
    "parse_coin",
    "parse_coins",
    # Events
    "ATTRIBUTE_KEY_AMOUNT",
    "ATTRIBUTE_KEY_FEE",
    "ATTRIBUTE_KEY_FEE_PAYER",
    "ATTRIBUTE_KEY_RECEIVER",
    "ATTRIBUTE_KEY_SPENDER",
    "EVENT_TYPE_COIN_RECEIVED",
    "EVENT_TYPE_COIN_SPENT",
    "EVENT_TYPE_TX",
    "Attribute",
    "Event",
    # Operations
    "FEE_PAYER_OPERATION",
    "FEE_RECEIVER_OPERATION",
    "STATUS_TX_REVERTED",
    "STATUS_TX_SUCCESS",
    "Operation",
    "OperationStatus",
]
