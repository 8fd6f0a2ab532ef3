import os
from typing import Callable, List

import pytest

from codechain.blockchain.transactions import Transaction
from codechain.blockchain.transactions import pay, set_regular_key, create_shard, set_shard_owners, change_asset_scheme
from codechain.blockchain.types import H160, H256, H512, PlatformAddress

# ----- Type Hints
TxFactory = Callable[[str], Transaction]

NETWORK_ID = "tc"


# ----- Global variables
def pytest_configure():
    addresses = [PlatformAddress.from_account_id(H160(os.urandom(H160.size)), NETWORK_ID) for _ in range(10)]

    pytest.ADDRESSES: List[PlatformAddress] = addresses


# ----- Transactions
@pytest.fixture
def tx_factory() -> TxFactory:
    def _tx_factory(type_: str) -> Transaction:
        if type_ == pay.type_name:
            return pay.Transaction(
                network_id=NETWORK_ID,
                receiver=pytest.ADDRESSES[0],
                quantity=10000
            )
        if type_ == set_regular_key.type_name:
            return set_regular_key.Transaction(
                network_id=NETWORK_ID,
                key=H512(os.urandom(H512.size))
            )
        if type_ == create_shard.type_name:
            return create_shard.Transaction(
                network_id=NETWORK_ID,
                users=pytest.ADDRESSES[1:3]
            )
        if type_ == set_shard_owners.type_name:
            return set_shard_owners.Transaction(
                network_id=NETWORK_ID,
                shard_id=1,
                owners=pytest.ADDRESSES[3:5]
            )
        if type_ == change_asset_scheme.type_name:
            return change_asset_scheme.Transaction(
                network_id=NETWORK_ID,
                asset_type=H256(os.urandom(H256.size)),
                metadata="{}",
                approver=None,
                administrator=pytest.ADDRESSES[5],
                approvals=["sig1", "sig2"]
            )

        raise ValueError(f"Unknown type: {type_}")

    return _tx_factory


@pytest.fixture
def asset_type() -> H256:
    return H256(os.urandom(H256.size))
