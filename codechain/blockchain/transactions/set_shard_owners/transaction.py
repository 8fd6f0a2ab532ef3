from dataclasses import dataclass
from typing import Tuple

from codechain.blockchain.exception import InvalidTransactionError
from codechain.blockchain.types import PlatformAddress, TransactionTag
from codechain.blockchain.transactions import Transaction as BaseTransaction
from codechain.blockchain.transactions.encoding import ensure_address

MAX_SHARD_ID = 0xffff


@dataclass(frozen=True)
class Transaction(BaseTransaction):
    shard_id: int
    owners: Tuple[PlatformAddress, ...]

    type_tag = TransactionTag.set_shard_owners
    type_name = "setShardOwners"

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.shard_id, bool) or not isinstance(self.shard_id, int) \
                or not 0 <= self.shard_id <= MAX_SHARD_ID:
            raise InvalidTransactionError(self.type(), "shard_id", f"Invalid shard id. {self.shard_id!r}")

        if isinstance(self.owners, (str, bytes)):
            raise InvalidTransactionError(self.type(), "owners", f"Owners must be a sequence. {self.owners!r}")

        owners = tuple(ensure_address(owner, self.network_id) for owner in self.owners)
        if not owners:
            raise InvalidTransactionError(self.type(), "owners", "A shard must have at least one owner.")
        object.__setattr__(self, "owners", owners)
