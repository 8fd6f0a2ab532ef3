from dataclasses import dataclass
from typing import Tuple

from codechain.blockchain.exception import InvalidTransactionError
from codechain.blockchain.types import PlatformAddress, TransactionTag
from codechain.blockchain.transactions import Transaction as BaseTransaction
from codechain.blockchain.transactions.encoding import ensure_address


@dataclass(frozen=True)
class Transaction(BaseTransaction):
    users: Tuple[PlatformAddress, ...] = ()

    type_tag = TransactionTag.create_shard
    type_name = "createShard"

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.users, (str, bytes)):
            raise InvalidTransactionError(self.type(), "users", f"Users must be a sequence. {self.users!r}")

        object.__setattr__(self, "users", tuple(ensure_address(user, self.network_id) for user in self.users))
