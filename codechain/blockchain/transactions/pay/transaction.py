from dataclasses import dataclass

from codechain.blockchain.exception import InvalidTransactionError
from codechain.blockchain.types import PlatformAddress, TransactionTag
from codechain.blockchain.transactions import Transaction as BaseTransaction
from codechain.blockchain.transactions.encoding import ensure_address

MAX_QUANTITY = 2 ** 64 - 1


@dataclass(frozen=True)
class Transaction(BaseTransaction):
    """Pay `quantity` to `receiver`."""
    receiver: PlatformAddress
    quantity: int

    type_tag = TransactionTag.pay
    type_name = "pay"

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "receiver", ensure_address(self.receiver, self.network_id))

        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidTransactionError(self.type(), "quantity", f"Quantity must be an integer. {self.quantity!r}")
        if not 0 <= self.quantity <= MAX_QUANTITY:
            raise InvalidTransactionError(self.type(), "quantity", f"Quantity out of range. {self.quantity}")
