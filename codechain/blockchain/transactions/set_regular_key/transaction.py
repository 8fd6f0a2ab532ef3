from dataclasses import dataclass

from codechain.blockchain.exception import InvalidBytesError, InvalidTransactionError
from codechain.blockchain.types import H512, TransactionTag
from codechain.blockchain.transactions import Transaction as BaseTransaction


@dataclass(frozen=True)
class Transaction(BaseTransaction):
    """Register `key` as the regular key of the signer."""
    key: H512

    type_tag = TransactionTag.set_regular_key
    type_name = "setRegularKey"

    def __post_init__(self):
        super().__post_init__()
        try:
            object.__setattr__(self, "key", H512.ensure(self.key))
        except InvalidBytesError as e:
            raise InvalidTransactionError(self.type(), "key", str(e)) from e
