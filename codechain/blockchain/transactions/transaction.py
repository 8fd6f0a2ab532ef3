from abc import ABC
from dataclasses import dataclass, _FIELD, _FIELDS
from typing import TYPE_CHECKING

from codechain.blockchain.exception import InvalidTransactionError
from codechain.blockchain.types import is_network_id

if TYPE_CHECKING:
    from codechain.blockchain.types import H256
    from codechain.blockchain.transactions import TransactionSerializer


@dataclass(frozen=True)
class Transaction(ABC):
    network_id: str

    type_tag = None
    type_name = ''

    def __post_init__(self):
        if not is_network_id(self.network_id):
            raise InvalidTransactionError(self.type(), "network_id", f"Invalid network id. {self.network_id!r}")

    def __str__(self):
        fields = getattr(self, _FIELDS, None)
        if fields is None:
            return ""

        fields = [f for f in fields.values() if f._field_type is _FIELD]
        fields_str = ', '.join(f"{f.name}={getattr(self, f.name)}" for f in fields)
        return f"{self.__class__.__qualname__}({fields_str})"

    def type(self) -> str:
        return self.type_name

    def to_encode_object(self) -> list:
        return self._serializer().to_encode_object(self)

    def to_json(self) -> dict:
        return self._serializer().to_json(self)

    def rlp_bytes(self) -> bytes:
        return self._serializer().to_rlp_bytes(self)

    def hash(self) -> 'H256':
        return self._serializer().get_hash(self)

    def _serializer(self) -> 'TransactionSerializer':
        from codechain.blockchain.transactions import TransactionSerializer
        return TransactionSerializer.new(self.type())
