from abc import abstractmethod, ABC
from typing import TYPE_CHECKING

from rlp.exceptions import RLPException

from codechain import utils
from codechain.blockchain.exception import InvalidAddressError, InvalidBytesError, InvalidTransactionError
from codechain.blockchain.exception import TransactionDecodeError, UnknownTransactionTypeError
from codechain.blockchain.hashing import build_hash_generator
from .encoding import decode_int, decode_list, rlp_decode, rlp_encode

if TYPE_CHECKING:
    from codechain.blockchain.types import H256
    from codechain.blockchain.transactions import Transaction


class TransactionSerializer(ABC):
    type_tag = None
    type_name = ''
    field_count = None

    def __init__(self, hash_generator_version: int = None):
        self._hash_generator = build_hash_generator(hash_generator_version)

    @abstractmethod
    def to_encode_object(self, tx: 'Transaction') -> list:
        raise NotImplementedError

    @abstractmethod
    def to_json(self, tx: 'Transaction') -> dict:
        raise NotImplementedError

    @abstractmethod
    def _from_encode_object(self, items: list) -> 'Transaction':
        raise NotImplementedError

    @abstractmethod
    def _from_json(self, tx_data: dict) -> 'Transaction':
        raise NotImplementedError

    def to_rlp_bytes(self, tx: 'Transaction') -> bytes:
        return rlp_encode(self.to_encode_object(tx))

    def to_full_data(self, tx: 'Transaction') -> dict:
        full_data = {"type": tx.type()}
        full_data.update(self.to_json(tx))
        full_data["hash"] = self.get_hash(tx).hex_0x()
        return full_data

    def get_hash(self, tx: 'Transaction') -> 'H256':
        return self._hash_generator.generate_hash(self.to_rlp_bytes(tx))

    def from_encode_object(self, items) -> 'Transaction':
        """Restore a transaction from `to_encode_object()` result or rlp decoded items."""
        try:
            items = decode_list(items)
            if len(items) != self.field_count:
                raise ValueError(f"Expected {self.field_count} fields but found {len(items)}.")

            tag = decode_int(items[0])
            if tag != self.type_tag:
                raise ValueError(f"Invalid tag({tag:#x}).")

            return self._from_encode_object(items)
        except (ValueError, TypeError, RLPException) as e:
            utils.logger.spam(f"fail to decode {self.type_name}: {e!r}")
            raise TransactionDecodeError(self.type_name, f"Malformed encoded data. {e}") from e

    def from_rlp_bytes(self, data: bytes) -> 'Transaction':
        try:
            items = rlp_decode(data)
        except (TypeError, RLPException) as e:
            raise TransactionDecodeError(self.type_name, f"Malformed rlp. {e}") from e

        return self.from_encode_object(items)

    def from_json(self, tx_data: dict) -> 'Transaction':
        try:
            return self._from_json(tx_data)
        except (InvalidAddressError, InvalidBytesError, InvalidTransactionError):
            raise
        except (KeyError, ValueError, TypeError) as e:
            raise TransactionDecodeError(self.type_name, f"Malformed json data. {e!r}") from e

    @classmethod
    def new(cls, type_: str, hash_generator_version: int = None):
        from . import pay
        if type_ == pay.type_name:
            return pay.TransactionSerializer(hash_generator_version)

        from . import set_regular_key
        if type_ == set_regular_key.type_name:
            return set_regular_key.TransactionSerializer(hash_generator_version)

        from . import create_shard
        if type_ == create_shard.type_name:
            return create_shard.TransactionSerializer(hash_generator_version)

        from . import set_shard_owners
        if type_ == set_shard_owners.type_name:
            return set_shard_owners.TransactionSerializer(hash_generator_version)

        from . import change_asset_scheme
        if type_ == change_asset_scheme.type_name:
            return change_asset_scheme.TransactionSerializer(hash_generator_version)

        raise UnknownTransactionTypeError(type_, "Not supported transaction type.")
