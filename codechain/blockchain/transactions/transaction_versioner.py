from typing import Union

from rlp.exceptions import RLPException

from codechain.blockchain.exception import TransactionDecodeError, UnknownTransactionTypeError
from codechain.blockchain.types import TransactionTag
from .encoding import decode_int, decode_list, rlp_decode
from . import pay, set_regular_key, create_shard, set_shard_owners, change_asset_scheme


class TransactionVersioner:
    """Discriminates transaction kinds by type name or binary tag."""

    def __init__(self):
        self.type_names = dict(default_type_names)
        self._verify_type_names()

    def get_type(self, tx_data: dict) -> str:
        if not isinstance(tx_data, dict):
            raise TransactionDecodeError(None, f"Transaction data must be a json object. {type(tx_data).__name__}")

        type_ = tx_data.get("type")
        if type_ not in self.type_names.values():
            raise UnknownTransactionTypeError(type_, "Not supported transaction type.")

        return type_

    def get_type_by_tag(self, tag: Union[TransactionTag, int]) -> str:
        try:
            return self.type_names[tag]
        except KeyError:
            raise UnknownTransactionTypeError(tag, "Not supported transaction tag.") from None

    def get_tag(self, type_: str) -> TransactionTag:
        for tag, type_name in self.type_names.items():
            if type_name == type_:
                return tag

        raise UnknownTransactionTypeError(type_, "Not supported transaction type.")

    def get_type_from_rlp(self, data: bytes) -> str:
        try:
            items = decode_list(rlp_decode(data))
            tag = decode_int(items[0])
        except (IndexError, TypeError, ValueError, RLPException) as e:
            raise TransactionDecodeError(None, f"Can not read transaction tag. {e}") from e

        return self.get_type_by_tag(tag)

    def _verify_type_names(self):
        if set(self.type_names) != set(TransactionTag):
            raise RuntimeError(f"Transaction tags are not fully registered. {self.type_names}")

        if len(set(self.type_names.values())) != len(self.type_names):
            raise RuntimeError(f"Transaction type names are duplicated. {self.type_names}")


default_type_names = {
    pay.type_tag: pay.type_name,
    set_regular_key.type_tag: set_regular_key.type_name,
    create_shard.type_tag: create_shard.type_name,
    set_shard_owners.type_tag: set_shard_owners.type_name,
    change_asset_scheme.type_tag: change_asset_scheme.type_name,
}
