from functools import partial

from . import Transaction
from .. import TransactionSerializer as BaseTransactionSerializer
from ..encoding import decode_address, decode_list, decode_text, encode_address
from ..encoding import optional_from_encode_object, optional_to_encode_object, optional_to_json
from ...types import H256


class TransactionSerializer(BaseTransactionSerializer):
    type_tag = Transaction.type_tag
    type_name = Transaction.type_name
    field_count = 7

    def to_encode_object(self, tx: 'Transaction') -> list:
        # The order is a part of the wire format.
        return [
            tx.type_tag,
            tx.network_id,
            tx.asset_type,
            tx.metadata,
            optional_to_encode_object(tx.approver, encode_address),
            optional_to_encode_object(tx.administrator, encode_address),
            list(tx.approvals)
        ]

    def to_json(self, tx: 'Transaction') -> dict:
        return {
            "networkId": tx.network_id,
            "assetType": tx.asset_type.to_encode_object(),
            "metadata": tx.metadata,
            "approver": optional_to_json(tx.approver, str),
            "administrator": optional_to_json(tx.administrator, str),
            "approvals": list(tx.approvals)
        }

    def _from_encode_object(self, items: list) -> 'Transaction':
        network_id = decode_text(items[1])
        to_address = partial(decode_address, network_id=network_id)
        return Transaction(
            network_id=network_id,
            asset_type=H256.ensure(items[2]),
            metadata=decode_text(items[3]),
            approver=optional_from_encode_object(items[4], to_address),
            administrator=optional_from_encode_object(items[5], to_address),
            approvals=[decode_text(approval) for approval in decode_list(items[6])]
        )

    def _from_json(self, tx_data: dict) -> 'Transaction':
        return Transaction(
            network_id=tx_data["networkId"],
            asset_type=H256.fromhex(tx_data["assetType"]),
            metadata=tx_data["metadata"],
            approver=tx_data["approver"],
            administrator=tx_data["administrator"],
            approvals=tx_data["approvals"]
        )
