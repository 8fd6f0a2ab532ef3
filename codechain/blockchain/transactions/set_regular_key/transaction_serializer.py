from . import Transaction
from .. import TransactionSerializer as BaseTransactionSerializer
from ..encoding import decode_text
from ...types import H512


class TransactionSerializer(BaseTransactionSerializer):
    type_tag = Transaction.type_tag
    type_name = Transaction.type_name
    field_count = 3

    def to_encode_object(self, tx: 'Transaction') -> list:
        return [
            tx.type_tag,
            tx.network_id,
            tx.key
        ]

    def to_json(self, tx: 'Transaction') -> dict:
        return {
            "networkId": tx.network_id,
            "key": tx.key.to_json()
        }

    def _from_encode_object(self, items: list) -> 'Transaction':
        return Transaction(
            network_id=decode_text(items[1]),
            key=H512.ensure(items[2])
        )

    def _from_json(self, tx_data: dict) -> 'Transaction':
        return Transaction(
            network_id=tx_data["networkId"],
            key=tx_data["key"]
        )
