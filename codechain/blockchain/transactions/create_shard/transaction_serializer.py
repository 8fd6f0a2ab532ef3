from . import Transaction
from .. import TransactionSerializer as BaseTransactionSerializer
from ..encoding import decode_address, decode_list, decode_text, encode_address


class TransactionSerializer(BaseTransactionSerializer):
    type_tag = Transaction.type_tag
    type_name = Transaction.type_name
    field_count = 3

    def to_encode_object(self, tx: 'Transaction') -> list:
        return [
            tx.type_tag,
            tx.network_id,
            [encode_address(user) for user in tx.users]
        ]

    def to_json(self, tx: 'Transaction') -> dict:
        return {
            "networkId": tx.network_id,
            "users": [str(user) for user in tx.users]
        }

    def _from_encode_object(self, items: list) -> 'Transaction':
        network_id = decode_text(items[1])
        return Transaction(
            network_id=network_id,
            users=[decode_address(user, network_id) for user in decode_list(items[2])]
        )

    def _from_json(self, tx_data: dict) -> 'Transaction':
        return Transaction(
            network_id=tx_data["networkId"],
            users=tx_data["users"]
        )
