from . import Transaction
from .. import TransactionSerializer as BaseTransactionSerializer
from ..encoding import decode_address, decode_int, decode_list, decode_text, encode_address


class TransactionSerializer(BaseTransactionSerializer):
    type_tag = Transaction.type_tag
    type_name = Transaction.type_name
    field_count = 4

    def to_encode_object(self, tx: 'Transaction') -> list:
        return [
            tx.type_tag,
            tx.network_id,
            tx.shard_id,
            [encode_address(owner) for owner in tx.owners]
        ]

    def to_json(self, tx: 'Transaction') -> dict:
        return {
            "networkId": tx.network_id,
            "shardId": tx.shard_id,
            "owners": [str(owner) for owner in tx.owners]
        }

    def _from_encode_object(self, items: list) -> 'Transaction':
        network_id = decode_text(items[1])
        return Transaction(
            network_id=network_id,
            shard_id=decode_int(items[2]),
            owners=[decode_address(owner, network_id) for owner in decode_list(items[3])]
        )

    def _from_json(self, tx_data: dict) -> 'Transaction':
        return Transaction(
            network_id=tx_data["networkId"],
            shard_id=tx_data["shardId"],
            owners=tx_data["owners"]
        )
