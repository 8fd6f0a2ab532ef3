from . import Transaction
from .. import TransactionSerializer as BaseTransactionSerializer
from ..encoding import decode_address, decode_int, decode_text, encode_address, int_fromhex


class TransactionSerializer(BaseTransactionSerializer):
    type_tag = Transaction.type_tag
    type_name = Transaction.type_name
    field_count = 4

    def to_encode_object(self, tx: 'Transaction') -> list:
        return [
            tx.type_tag,
            tx.network_id,
            encode_address(tx.receiver),
            tx.quantity
        ]

    def to_json(self, tx: 'Transaction') -> dict:
        return {
            "networkId": tx.network_id,
            "receiver": str(tx.receiver),
            "quantity": hex(tx.quantity)
        }

    def _from_encode_object(self, items: list) -> 'Transaction':
        network_id = decode_text(items[1])
        return Transaction(
            network_id=network_id,
            receiver=decode_address(items[2], network_id),
            quantity=decode_int(items[3])
        )

    def _from_json(self, tx_data: dict) -> 'Transaction':
        return Transaction(
            network_id=tx_data["networkId"],
            receiver=tx_data["receiver"],
            quantity=int_fromhex(tx_data["quantity"])
        )
