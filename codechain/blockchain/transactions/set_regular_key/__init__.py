from .transaction import Transaction
from .transaction_serializer import TransactionSerializer

type_name = Transaction.type_name
type_tag = Transaction.type_tag
