from .transaction import Transaction
from .transaction_serializer import TransactionSerializer
from .transaction_versioner import TransactionVersioner
from . import pay, set_regular_key, create_shard, set_shard_owners, change_asset_scheme

Pay = pay.Transaction
SetRegularKey = set_regular_key.Transaction
CreateShard = create_shard.Transaction
SetShardOwners = set_shard_owners.Transaction
ChangeAssetScheme = change_asset_scheme.Transaction
