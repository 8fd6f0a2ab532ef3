from dataclasses import dataclass
from functools import partial
from typing import Optional, Tuple

from codechain.blockchain.exception import InvalidBytesError, InvalidTransactionError
from codechain.blockchain.types import H256, PlatformAddress, TransactionTag
from codechain.blockchain.transactions import Transaction as BaseTransaction
from codechain.blockchain.transactions.encoding import canonical_text, ensure_address, ensure_optional


@dataclass(frozen=True)
class Transaction(BaseTransaction):
    """Change the metadata, approver and administrator of an asset scheme.

    :param network_id: A network ID of the transaction.
    :param asset_type: An asset type that this transaction changes.
    :param metadata: A changed metadata of the asset.
    :param approver: A changed approver of the asset. None means no approver.
    :param administrator: A changed administrator of the asset. None means no administrator.
    :param approvals: Approvals attached to the transaction. They follow the other fields in both forms.

    Metadata and approvals are kept in the form their encoded bytes decode back to.
    e.g. "0xABCD" becomes "0xabcd"
    """
    asset_type: H256
    metadata: str
    approver: Optional[PlatformAddress]
    administrator: Optional[PlatformAddress]
    approvals: Tuple[str, ...] = ()

    type_tag = TransactionTag.change_asset_scheme
    type_name = "changeAssetScheme"

    def __post_init__(self):
        super().__post_init__()
        try:
            object.__setattr__(self, "asset_type", H256.ensure(self.asset_type))
        except InvalidBytesError as e:
            raise InvalidTransactionError(self.type(), "asset_type", str(e)) from e

        if not isinstance(self.metadata, str):
            raise InvalidTransactionError(self.type(), "metadata", f"Metadata must be a string. {self.metadata!r}")
        object.__setattr__(self, "metadata", canonical_text(self.metadata))

        to_address = partial(ensure_address, network_id=self.network_id)
        object.__setattr__(self, "approver", ensure_optional(self.approver, to_address))
        object.__setattr__(self, "administrator", ensure_optional(self.administrator, to_address))

        if isinstance(self.approvals, (str, bytes)):
            raise InvalidTransactionError(self.type(), "approvals", f"Approvals must be a sequence. {self.approvals!r}")

        approvals = tuple(self.approvals)
        if not all(isinstance(approval, str) for approval in approvals):
            raise InvalidTransactionError(self.type(), "approvals", f"Approvals must be strings. {self.approvals!r}")
        object.__setattr__(self, "approvals", tuple(canonical_text(approval) for approval in approvals))
