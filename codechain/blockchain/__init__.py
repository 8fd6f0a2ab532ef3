from .exception import InvalidAddressError, InvalidBytesError, InvalidTransactionError
from .exception import TransactionDecodeError, UnknownHashVersionError, UnknownTransactionTypeError
from .types import Bytes, H160, H256, H512, PlatformAddress, TransactionTag
