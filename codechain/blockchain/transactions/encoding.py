# Copyright 2018 ICON Foundation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Conversions shared by every transaction serializer.

Optional values are translated here only.
binary: None -> [], value -> [encoded value]
json: None -> null, value -> json value

Strings prefixed with "0x" are written as the bytes they name, others as utf-8.
"""

from typing import Any, Callable, Optional, TypeVar

import rlp
from rlp.sedes import big_endian_int

from codechain import utils
from codechain.blockchain.exception import InvalidAddressError
from codechain.blockchain.types import H160, PlatformAddress

T = TypeVar('T')


def ensure_optional(value: Optional[Any], ensure: Callable[[Any], T]) -> Optional[T]:
    if value is None:
        return None
    return ensure(value)


def optional_to_encode_object(value: Optional[T], to_encode_object: Callable[[T], Any]) -> list:
    if value is None:
        return []
    return [to_encode_object(value)]


def optional_from_encode_object(item, from_encode_object: Callable[[Any], T]) -> Optional[T]:
    items = decode_list(item)
    if len(items) == 0:
        return None
    if len(items) == 1:
        return from_encode_object(items[0])

    raise ValueError(f"Optional field has {len(items)} items.")


def optional_to_json(value: Optional[T], to_json: Callable[[T], Any]):
    if value is None:
        return None
    return to_json(value)


def ensure_address(address, network_id: str) -> PlatformAddress:
    """Binary form keeps the account id only, so an address must share the network id of its transaction."""
    address = PlatformAddress.ensure(address)
    if address.network_id != network_id:
        raise InvalidAddressError(address, f"Network id of the address differs from the transaction({network_id}).")

    return address


def encode_address(address: PlatformAddress) -> H160:
    return address.account_id


def decode_address(item, network_id: str) -> PlatformAddress:
    return PlatformAddress.from_account_id(H160.ensure(item), network_id)


def text_to_bytes(value: str) -> bytes:
    if utils.is_hex(value):
        digits = value[2:]
        if len(digits) % 2:
            digits = "0" + digits
        return bytes.fromhex(digits)

    return value.encode('utf-8')


def text_from_bytes(data: bytes) -> str:
    """Inverse of `text_to_bytes`. Bytes that do not read as plain text are returned as 0x hex."""
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError:
        text = None

    if text is not None and not utils.is_hex(text) and all(c.isprintable() or c in "\t\n\r" for c in text):
        return text
    return "0x" + data.hex()


def canonical_text(value: str) -> str:
    """The string which `text_from_bytes` restores from the encoded `value`."""
    return text_from_bytes(text_to_bytes(value))


def to_rlp_item(obj):
    """Convert an encode object to values which `rlp` can serialize.

    str is encoded by `text_to_bytes`, int as big endian without leading zeros and lists recursively.
    """
    if isinstance(obj, bool):
        raise TypeError(f"Can not encode bool. {obj}")
    if isinstance(obj, int):
        return int(obj)
    if isinstance(obj, str):
        return text_to_bytes(obj)
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj)
    if isinstance(obj, (list, tuple)):
        return [to_rlp_item(item) for item in obj]

    raise TypeError(f"Can not encode {type(obj).__name__}. {obj!r}")


def rlp_encode(encode_object) -> bytes:
    return rlp.encode(to_rlp_item(encode_object))


def rlp_decode(data: bytes):
    return _normalize(rlp.decode(bytes(data)))


def _normalize(item):
    if isinstance(item, (list, tuple)):
        return [_normalize(sub_item) for sub_item in item]
    return bytes(item)


def decode_text(item) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, (bytes, bytearray)):
        return text_from_bytes(bytes(item))

    raise TypeError(f"Expected text but found {type(item).__name__}.")


def decode_int(item) -> int:
    if isinstance(item, bool):
        raise TypeError("Expected integer but found bool.")
    if isinstance(item, int):
        return item
    if isinstance(item, (bytes, bytearray)):
        return big_endian_int.deserialize(bytes(item))

    raise TypeError(f"Expected integer but found {type(item).__name__}.")


def decode_list(item) -> list:
    if isinstance(item, (list, tuple)):
        return list(item)

    raise TypeError(f"Expected list but found {type(item).__name__}.")


def int_fromhex(value: str) -> int:
    if not isinstance(value, str) or not value.startswith("0x") or value != value.lower():
        raise ValueError(f"Invalid hex number. {value!r}")

    return int(value, 16)
