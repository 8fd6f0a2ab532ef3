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

import hashlib
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from bech32 import CHARSET, bech32_hrp_expand, bech32_polymod, convertbits

from codechain import configure as conf
from codechain import utils
from codechain.blockchain.exception import InvalidAddressError, InvalidBytesError


class Bytes(bytes):
    size = None
    prefix = '0x'

    def __new__(cls, *args, **kwargs):
        self = super().__new__(cls, *args, **kwargs)
        if cls.size is not None and cls.size != len(self):
            raise InvalidBytesError(cls.__qualname__, bytes(self), f"Invalid size({len(self)}).")

        return self

    def __repr__(self):
        type_name = type(self).__qualname__
        return type_name + "(" + super().__repr__() + ")"

    def __str__(self):
        type_name = type(self).__qualname__
        return type_name + "(" + self.hex_0x() + ")"

    @classmethod
    def new(cls):
        """
        create sized value.
        :return:
        """
        return cls(bytes(cls.size) if cls.size else 0)

    @classmethod
    def empty(cls):
        return cls.new()

    def hex_0x(self):
        return self.prefix + self.hex()

    def to_encode_object(self) -> str:
        return self.hex_0x()

    def to_json(self) -> str:
        return self.hex_0x()

    @classmethod
    def fromhex(cls, value: str, ignore_prefix=False):
        if not isinstance(value, str):
            raise InvalidBytesError(cls.__qualname__, value, "Not a string.")

        if not ignore_prefix:
            prefix, contents = value[:len(cls.prefix)], value[len(cls.prefix):]
            if prefix != cls.prefix:
                raise InvalidBytesError(cls.__qualname__, value, "Invalid prefix.")
        else:
            contents = value

        if cls.size is not None and len(contents) != cls.size * 2:
            raise InvalidBytesError(cls.__qualname__, value, "Invalid size.")
        if contents.lower() != contents:
            raise InvalidBytesError(cls.__qualname__, value, "All elements of value must be lower cases.")

        try:
            return cls(bytes.fromhex(contents))
        except ValueError as e:
            raise InvalidBytesError(cls.__qualname__, value, str(e)) from e

    @classmethod
    def ensure(cls, value: Union['Bytes', bytes, str]):
        if isinstance(value, cls):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(value)
        if isinstance(value, str):
            return cls.fromhex(value)

        raise InvalidBytesError(cls.__qualname__, value, "Unsupported type.")


class H160(Bytes):
    size = 20


class H256(Bytes):
    size = 32


class H512(Bytes):
    size = 64


def blake160(value: bytes) -> H160:
    return H160(hashlib.blake2b(value, digest_size=H160.size).digest())


def _bech32_create_checksum(hrp: str, words: list) -> list:
    polymod = bech32_polymod(bech32_hrp_expand(hrp) + words + [0] * 6) ^ 1
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]


def _bech32_verify_checksum(hrp: str, words: list) -> bool:
    return bech32_polymod(bech32_hrp_expand(hrp) + words) == 1


@dataclass(frozen=True, repr=False)
class PlatformAddress:
    """Account identifier of the platform.

    The string form is bech32 without the separator. HRP is network id followed by "c".
    e.g. "tcc" + words([version] + account_id) + checksum
    """
    account_id: H160
    network_id: str
    version: int = conf.PLATFORM_ADDRESS_VERSION

    def __post_init__(self):
        try:
            object.__setattr__(self, "account_id", H160.ensure(self.account_id))
        except InvalidBytesError as e:
            raise InvalidAddressError(self.account_id, f"Invalid account id. {e}") from e

        if not is_network_id(self.network_id):
            raise InvalidAddressError(self.network_id, "Invalid network id.")
        if self.version != conf.PLATFORM_ADDRESS_VERSION:
            raise InvalidAddressError(self.version, "Unsupported platform address version.")

    def __str__(self):
        return self.value

    def __repr__(self):
        type_name = type(self).__qualname__
        return type_name + "(" + self.value + ")"

    @property
    def value(self) -> str:
        hrp = self.network_id + conf.PLATFORM_ADDRESS_HRP_SUFFIX
        words = convertbits(bytes([self.version]) + self.account_id, 8, 5)
        return hrp + ''.join(CHARSET[word] for word in words + _bech32_create_checksum(hrp, words))

    def to_json(self) -> str:
        return self.value

    @classmethod
    def from_account_id(cls, account_id: Union[H160, bytes, str], network_id: str = None, version: int = None):
        if network_id is None:
            network_id = conf.DEFAULT_NETWORK_ID
        if version is None:
            version = conf.PLATFORM_ADDRESS_VERSION
        return cls(account_id=account_id, network_id=network_id, version=version)

    @classmethod
    def from_public(cls, public_key: Union[H512, bytes, str], network_id: str = None):
        try:
            public_key = H512.ensure(public_key)
        except InvalidBytesError as e:
            raise InvalidAddressError(public_key, f"Invalid public key. {e}") from e

        return cls.from_account_id(blake160(public_key), network_id)

    @classmethod
    def from_string(cls, address: str):
        if not isinstance(address, str):
            raise InvalidAddressError(address, "Address must be a string.")
        if address.lower() != address and address.upper() != address:
            raise InvalidAddressError(address, "Mixed case address.")

        value = address.lower()
        hrp_length = conf.NETWORK_ID_LENGTH + len(conf.PLATFORM_ADDRESS_HRP_SUFFIX)
        hrp, data = value[:hrp_length], value[hrp_length:]
        if not hrp.endswith(conf.PLATFORM_ADDRESS_HRP_SUFFIX):
            raise InvalidAddressError(address, "Invalid prefix.")
        if len(data) < 7 or any(char not in CHARSET for char in data):
            raise InvalidAddressError(address, "Invalid data part.")

        words = [CHARSET.find(char) for char in data]
        if not _bech32_verify_checksum(hrp, words):
            raise InvalidAddressError(address, "Invalid checksum.")

        decoded = convertbits(words[:-6], 5, 8, False)
        if not decoded or len(decoded) != H160.size + 1:
            raise InvalidAddressError(address, "Invalid account id length.")

        network_id = hrp[:-len(conf.PLATFORM_ADDRESS_HRP_SUFFIX)]
        return cls(account_id=H160(bytes(decoded[1:])), network_id=network_id, version=decoded[0])

    @classmethod
    def ensure(cls, address: Union['PlatformAddress', str]) -> 'PlatformAddress':
        if isinstance(address, PlatformAddress):
            return address
        if isinstance(address, str):
            return cls.from_string(address)

        raise InvalidAddressError(address, f"Expected PlatformAddress or string but found {type(address).__name__}.")

    @classmethod
    def check(cls, address) -> bool:
        try:
            cls.ensure(address)
        except InvalidAddressError:
            return False
        return True


def is_network_id(value) -> bool:
    return isinstance(value, str) and len(value) == conf.NETWORK_ID_LENGTH and value.isascii() \
        and value.isalnum() and value.lower() == value and not utils.is_hex(value)


class TransactionTag(IntEnum):
    """Leading tag of the binary form of each transaction kind.

    Values are part of the wire format. Never reuse or renumber.
    """
    pay = 0x02
    set_regular_key = 0x03
    create_shard = 0x04
    set_shard_owners = 0x05
    change_asset_scheme = 0x15
