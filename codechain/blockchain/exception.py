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
"""A module of exceptions for errors on transaction encoding"""

from typing import Iterable


class InvalidBytesError(ValueError):
    """Raise when a sized byte value has wrong size or malformed hex.
    """
    def __init__(self, type_name: str, value, message=''):
        super().__init__(message)
        self.type_name = type_name
        self.value = value

    def __str__(self):
        return f"{super().__str__()} {self.type_name}: {self.value!r}"


class InvalidAddressError(ValueError):
    """Raise when a platform address can not be validated.
    """
    def __init__(self, address, message=''):
        super().__init__(message)
        self.address = address

    def __str__(self):
        return f"{super().__str__()} address: {self.address!r}"


class InvalidTransactionError(ValueError):
    """Raise when a transaction field is out of its domain.
    """
    def __init__(self, type_: str, field_name: str, message=''):
        super().__init__(message)
        self.type_ = type_
        self.field_name = field_name

    def __str__(self):
        return \
            f"{super().__str__()}\n" \
            f"Transaction type: {self.type_}, field: {self.field_name}"


class UnknownTransactionTypeError(Exception):
    def __init__(self, type_, message=''):
        super().__init__(message)
        self.type_ = type_

    def __str__(self):
        return f"{super().__str__()} type: {self.type_!r}"


class TransactionDecodeError(Exception):
    """Raise when encoded data does not form a transaction.
    """
    def __init__(self, type_, message=''):
        super().__init__(message)
        self.type_ = type_

    def __str__(self):
        return \
            f"{super().__str__()}\n" \
            f"Transaction type: {self.type_}"


class UnknownHashVersionError(Exception):
    def __init__(self, version, message=''):
        super().__init__(message)
        self.version = version

    def __str__(self):
        return f"{super().__str__()} version: {self.version}"


class UnfulfilledWaitError(AssertionError):
    """Raise when some awaited jobs are not fulfilled at check time.
    """
    def __init__(self, keys: Iterable[str]):
        self.keys = list(keys)
        super().__init__(f"Timeout period is expired while waiting {', '.join(self.keys)}")
