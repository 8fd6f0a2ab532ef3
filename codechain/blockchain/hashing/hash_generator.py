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

from codechain.blockchain.types import H256


class HashGenerator:
    version = None

    def __init__(self, salt: bytes = None):
        self.salt = salt

    def generate_salted_origin(self, origin: bytes) -> bytes:
        if self.salt is not None:
            return self.salt + origin
        return origin

    def generate_hash(self, origin: bytes) -> H256:
        origin = self.generate_salted_origin(origin)
        return H256(self._digest(origin))

    def _digest(self, origin: bytes) -> bytes:
        raise NotImplementedError


class HashGeneratorV0(HashGenerator):
    version = 0

    def _digest(self, origin: bytes) -> bytes:
        return hashlib.sha3_256(origin).digest()


class HashGeneratorV1(HashGenerator):
    """blake256 of the encoded transaction"""
    version = 1

    def _digest(self, origin: bytes) -> bytes:
        return hashlib.blake2b(origin, digest_size=H256.size).digest()
