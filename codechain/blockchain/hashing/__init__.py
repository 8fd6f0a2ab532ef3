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

from codechain import configure as conf
from codechain.blockchain.exception import UnknownHashVersionError

from .hash_generator import HashGenerator, HashGeneratorV0, HashGeneratorV1


def build_hash_generator(version: int = None, salt: bytes = None) -> HashGenerator:
    if version is None:
        version = conf.TX_HASH_VERSION

    if version == 0:
        return HashGeneratorV0(salt)
    elif version == 1:
        return HashGeneratorV1(salt)
    else:
        raise UnknownHashVersionError(version, "Unknown hash generator version.")
