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

from enum import IntEnum


class Type(IntEnum):
    Command = 0
    InputFilePath = 1
    ConfigurationFilePath = 2
    Develop = 3
    HashVersion = 4
    Version = 5


class Attribute:
    def __init__(self, *names, **kwargs):
        self.names = names
        self.kwargs = kwargs


attributes = {
    Type.Command:
        Attribute("command", type=str, default='encode', nargs='?', choices=['encode', 'decode', 'hash'],
                  help="codechain-tx command to run [encode|decode|hash]"),

    Type.InputFilePath:
        Attribute("-i", "--input_file_path",
                  help="input file path. transaction json for encode and hash, rlp hex for decode. "
                       "read stdin if omitted"),

    Type.ConfigurationFilePath:
        Attribute("-o", "--configure_file_path",
                  help="json configure file path"),

    Type.Develop:
        Attribute("-d", "--develop", action="store_true",
                  help="develop mode(log level, etc)"),

    Type.HashVersion:
        Attribute("--hash_version", type=int,
                  help="hash generator version. 0: sha3_256, 1: blake2b 256"),

    Type.Version:
        Attribute("--version", action='store_true',
                  help="show version of codechain-tx")
}
