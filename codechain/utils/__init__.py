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
"""codechain util functions"""

import json
import re

import verboselogs

logger = verboselogs.VerboseLogger("dev")


def pretty_json(json_data, indent=4):
    if isinstance(json_data, (str, bytes)):
        json_data = json.loads(json_data)
    return json.dumps(json_data, indent=indent, separators=(',', ': '))


# ------------------- data utils ----------------------------

def is_hex(s):
    """Check `s` is a 0x prefixed hex string. Digits may be in any case and of odd length."""
    return isinstance(s, str) and re.fullmatch(r"0x[0-9a-fA-F]*", s) is not None
