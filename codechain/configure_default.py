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
"""All codechain configure value can set by system environment.
But before set by system environment, codechain use this default values.

Values that must be derived from other values are derived in this file,
so `configure` can use them as they are.
"""

import os

from enum import IntFlag, auto


CODECHAIN_ROOT_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


#############
# LOGGING ###
#############
class LogOutputType(IntFlag):
    console = auto()
    file = auto()


CODECHAIN_LOG_LEVEL = os.getenv('CODECHAIN_LOG_LEVEL', 'WARNING')
CODECHAIN_DEVELOP_LOG_LEVEL = "SPAM"
CODECHAIN_OTHER_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s,%(msecs)03d %(process)d %(thread)d {NETWORK_ID} " \
             "%(levelname)s %(filename)s(%(lineno)d) %(message)s"

LOG_OUTPUT_TYPE = LogOutputType.console

LOG_FILE_LOCATION = os.path.join(CODECHAIN_ROOT_PATH, 'log')
LOG_FILE_PREFIX = "codechain"
LOG_FILE_EXTENSION = "log"

LOG_FILE_ROTATE_WHEN = ''  # Default '', Do no rotate log files by time
LOG_FILE_ROTATE_INTERVAL = 1

LOG_FILE_ROTATE_MAX_BYTES = 0  # Default 0, Do not rotate log files by max bytes

LOG_FILE_ROTATE_BACKUP_COUNT = 10
LOG_FILE_ROTATE_UTC = False

MONITOR_LOG = False
MONITOR_LOG_HOST = 'localhost'
MONITOR_LOG_PORT = 24224
MONITOR_LOG_MODULE = 'fluent'


###############
# NETWORK ID ###
###############
# Two characters which partition distinct chains. e.g. "cc" mainnet, "tc" testnet
DEFAULT_NETWORK_ID = "tc"
NETWORK_ID_LENGTH = 2


##################
# PLATFORM ADDRESS #
##################
PLATFORM_ADDRESS_VERSION = 1
PLATFORM_ADDRESS_HRP_SUFFIX = "c"


################
# TRANSACTION ###
################
# 0: sha3_256, 1: blake2b 256
TX_HASH_VERSION = 1
