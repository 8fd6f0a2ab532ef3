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

import logging
import logging.handlers
import os
import sys
from functools import reduce
from operator import or_

import coloredlogs
import verboselogs
from fluent import handler as fluent_handler

from codechain import configure as conf

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# level SPAM value is 5
# level DEBUG value is 10
FIELD_STYLES = {
    'hostname': {'color': 'magenta'},
    'programname': {'color': 'cyan'},
    'name': {'color': 'blue'},
    'levelname': {'color': 'black', 'bold': True},
    'asctime': {'color': 'magenta'}
}

LEVEL_STYLES = {
    'info': {},
    'notice': {'color': 'magenta'},
    'verbose': {'color': 'blue'},
    'success': {'color': 'green', 'bold': True},
    'spam': {'color': 'cyan'},
    'critical': {'color': 'red', 'bold': True},
    'error': {'color': 'red'},
    'debug': {'color': 'green'},
    'warning': {'color': 'yellow'}
}


class LogConfiguration:
    """Settings of a logger. `update_logger` applies them.

    Only the root logger gets handlers. Other loggers get their level only.
    """
    def __init__(self):
        self.log_format = conf.LOG_FORMAT
        self.network_id = ""
        self.log_level = verboselogs.SPAM
        self.log_color = True
        self.log_output_type = conf.LogOutputType.console
        self.log_file_location = ""
        self.log_file_prefix = ""
        self.log_file_extension = ""
        self.log_file_rotate_when = ''
        self.log_file_rotate_interval = 0
        self.log_file_rotate_max_bytes = 0
        self.log_file_rotate_backup_count = 0
        self.log_file_rotate_utf = False
        self.log_monitor = False
        self.log_monitor_host = None
        self.log_monitor_port = None

        self._log_level = None
        self._log_format = None
        self._log_file_path = None

    def update_logger(self, logger: logging.Logger = None):
        if logger is None:
            logger = logging.root

        if isinstance(self.log_level, int):
            self._log_level = self.log_level
        else:
            self._log_level = logging.getLevelName(self.log_level)

        if logger is logging.root:
            self._log_format = self.log_format.format(NETWORK_ID=self.network_id)
            self._reset_handlers(logger)

        logger.setLevel(self._log_level)

    def _reset_handlers(self, logger: logging.Logger):
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if isinstance(handler, (logging.FileHandler, fluent_handler.FluentHandler)):
                handler.close()

        output_type = self._output_type()
        plain_formatter = logging.Formatter(fmt=self._log_format, datefmt=DATE_FORMAT)

        if output_type & conf.LogOutputType.console:
            if self.log_color:
                coloredlogs.DEFAULT_FIELD_STYLES = FIELD_STYLES
                coloredlogs.DEFAULT_LEVEL_STYLES = LEVEL_STYLES
                console_formatter = coloredlogs.ColoredFormatter(fmt=self._log_format, datefmt=DATE_FORMAT)
            else:
                console_formatter = plain_formatter

            # stdout takes records under ERROR, stderr takes the rest.
            stdout_handler = logging.StreamHandler(sys.stdout)
            stdout_handler.setLevel(self._log_level)
            stdout_handler.addFilter(lambda record: record.levelno < logging.ERROR)

            stderr_handler = logging.StreamHandler(sys.stderr)
            stderr_handler.setLevel(logging.ERROR)

            for handler in (stdout_handler, stderr_handler):
                handler.setFormatter(console_formatter)
                logger.addHandler(handler)

        if output_type & conf.LogOutputType.file and self.log_file_location:
            file_handler = self._create_file_handler()
            file_handler.setFormatter(plain_formatter)
            logger.addHandler(file_handler)

        if self.log_monitor:
            logger.addHandler(self._create_fluent_handler())

    def _output_type(self) -> conf.LogOutputType:
        """`log_output_type` may be a string from configuration. e.g. "console|file" """
        if isinstance(self.log_output_type, str):
            return reduce(or_, (conf.LogOutputType[flag.strip().lower()] for flag in self.log_output_type.split('|')))
        return conf.LogOutputType(self.log_output_type)

    def _create_file_handler(self) -> logging.Handler:
        if os.path.exists(self.log_file_location) and not os.path.isdir(self.log_file_location):
            raise RuntimeError(f"LogFileLocation({self.log_file_location}) is not a directory.")
        os.makedirs(self.log_file_location, exist_ok=True)

        log_file_name = self.log_file_prefix
        if self.network_id:
            log_file_name += f".{self.network_id}"
        self._log_file_path = os.path.join(self.log_file_location, f"{log_file_name}.{self.log_file_extension}")

        if self.log_file_rotate_when:
            file_handler = logging.handlers.TimedRotatingFileHandler(
                self._log_file_path,
                when=self.log_file_rotate_when,
                interval=self.log_file_rotate_interval,
                backupCount=self.log_file_rotate_backup_count,
                encoding='utf-8',
                utc=self.log_file_rotate_utf
            )
        elif self.log_file_rotate_max_bytes:
            file_handler = logging.handlers.RotatingFileHandler(
                self._log_file_path,
                maxBytes=self.log_file_rotate_max_bytes,
                backupCount=self.log_file_rotate_backup_count,
                encoding='utf-8'
            )
        else:
            file_handler = logging.FileHandler(self._log_file_path, encoding='utf-8')

        file_handler.setLevel(self._log_level)
        return file_handler

    def _create_fluent_handler(self) -> logging.Handler:
        """Forward records to fluentd. e.g. tag `codechain.tc`"""
        tag = 'codechain'
        if self.network_id:
            tag += f".{self.network_id}"

        handler = fluent_handler.FluentHandler(tag, host=self.log_monitor_host, port=self.log_monitor_port)
        handler.setFormatter(fluent_handler.FluentRecordFormatter({
            'host': '%(hostname)s',
            'where': '%(module)s.%(funcName)s',
            'level': '%(levelname)s',
            'network_id': self.network_id
        }))
        handler.setLevel(self._log_level)
        return handler
