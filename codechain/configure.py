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
"""Configuration of codechain-tx.

Every name of `configure_default` becomes an attribute of this module.
A value is overridden by the environment variable of the same name, then by a json configure file.
"""

import json
import logging
import os
import re
from enum import IntEnum

import codechain.configure_default
from codechain.configure_default import *


class DataType(IntEnum):
    string = 0
    int = 1
    float = 2
    bool = 3
    dict = 4


_data_types = (
    (bool, DataType.bool),  # bool is an int. check it first.
    (float, DataType.float),
    (str, DataType.string),
    (int, DataType.int),
    (dict, DataType.dict)
)


def _data_type_of(value):
    for python_type, data_type in _data_types:
        if isinstance(value, python_type):
            return data_type
    return None


def _parse_env(default_value, env_value: str):
    """Convert an environment string to the type of its default value."""
    if isinstance(default_value, str) or not env_value:
        return env_value

    if isinstance(default_value, bool):
        return env_value.lower() in ("1", "true", "yes", "on")
    if re.fullmatch(r"\d+\.\d+", env_value):
        return float(env_value)
    if env_value.isdigit():
        return int(env_value)
    return env_value


class ConfigureMetaClass(type):
    """Makes the class a singleton.
    usage: class ClassOne(metaclass=ConfigureMetaClass):
    """
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)

        return cls._instances[cls]


class Configure(metaclass=ConfigureMetaClass):

    def __init__(self):
        # {configure name: DataType}
        self.__configure_info_list = {}
        self.init_configure()

    @property
    def configure_info_list(self):
        return self.__configure_info_list

    def init_configure(self):
        """Reset every configuration to its default or environment value."""
        self.__configure_info_list = {}

        for name in dir(codechain.configure_default):
            default_value = getattr(codechain.configure_default, name)
            env_value = os.getenv(name)
            value = default_value if env_value is None else _parse_env(default_value, env_value)
            self.__set_configure(name, value)

    def load_configure_json(self, configure_file_path: str) -> None:
        """method for reading and applying json configuration.

        :param configure_file_path: json configure file path
        :return: None
        """
        logging.debug(f"try load configure from json file ({configure_file_path})")

        try:
            with open(configure_file_path, encoding='utf-8') as json_file:
                json_data = json.load(json_file)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"cannot open json file in ({configure_file_path}): {e}") from e

        for name, value in json_data.items():
            if not self.__set_configure(name, value):
                logging.debug(f"this is not configure key({name})")

    def __set_configure(self, name, value) -> bool:
        data_type = _data_type_of(value)
        if name.startswith('_') or data_type is None:
            return False

        globals()[name] = value
        self.__configure_info_list[name] = data_type
        return True


def get_configuration(configure_name):
    if configure_name not in Configure().configure_info_list:
        return None

    return {
        'name': configure_name,
        'value': str(globals()[configure_name]),
        'type': Configure().configure_info_list[configure_name]
    }


def set_configuration(configure_name, configure_value):
    if configure_name not in Configure().configure_info_list:
        return False

    globals()[configure_name] = configure_value
    return True


def get_all_configurations():
    return [get_configuration(name) for name in Configure().configure_info_list]


Configure()
