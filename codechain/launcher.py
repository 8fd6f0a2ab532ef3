#!/usr/bin/env python
# -*- coding: utf-8 -*-

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

import argparse
import json
import logging
import sys

import codechain
from codechain import configure as conf
from codechain import utils
from codechain.blockchain.exception import TransactionDecodeError, UnknownTransactionTypeError
from codechain.blockchain.transactions import TransactionSerializer, TransactionVersioner
from codechain.utils import loggers, command_arguments


def read_input(input_file_path: str = None) -> str:
    if input_file_path is None:
        return sys.stdin.read()

    with open(input_file_path, encoding='utf-8') as input_file:
        return input_file.read()


def bytes_from_0x(value: str) -> bytes:
    value = value.strip()
    if not value.startswith("0x"):
        raise ValueError(f"rlp hex must start with 0x. {value[:10]}...")

    return bytes.fromhex(value[2:])


def run_command(command: str, raw_input: str, hash_version: int = None) -> str:
    versioner = TransactionVersioner()

    if command == "decode":
        data = bytes_from_0x(raw_input)
        ts = TransactionSerializer.new(versioner.get_type_from_rlp(data), hash_version)
        tx = ts.from_rlp_bytes(data)
        return utils.pretty_json(ts.to_full_data(tx), indent=2)

    tx_data = json.loads(raw_input)
    ts = TransactionSerializer.new(versioner.get_type(tx_data), hash_version)
    tx = ts.from_json(tx_data)
    logging.debug(f"{command}: {tx}")

    if command == "encode":
        return "0x" + ts.to_rlp_bytes(tx).hex()
    if command == "hash":
        return ts.get_hash(tx).hex_0x()

    raise ValueError(f"Unknown command({command})")


def main(argv) -> int:
    parser = argparse.ArgumentParser(prog="codechain-tx")
    for cmd_arg_type in command_arguments.Type:
        cmd_arg_attr = command_arguments.attributes[cmd_arg_type]
        parser.add_argument(*cmd_arg_attr.names, **cmd_arg_attr.kwargs)

    args = parser.parse_args(argv)

    if args.version:
        print(json.dumps({"codechain-tx": codechain.__version__}, indent=2))
        return 0

    if args.configure_file_path:
        try:
            conf.Configure().load_configure_json(args.configure_file_path)
        except RuntimeError as e:
            logging.error(f"codechain-tx {args.command} failed: {e}")
            return 1

    if args.develop:
        loggers.set_preset_type(loggers.PresetType.develop)
    else:
        loggers.set_preset_type(loggers.PresetType.production)
    loggers.update_preset()
    loggers.update_other_loggers()

    try:
        raw_input = read_input(args.input_file_path)
        output = run_command(args.command, raw_input, args.hash_version)
    except (OSError, ValueError, UnknownTransactionTypeError, TransactionDecodeError) as e:
        logging.error(f"codechain-tx {args.command} failed: {e}")
        return 1

    print(output)
    return 0
