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
"""Tracks awaited jobs of a test so that no job is abandoned silently."""

import asyncio
from typing import Awaitable, Dict, TypeVar

from codechain import utils
from codechain.blockchain.exception import UnfulfilledWaitError

T = TypeVar('T')


async def wait(duration: float):
    await asyncio.sleep(duration)


class PromiseExpect:
    def __init__(self):
        self.waiting: Dict[str, int] = {}

    async def should_fulfill(self, key: str, awaitable: Awaitable[T]) -> T:
        self.waiting[key] = self.waiting.get(key, 0) + 1

        result = await awaitable

        self.waiting[key] -= 1
        if self.waiting[key] == 0:
            del self.waiting[key]
        return result

    def check_fulfilled(self):
        timeout_jobs = list(self.waiting)
        self.waiting = {}

        if timeout_jobs:
            utils.logger.warning(f"unfulfilled jobs: {timeout_jobs}")
            raise UnfulfilledWaitError(timeout_jobs)
