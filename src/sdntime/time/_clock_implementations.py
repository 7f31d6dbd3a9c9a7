# Copyright (c) "Neo4j"
# Neo4j Sweden AB [https://neo4j.com]
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import time

from . import (
    Clock,
    ClockTime,
)
from ._arithmetic import (
    MICRO_SECONDS,
    seconds_to_micro,
)


__all__ = [
    "SafeClock",
    "PEP564Clock",
]


class SafeClock(Clock):
    """ Clock reading :func:`time.time`, available everywhere.

    The float returned by the platform is good for about microsecond
    precision at current dates.
    """

    @classmethod
    def precision(cls):
        return 6

    @classmethod
    def available(cls):
        return True

    def utc_time(self):
        seconds, microseconds = divmod(seconds_to_micro(time.time()),
                                       MICRO_SECONDS)
        return ClockTime(seconds, microseconds)


class PEP564Clock(Clock):
    """ Clock reading the integer nanosecond counter of PEP 564
    (:func:`time.time_ns`). Anything below a microsecond is dropped as an
    :class:`.Instant` cannot hold it.
    """

    @classmethod
    def precision(cls):
        return 9

    @classmethod
    def available(cls):
        return hasattr(time, "time_ns")

    def utc_time(self):
        microseconds = time.time_ns() // 1000
        return ClockTime(*divmod(microseconds, MICRO_SECONDS))
