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


"""
Log output of this package for interactive debugging.

Every logger of the package sits below ``sdntime``:

``sdntime.calendar``
    conversions rejected as out of range, with the offending input
``sdntime.time``
    the clock implementations found when the first :class:`.Clock` is made

All messages are logged at ``DEBUG`` level and the package installs no
handlers of its own, so nothing shows up unless logging is configured.
:func:`watch` is the shortcut for doing that while debugging; in an
application, configure the ``sdntime`` logger like any other.

.. note::
    The exact messages are not part of the API contract and might change at
    any time without notice.
"""


from __future__ import annotations

import typing as t
from logging import (
    DEBUG,
    Formatter,
    getLogger,
    NOTSET,
    StreamHandler,
)


__all__ = [
    "Watcher",
    "watch",
]


LOGGER_NAME = "sdntime"

LOG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s  %(message)s"


class Watcher:
    """Copy the records of the ``sdntime`` loggers to a stream.

    Use it as a context manager::

        from sdntime.calendar import gregorian_to_sdn
        from sdntime.debug import Watcher

        with Watcher():
            gregorian_to_sdn(1582, 2, 30)

    or call :meth:`start` and :meth:`stop` explicitly. While watching, the
    ``sdntime`` logger is lowered to `level` if it is set any higher; on
    :meth:`stop` it gets its previous level back.

    :param level: minimum level of the records to show.
    :param out: output stream, :data:`sys.stderr` if :data:`None`.
    """

    def __init__(
        self, level: int = DEBUG, out: t.Optional[t.TextIO] = None
    ) -> None:
        self.level = level
        self.out = out
        self._handler: t.Optional[StreamHandler] = None
        self._previous_level = NOTSET

    def __enter__(self) -> Watcher:
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    @property
    def active(self) -> bool:
        return self._handler is not None

    def start(self) -> None:
        """Start copying records. Does nothing if already started."""
        if self._handler is not None:
            return
        logger = getLogger(LOGGER_NAME)
        handler = StreamHandler(self.out)
        handler.setFormatter(Formatter(LOG_FORMAT))
        handler.setLevel(self.level)
        self._previous_level = logger.level
        if logger.getEffectiveLevel() > self.level:
            logger.setLevel(self.level)
        logger.addHandler(handler)
        self._handler = handler

    def stop(self) -> None:
        """Stop copying records and restore the logger level."""
        if self._handler is None:
            return
        logger = getLogger(LOGGER_NAME)
        logger.removeHandler(self._handler)
        logger.setLevel(self._previous_level)
        self._handler = None


def watch(level: int = DEBUG, out: t.Optional[t.TextIO] = None) -> Watcher:
    """Start a :class:`.Watcher` and return it.

    Example::

        watcher = watch()
        # DEBUG output of all sdntime loggers goes to stderr until
        watcher.stop()
    """
    watcher = Watcher(level, out)
    watcher.start()
    return watcher
