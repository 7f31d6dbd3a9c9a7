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


import io
import logging

import pytest

from sdntime.calendar import (
    gregorian_to_sdn,
    sdn_to_gregorian,
)
from sdntime.debug import (
    LOGGER_NAME,
    watch,
    Watcher,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)


def test_calendar_rejections_are_written(package_logger):
    out = io.StringIO()
    with Watcher(out=out):
        gregorian_to_sdn(0, 1, 1)
        gregorian_to_sdn(2000, 1, 1)
        sdn_to_gregorian(-3)
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert "[DEBUG]  sdntime.calendar  Gregorian date (0, 1, 1) out of " \
           "supported range" in lines[0]
    assert "SDN (-3,) out of supported range" in lines[1]


def test_nothing_written_after_stop(package_logger):
    out = io.StringIO()
    watcher = watch(out=out)
    assert watcher.active
    watcher.stop()
    assert not watcher.active
    gregorian_to_sdn(0, 1, 1)
    assert out.getvalue() == ""


def test_stop_without_start(package_logger, mocker):
    remove_handler = mocker.spy(package_logger, "removeHandler")
    Watcher().stop()
    remove_handler.assert_not_called()


def test_start_is_idempotent(package_logger, mocker):
    add_handler = mocker.spy(package_logger, "addHandler")
    watcher = Watcher(out=io.StringIO())
    watcher.start()
    watcher.start()
    watcher.stop()
    assert add_handler.call_count == 1


def test_level_above_debug_hides_calendar_output(package_logger):
    out = io.StringIO()
    with Watcher(level=logging.INFO, out=out):
        gregorian_to_sdn(0, 1, 1)
    assert out.getvalue() == ""


@pytest.mark.parametrize(("before", "watching"), (
    (logging.NOTSET, logging.DEBUG),
    (logging.ERROR, logging.DEBUG),
    (logging.DEBUG, logging.DEBUG),
))
def test_logger_level_is_restored(package_logger, before, watching):
    package_logger.setLevel(before)
    with Watcher(out=io.StringIO()):
        assert package_logger.getEffectiveLevel() == watching
    assert package_logger.level == before


def test_lower_logger_level_is_kept(package_logger, mocker):
    package_logger.setLevel(logging.DEBUG)
    set_level = mocker.spy(package_logger, "setLevel")
    watcher = watch(level=logging.WARNING, out=io.StringIO())
    set_level.assert_not_called()
    watcher.stop()
    set_level.assert_called_once_with(logging.DEBUG)


def test_defaults_to_stderr(package_logger, capsys):
    with Watcher():
        gregorian_to_sdn(2000, 13, 1)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Gregorian date (2000, 13, 1)" in captured.err
