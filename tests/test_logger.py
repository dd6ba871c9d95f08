##############################################################################
#  Copyright 2021 Amazon.com, Inc. or its affiliates. All Rights Reserved.   #
#                                                                            #
#  Licensed under the Apache License, Version 2.0 (the "License").           #
#  You may not use this file except in compliance                            #
#  with the License. A copy of the License is located at                     #
#                                                                            #
#      http://www.apache.org/licenses/LICENSE-2.0                            #
#                                                                            #
#  or in the "license" file accompanying this file. This file is             #
#  distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY  #
#  KIND, express or implied. See the License for the specific language       #
#  governing permissions  and limitations under the License.                 #
##############################################################################
import json
import logging

import pytest

from s3detector.utils.logger import LOGGER_NAME, Logger


class RecordCollector(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def restore_levels():
    root = logging.getLogger()
    package = logging.getLogger(LOGGER_NAME)
    root_level, package_level = root.level, package.level
    yield
    root.setLevel(root_level)
    package.setLevel(package_level)


@pytest.mark.unit
@pytest.mark.parametrize(
    "loglevel, expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("error", logging.ERROR),
        ("not-a-level", logging.WARNING),
    ],
)
def test_config_level(restore_levels, loglevel, expected):
    logger = Logger(loglevel=loglevel)
    assert logger.log.name == LOGGER_NAME
    assert logger.log.level == expected


@pytest.mark.unit
def test_root_logger_untouched(restore_levels):
    root = logging.getLogger()
    root.setLevel(logging.CRITICAL)
    formatters = [handler.formatter for handler in root.handlers]

    logger = Logger("debug")

    assert root.level == logging.CRITICAL
    assert [handler.formatter for handler in root.handlers] == formatters
    assert logger.log.propagate is False
    assert len(logger.log.handlers) >= 1


@pytest.mark.unit
def test_format_dict(restore_levels):
    logger = Logger("info")
    message = {"SOURCE": "s3.amazonaws.com/b/k", "SHAPE": "path-style"}
    assert json.loads(logger._format(message)) == message


@pytest.mark.unit
def test_format_json_string(restore_levels):
    logger = Logger("info")
    assert logger._format('{"a": 1}') == json.dumps({"a": 1}, indent=4)
    assert logger._format("plain text") == json.dumps("plain text")
    assert json.loads(logger._format({"error": ValueError("boom")})) == {"error": "boom"}


@pytest.mark.unit
def test_info_is_emitted(restore_levels):
    logger = Logger("info")
    collector = RecordCollector()
    logger.log.addHandler(collector)
    try:
        logger.info({"MESSAGE": "detected"})
        logger.debug({"MESSAGE": "hidden"})
    finally:
        logger.log.removeHandler(collector)
    messages = [record.getMessage() for record in collector.records]
    assert len(messages) == 1
    assert json.loads(messages[0]) == {"MESSAGE": "detected"}
