###############################################################################
#  Copyright 2021 Amazon.com, Inc. or its affiliates. All Rights Reserved.    #
#                                                                             #
#  Licensed under the Apache License, Version 2.0 (the "License").            #
#  You may not use this file except in compliance with the License.
#  A copy of the License is located at                                        #
#                                                                             #
#      http://www.apache.org/licenses/LICENSE-2.0                             #
#                                                                             #
#  or in the "license" file accompanying this file. This file is distributed  #
#  on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, express #
#  or implied. See the License for the specific language governing permissions#
#  and limitations under the License.                                         #
###############################################################################

import json
import logging

LOGGER_NAME = "s3detector"
LOG_FORMAT = (
    '{"time_stamp": "%(asctime)s", "log_level": "%(levelname)s", '
    '"log_message": %(message)s}'
)


class Logger(object):
    """Thin wrapper around the package logger that writes one JSON object
    per log record. Only the named logger is configured, the root logger
    and its handlers are left to the host application.

    Example:
        logger = Logger(loglevel='info')
        logger.info({'MESSAGE': 'detected', 'URL': url})
    """

    def __init__(self, loglevel="warning", name=LOGGER_NAME):
        self.config(loglevel=loglevel, name=name)

    def config(self, loglevel="warning", name=LOGGER_NAME):
        loglevel = logging.getLevelName(loglevel.upper())
        if not isinstance(loglevel, int):
            loglevel = logging.WARNING
        main_logger = logging.getLogger(name)
        main_logger.setLevel(loglevel)
        if len(main_logger.handlers) == 0:
            main_logger.addHandler(logging.StreamHandler())
        main_logger.handlers[0].setFormatter(logging.Formatter(LOG_FORMAT))
        main_logger.propagate = False
        self.log = main_logger

    def _format(self, message):
        """Returns the message as a JSON document.

        Strings that already hold JSON are re-indented, anything that
        json cannot encode natively falls back to its str() form.
        """
        if isinstance(message, str):
            try:
                message = json.loads(message)
            except ValueError:
                pass
        return json.dumps(message, indent=4, default=str)

    def debug(self, message, **kwargs):
        if self.log.isEnabledFor(logging.DEBUG):
            self.log.debug(self._format(message), **kwargs)

    def info(self, message, **kwargs):
        self.log.info(self._format(message), **kwargs)

    def warning(self, message, **kwargs):
        self.log.warning(self._format(message), **kwargs)

    def error(self, message, **kwargs):
        self.log.error(self._format(message), **kwargs)

    def critical(self, message, **kwargs):
        self.log.critical(self._format(message), **kwargs)

    def exception(self, message, **kwargs):
        self.log.exception(self._format(message), **kwargs)
