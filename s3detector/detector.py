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

import inspect
import os
from abc import ABC, abstractmethod
from typing import Tuple
from urllib.parse import urlsplit, urlunsplit

from s3detector.exceptions import InvalidShapeError, URLAssemblyError
from s3detector.shapes import HOST_SHAPES, match_host_shape
from s3detector.utils.logger import Logger
from s3detector.utils.string_manipulation import (
    escape_path,
    escape_query,
    find_control_character,
    find_invalid_escape,
)

# initialise logger
logger = Logger(loglevel=os.environ.get("LOG_LEVEL", "info"))

S3_SCHEME_TAG = "s3"
S3_DOMAIN_MARKER = ".amazonaws.com/"


class Detector(ABC):
    """Turns a free-form location into a URL a scheme keyed fetcher
    understands.

    Detectors are tried in order by the caller. A detector that does not
    recognise the location returns ('', False) so the next one can try.
    """

    @abstractmethod
    def detect(self, src: str, pwd: str) -> Tuple[str, bool]:
        """
        :param src: candidate location
        :param pwd: working directory hint, for detectors that resolve
                    relative locations
        :return: (rewritten url, matched)
        """


class S3Detector(Detector):
    """Detects S3 HTTP locations and rewrites them into s3:: URLs.

    Example:
        url, matched = S3Detector().detect(
            'my-bucket.s3.us-west-2.amazonaws.com/path/file.txt', '')
        # url == 's3::https://s3.us-west-2.amazonaws.com/my-bucket/path/file.txt'
    """

    def __init__(self, shapes=HOST_SHAPES):
        self.shapes = shapes

    def detect(self, src, pwd=""):
        if len(src) == 0:
            return "", False

        if S3_DOMAIN_MARKER in src:
            return self.detect_http(src)

        return "", False

    def detect_http(self, src):
        """Classifies the host segment of src and rebuilds the canonical
        URL for the matching shape.

        :raises InvalidShapeError: no known shape matches
        :raises URLAssemblyError: the rebuilt URL does not parse
        """
        parts = src.split("/")
        if len(parts) < 2:
            self._log_failure(src, "missing path")
            raise InvalidShapeError(src)

        host_labels = parts[0].split(".")
        shape = match_host_shape(host_labels, self.shapes)
        if shape is None:
            self._log_failure(src, "unknown host with {} labels".format(len(host_labels)))
            raise InvalidShapeError(src)

        logger.debug({"SOURCE": src, "SHAPE": shape.name})
        return self._assemble(src, shape.build_url(host_labels, parts[1:])), True

    def _assemble(self, src, url_str):
        control = find_control_character(url_str)
        if control is not None:
            reason = "invalid control character in URL: {!r}".format(control)
            self._log_failure(src, reason)
            raise URLAssemblyError(src, reason)

        try:
            url = urlsplit(url_str)
            # port is only validated on access
            url.port
        except ValueError as e:
            self._log_failure(src, str(e))
            raise URLAssemblyError(src, str(e)) from e

        invalid_escape = find_invalid_escape(url.path) or find_invalid_escape(url.fragment)
        if invalid_escape is not None:
            reason = "invalid URL escape {!r}".format(invalid_escape)
            self._log_failure(src, reason)
            raise URLAssemblyError(src, reason)

        url = url._replace(
            path=escape_path(url.path),
            query=escape_query(url.query),
            fragment=escape_query(url.fragment),
        )
        return "{}::{}".format(S3_SCHEME_TAG, urlunsplit(url))

    def _log_failure(self, src, reason):
        message = {
            "FILE": __file__.split("/")[-1],
            "CLASS": self.__class__.__name__,
            "METHOD": inspect.stack()[1][3],
            "SOURCE": src,
            "EXCEPTION": reason,
        }
        logger.debug(message)
