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

from enum import Enum


class ErrorKind(Enum):
    INVALID_SHAPE = "InvalidShape"
    URL_ASSEMBLY = "URLAssembly"


class S3DetectorError(ValueError):
    """Raised when a string carries the S3 domain marker but cannot be
    turned into a canonical S3 URL. Callers should branch on ``kind``
    (or the subclass) and move on to the next detector."""

    kind: ErrorKind

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(message)


class InvalidShapeError(S3DetectorError):
    kind = ErrorKind.INVALID_SHAPE

    def __init__(self, source: str, message: str = "URL is not a valid S3 URL"):
        super().__init__(source, message)


class URLAssemblyError(S3DetectorError):
    kind = ErrorKind.URL_ASSEMBLY

    def __init__(self, source: str, reason: str):
        self.reason = reason
        super().__init__(source, "error parsing S3 URL: {}".format(reason))
