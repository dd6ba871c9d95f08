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
import os

import pytest

# read by the module level loggers, so it has to be set before they import
os.environ.setdefault("LOG_LEVEL", "debug")


@pytest.fixture()
def mock_bucket_name() -> str:
    return "my-bucket"


@pytest.fixture()
def mock_key_name() -> str:
    return "path/file.txt"


@pytest.fixture()
def mock_region_name() -> str:
    return "us-west-2"
