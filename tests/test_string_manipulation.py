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
import pytest

from s3detector.utils import string_manipulation


@pytest.mark.unit
def test_split_forced_scheme():
    assert string_manipulation.split_forced_scheme("s3::https://s3.amazonaws.com/b/k") == (
        "s3",
        "https://s3.amazonaws.com/b/k",
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "src",
    [
        "https://s3.amazonaws.com/b/k",
        "::https://s3.amazonaws.com/b/k",
        "https://[::1]/b/k",
        "",
    ],
)
def test_split_forced_scheme_without_tag(src):
    assert string_manipulation.split_forced_scheme(src) == ("", src)


@pytest.mark.unit
def test_extract_string():
    actual_string = "s3-us-west-2"
    assert string_manipulation.trim_string_from_front(actual_string, "s3-") == "us-west-2"
    with pytest.raises(ValueError):
        string_manipulation.trim_string_from_front(actual_string, "eu-")


@pytest.mark.unit
@pytest.mark.parametrize(
    "path, expected",
    [
        ("/b/path/file.txt", "/b/path/file.txt"),
        ("/b/a b/c.txt", "/b/a%20b/c.txt"),
        ("/b/a%20b/c.txt", "/b/a%20b/c.txt"),
        ("/b/a%20b c.txt", "/b/a%20b%20c.txt"),
        ("/b/ü.txt", "/b/%C3%BC.txt"),
        ("/b/report(1).csv", "/b/report(1).csv"),
        ("/b/x=1;y@z", "/b/x=1;y@z"),
    ],
)
def test_escape_path(path, expected):
    assert string_manipulation.escape_path(path) == expected


@pytest.mark.unit
def test_escape_query():
    assert string_manipulation.escape_query("version=3&a=b") == "version=3&a=b"
    assert string_manipulation.escape_query("prefix=a b") == "prefix=a%20b"
    assert string_manipulation.escape_query("p=%2F") == "p=%2F"


@pytest.mark.unit
def test_find_control_character():
    assert string_manipulation.find_control_character("a\tb") == "\t"
    assert string_manipulation.find_control_character("a\x7f") == "\x7f"
    assert string_manipulation.find_control_character("a b/ü") is None


@pytest.mark.unit
def test_find_invalid_escape():
    assert string_manipulation.find_invalid_escape("/a%zz") == "%zz"
    assert string_manipulation.find_invalid_escape("/a%2") == "%2"
    assert string_manipulation.find_invalid_escape("/a%2Fb%20") is None
