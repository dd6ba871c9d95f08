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

from urllib.parse import parse_qs, unquote, urlsplit

from boto3.session import Session

from s3detector.detector import S3_SCHEME_TAG, S3Detector
from s3detector.exceptions import InvalidShapeError, URLAssemblyError
from s3detector.types import S3LocationTypeDef
from s3detector.utils.string_manipulation import split_forced_scheme, trim_string_from_front

DEFAULT_REGION = "us-east-1"
LEGACY_REGION_PREFIX = "s3-"


def parse_bucket_key_names(url, validate_region=False) -> S3LocationTypeDef:
    """Splits a canonical S3 URL into its bucket, key and region.

    Accepts the output of S3Detector.detect, with or without the s3:: tag:
    https://s3.amazonaws.com/bucket-name/key-name,
    https://s3-Region.amazonaws.com/bucket-name/key-name,
    https://Region.amazonaws.com/bucket-name/key-name or
    https://s3.Region.amazonaws.com/bucket-name/key-name.
    The bucket and key are percent-decoded. A 'version' query parameter
    is returned as VersionId.

    Args:
        url: canonical S3 URL
        validate_region: check the region against the regions boto3 knows

    Returns:
        S3LocationTypeDef

    Raises:
        InvalidShapeError: host or path does not describe an S3 object
        URLAssemblyError: url does not parse
        ValueError: validate_region is set and the region is unknown
    """
    tag, http_url = split_forced_scheme(url)
    if tag and tag != S3_SCHEME_TAG:
        raise InvalidShapeError(url, "unsupported scheme tag: {}".format(tag))

    try:
        parsed_url = urlsplit(http_url)
        host = parsed_url.hostname or ""
    except ValueError as e:
        raise URLAssemblyError(url, str(e)) from e

    if not host.endswith(".amazonaws.com"):
        raise InvalidShapeError(url)

    host_labels = host.split(".")
    # Path-style, e.g. s3.amazonaws.com, s3-Region.amazonaws.com or
    # Region.amazonaws.com
    if len(host_labels) == 3:
        region = host_labels[0]
        if region.startswith(LEGACY_REGION_PREFIX):
            region = trim_string_from_front(region, LEGACY_REGION_PREFIX)
        if region == "s3":
            region = DEFAULT_REGION
    # Regional endpoint, e.g. s3.Region.amazonaws.com
    elif len(host_labels) == 4 and host_labels[0] == "s3":
        region = host_labels[1]
    else:
        raise InvalidShapeError(url)

    path_parts = unquote(parsed_url.path).split("/", 2)
    if len(path_parts) != 3 or not path_parts[1] or not path_parts[2]:
        raise InvalidShapeError(url)

    if validate_region:
        validate_region_name(region, url)

    version_id = parse_qs(parsed_url.query).get("version", [""])[0]
    return S3LocationTypeDef(
        Bucket=path_parts[1],
        Key=path_parts[2],
        Region=region,
        VersionId=version_id,
        HttpUrl=http_url,
    )


def validate_region_name(region, url):
    """Raises ValueError when boto3 does not list the region for S3 in the
    partition of the current session. Reads the endpoint data bundled with
    botocore, no request is made."""
    session = Session()
    partition_name = session.get_partition_for_region(region_name=session.region_name or DEFAULT_REGION)
    if region not in session.get_available_regions(partition_name=partition_name, service_name="s3"):
        raise ValueError(
            f"URL: {url} is missing a 'Region' or is using a region you are not opted into.\n"
            "Expected URL format https://s3.Region.amazonaws.com/bucket-name/key-name"
        )


def detect_and_parse(src, pwd="", validate_region=False):
    """Runs the S3 detector over src and parses its canonical output.

    :return: S3LocationTypeDef, or None when src is not an S3 location
    """
    url, matched = S3Detector().detect(src, pwd)
    if not matched:
        return None
    return parse_bucket_key_names(url, validate_region=validate_region)
