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

"""Host label layouts recognised by the S3 detector.

Each HostShape says how many dot separated labels the host segment of a
candidate carries, where the bucket and region sit among those labels and
which https template rebuilds the canonical URL. The table is matched in
order and the first hit wins.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

PATH_STYLE_TEMPLATE = "https://{region}.amazonaws.com/{path}"
VHOST_STYLE_TEMPLATE = "https://{region}.amazonaws.com/{bucket}/{path}"
REGIONAL_TEMPLATE = "https://s3.{region}.amazonaws.com/{bucket}/{path}"


@dataclass(frozen=True)
class HostShape:
    name: str
    matches: Callable[[Sequence[str]], bool]
    region_index: int
    host_template: str
    # None when the bucket travels in the path rather than the host
    bucket_index: Optional[int] = None

    def region(self, host_labels: Sequence[str]) -> str:
        return host_labels[self.region_index]

    def bucket(self, host_labels: Sequence[str]) -> Optional[str]:
        if self.bucket_index is None:
            return None
        return host_labels[self.bucket_index]

    def build_url(self, host_labels: Sequence[str], path_parts: List[str]) -> str:
        """Fills the host template from the host labels and the
        remaining path segments.

        :param host_labels: host segment split on '.'
        :param path_parts: every '/' segment after the host
        :return: https url, not yet validated
        """
        return self.host_template.format(
            region=self.region(host_labels),
            bucket=self.bucket(host_labels),
            path="/".join(path_parts),
        )


PATH_STYLE = HostShape(
    name="path-style",
    matches=lambda labels: len(labels) == 3,
    region_index=0,
    host_template=PATH_STYLE_TEMPLATE,
)

VHOST_STYLE = HostShape(
    name="vhost-style",
    matches=lambda labels: len(labels) == 4,
    region_index=1,
    bucket_index=0,
    host_template=VHOST_STYLE_TEMPLATE,
)

NEW_VHOST_STYLE = HostShape(
    name="new-vhost-style",
    matches=lambda labels: len(labels) == 5 and labels[1] == "s3",
    region_index=2,
    bucket_index=0,
    host_template=REGIONAL_TEMPLATE,
)

# bucket.vpce-<id>.vpce.<region>.amazonaws.com hosts. The offsets are fixed
# for that naming and do not follow the label count.
VPCE_STYLE = HostShape(
    name="vpce-style",
    matches=lambda labels: len(labels) > 5 and "vpce" in labels[1],
    region_index=3,
    bucket_index=0,
    host_template=REGIONAL_TEMPLATE,
)

HOST_SHAPES = (PATH_STYLE, VHOST_STYLE, NEW_VHOST_STYLE, VPCE_STYLE)


def match_host_shape(host_labels, shapes=HOST_SHAPES):
    """Returns the first shape whose predicate accepts the host labels,
    or None when none does."""
    for shape in shapes:
        if shape.matches(host_labels):
            return shape
    return None
