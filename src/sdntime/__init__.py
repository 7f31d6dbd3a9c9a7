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


from ._meta import (
    get_version,
    version as __version__,
)
from .calendar import (
    day_of_week,
    days_in_month,
    days_in_year,
    doy_to_gregorian,
    gregorian_to_doy,
    gregorian_to_sdn,
    is_leap_year,
    is_valid_gregorian,
    is_valid_julian,
    julian_to_sdn,
    month_from_name,
    month_name,
    sdn_to_gregorian,
    sdn_to_julian,
)
from .time import (
    add,
    add_days,
    add_hours,
    add_microseconds,
    add_milliseconds,
    add_minutes,
    add_months,
    add_seconds,
    add_years,
    compare,
    diff,
    Instant,
    normalize,
    now,
    serialize,
    Span,
    span_add,
    span_multiply,
    span_negate,
    span_serialize,
    span_subtract,
    span_unserialize,
    sub_days,
    sub_hours,
    sub_minutes,
    sub_months,
    sub_seconds,
    sub_years,
    subtract,
    today,
    tomorrow,
    UnixEpoch,
    unserialize,
    yesterday,
)


__all__ = [
    "__version__",
    "Instant",
    "Span",
    "UnixEpoch",
    "add",
    "add_days",
    "add_hours",
    "add_microseconds",
    "add_milliseconds",
    "add_minutes",
    "add_months",
    "add_seconds",
    "add_years",
    "compare",
    "day_of_week",
    "days_in_month",
    "days_in_year",
    "diff",
    "doy_to_gregorian",
    "get_version",
    "gregorian_to_doy",
    "gregorian_to_sdn",
    "is_leap_year",
    "is_valid_gregorian",
    "is_valid_julian",
    "julian_to_sdn",
    "month_from_name",
    "month_name",
    "normalize",
    "now",
    "sdn_to_gregorian",
    "sdn_to_julian",
    "serialize",
    "span_add",
    "span_multiply",
    "span_negate",
    "span_serialize",
    "span_subtract",
    "span_unserialize",
    "sub_days",
    "sub_hours",
    "sub_minutes",
    "sub_months",
    "sub_seconds",
    "sub_years",
    "subtract",
    "today",
    "tomorrow",
    "unserialize",
    "yesterday",
]
