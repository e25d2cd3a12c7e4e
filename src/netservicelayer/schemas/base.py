# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import copy
from typing import Annotated, Any, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    field_validator,
    StringConstraints,
    ValidationError,
)

from netservicelayer.exceptions.catalog import (
    BaseExceptionDetail,
    InvalidArgumentException,
)
from netservicelayer.exceptions.constants import (
    INVALID_ARGUMENT_VIOLATION_TYPE,
)

_OCTET = r"(25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
IPV4_PATTERN = rf"^{_OCTET}(\.{_OCTET}){{3}}$"
CIDR_PATTERN = rf"^{_OCTET}(\.{_OCTET}){{3}}/(3[0-2]|[12]?[0-9])$"
UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}"
    r"-[0-9a-fA-F]{12}$"
)

IPv4Address = Annotated[str, StringConstraints(pattern=IPV4_PATTERN)]
IPv4Subnet = Annotated[str, StringConstraints(pattern=CIDR_PATTERN)]
UUID = Annotated[str, StringConstraints(pattern=UUID_PATTERN)]

# Properties whose pattern failures are reported as a bad IPv4 address
# rather than with the raw regular expression.
IP_FIELDS = frozenset(
    [
        "gateway",
        "provision_end_ip",
        "provision_start_ip",
        "resolvers",
        "resolvers[0]",
        "resolvers[1]",
        "resolvers[2]",
        "resolvers[3]",
    ]
)

PATTERN_MISMATCH_ERROR_TYPE = "string_pattern_mismatch"
VALUE_ERROR_TYPE = "value_error"
NULL_VALUE_MESSAGE = "must not be null"


class Schema(BaseModel):
    """Base class for the request schemas.

    Each operation has its own schema: the fields it accepts, their types
    and patterns and whether they are required. Unknown parameters are
    rejected. Optional fields may be left out but never given as null.
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError(NULL_VALUE_MESSAGE)
        return value


def _build_json_path(loc: tuple[int | str, ...]) -> str:
    elements: list[str] = []
    for elem in loc:
        if isinstance(elem, int) and elements:
            elements.append(f"{elements.pop()}[{elem}]")
        else:
            elements.append(str(elem))
    return ".".join(elements)


def _to_invalid_argument(error: dict[str, Any]) -> InvalidArgumentException:
    prop = _build_json_path(error["loc"])
    if not prop:
        return InvalidArgumentException(
            error["msg"],
            details=[
                BaseExceptionDetail(
                    type=INVALID_ARGUMENT_VIOLATION_TYPE,
                    message=error["msg"],
                )
            ],
        )
    if prop in IP_FIELDS and error["type"] == PATTERN_MISMATCH_ERROR_TYPE:
        return InvalidArgumentException.build_for_field(
            prop, "must be an IPv4 address"
        )
    if error["type"] == VALUE_ERROR_TYPE and "error" in error.get("ctx", {}):
        return InvalidArgumentException.build_for_field(
            prop, str(error["ctx"]["error"])
        )
    return InvalidArgumentException.build_for_field(prop, error["msg"])


def validate(schema: type[Schema], params: Mapping[str, Any]) -> dict:
    """Validate request parameters against `schema`.

    `params` is the merged path, query and body mapping of a request. It's
    left untouched: the returned dict is a copy holding only the parameters
    that were given, after coercion (e.g. a `vlan_id` taken from the path is
    returned as an int).

    Raises InvalidArgumentException describing the first failure.
    """
    params = copy.deepcopy(dict(params))
    # The account is taken from the authenticated request, not from here.
    params.pop("account", None)

    try:
        validated = schema.model_validate(params)
    except ValidationError as err:
        raise _to_invalid_argument(err.errors()[0]) from err

    return validated.model_dump(exclude_unset=True)
