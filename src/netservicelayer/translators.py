# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Conversions between the network API representation and ours."""

from typing import Any, Iterable, Mapping

from netservicelayer.apiclient.exceptions import NapiException
from netservicelayer.constants import EXTERNAL_NIC_TAG
from netservicelayer.exceptions.catalog import (
    BaseException,
    BaseExceptionDetail,
    InvalidArgumentException,
    NotFoundException,
)
from netservicelayer.exceptions.constants import (
    BACKEND_VIOLATION_TYPE,
    UNEXISTING_RESOURCE_VIOLATION_TYPE,
)
from netservicelayer.fields import FABRIC_NETWORK_FIELDS
from netservicelayer.models.networks import Network


def is_network_pool(record: Mapping[str, Any]) -> bool:
    return isinstance(record.get("networks"), list)


def translate_network(record: Mapping[str, Any]) -> Network:
    """Translate a network, network pool or fabric network record.

    `public` is the explicit flag of the record when it has one. Otherwise
    fabric networks are private and the rest are public if they're on the
    external NIC tag.
    """
    obj: dict[str, Any] = {
        "id": record.get("uuid"),
        "name": record.get("name"),
    }

    if "public" in record:
        obj["public"] = record["public"]
    elif record.get("fabric"):
        obj["public"] = False
    else:
        obj["public"] = record.get("nic_tag") == EXTERNAL_NIC_TAG

    if record.get("description"):
        obj["description"] = record["description"]

    if record.get("fabric"):
        for field in FABRIC_NETWORK_FIELDS:
            if field != "uuid" and field in record:
                obj[field] = record[field]

    # Not validated: records are passed through as the backend returns them.
    return Network.model_construct(**obj)


def dedupe_networks(
    records: Iterable[Mapping[str, Any]], fabrics_only: bool = False
) -> list[Mapping[str, Any]]:
    """Remove the networks that are already listed through a pool.

    `records` holds both networks and pools. The input order is kept.
    """
    records = list(records)
    pooled: set[str] = set()
    for record in records:
        if is_network_pool(record):
            pooled.update(record["networks"])

    return [
        record
        for record in records
        if not (fabrics_only and not record.get("fabric"))
        and record.get("uuid") not in pooled
    ]


def translate_napi_error(err: NapiException) -> BaseException:
    """Translate a network API error into one for our callers.

    Per-field errors, when present, are joined into the message. The result
    should be raised from `err` so that it's kept as the cause.
    """
    message = err.message
    if err.errors:
        message = ", ".join(
            e.message if not e.field else f'property "{e.field}": {e.message}'
            for e in err.errors
        )

    if err.status_code == 404:
        return NotFoundException(
            message,
            details=[
                BaseExceptionDetail(
                    type=UNEXISTING_RESOURCE_VIOLATION_TYPE, message=message
                )
            ],
        )
    return InvalidArgumentException(
        message,
        details=[
            BaseExceptionDetail(
                type=BACKEND_VIOLATION_TYPE, field=e.field, message=e.message
            )
            for e in err.errors
        ]
        or None,
    )
