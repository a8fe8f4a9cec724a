# ------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# ------------------------------------------------------------------------------

from collections import namedtuple
from msrestazure.tools import is_valid_resource_id, parse_resource_id, resource_id
from azext_linkedservice.constants import (
    LINKED_SERVICE_CHILD_TYPE,
    RESOURCE_NAMESPACE,
    WORKSPACE_RESOURCE_TYPE,
)
from azext_linkedservice.exceptions import ResourceIdParseError

__all__ = [
    "LinkedServiceId",
    "expand_tags",
    "flatten_tags",
    "linked_service_id",
    "parse_linked_service_id",
]

LinkedServiceId = namedtuple(
    "LinkedServiceId",
    "subscription resource_group_name workspace_name linked_service_name",
)


def linked_service_id(
    subscription, resource_group_name, workspace_name, linked_service_name
):
    return resource_id(
        subscription=subscription,
        resource_group=resource_group_name,
        namespace=RESOURCE_NAMESPACE,
        type=WORKSPACE_RESOURCE_TYPE,
        name=workspace_name,
        child_type_1=LINKED_SERVICE_CHILD_TYPE,
        child_name_1=linked_service_name,
    )


def parse_linked_service_id(rid):
    """
    Decompose a persisted linked service ID into its identity parts.

    :param rid: `/subscriptions/{}/resourceGroups/{}/providers/
                 Microsoft.OperationalInsights/workspaces/{}/linkedServices/{}`
    :raises ResourceIdParseError: when any of the parts is missing.
    """
    if not rid or not is_valid_resource_id(rid):
        raise ResourceIdParseError(rid, "not a valid Azure resource ID")

    parts = parse_resource_id(rid)

    if (parts.get("type") or "").lower() != WORKSPACE_RESOURCE_TYPE.lower():
        raise ResourceIdParseError(
            rid, "missing the `{}` segment".format(WORKSPACE_RESOURCE_TYPE)
        )

    child_type = parts.get("child_type_1") or ""
    if child_type.lower() != LINKED_SERVICE_CHILD_TYPE.lower():
        raise ResourceIdParseError(
            rid, "missing the `{}` segment".format(LINKED_SERVICE_CHILD_TYPE)
        )

    if not parts.get("resource_group") or not parts.get("child_name_1"):
        raise ResourceIdParseError(rid, "incomplete resource ID")

    return LinkedServiceId(
        subscription=parts.get("subscription"),
        resource_group_name=parts["resource_group"],
        workspace_name=parts["name"],
        linked_service_name=parts["child_name_1"],
    )


def expand_tags(tags):
    return {
        k: "" if v is None else str(v) for k, v in (tags or {}).items()
    }


def flatten_tags(tags):
    if not tags:
        return {}

    return {k: v for k, v in tags.items()}
