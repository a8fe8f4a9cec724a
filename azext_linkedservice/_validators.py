# ------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# ------------------------------------------------------------------------------

"""
Field validators. Each returns a list of error messages, empty when the value
is valid.
"""

from msrestazure.tools import is_valid_resource_id
from azext_linkedservice.constants import (
    ALLOWED_LINKED_SERVICE_NAMES,
    MAX_TAG_COUNT,
    MAX_TAG_KEY_LENGTH,
    MAX_TAG_VALUE_LENGTH,
    RESOURCE_GROUP_NAME_MAX_LENGTH,
    WORKSPACE_NAME_MAX_LENGTH,
    WORKSPACE_NAME_MIN_LENGTH,
)

import re

WORKSPACE_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9-]+[A-Za-z0-9]$")
RESOURCE_GROUP_NAME_RE = re.compile(r"^[-\w\._\(\)]+$")


def validate_resource_group_name(value, key="resource_group_name"):
    errors = []
    if not isinstance(value, str) or not value:
        return ["{} must be a non-empty string".format(key)]

    if len(value) > RESOURCE_GROUP_NAME_MAX_LENGTH:
        errors.append(
            "{} may not exceed {} characters in length".format(
                key, RESOURCE_GROUP_NAME_MAX_LENGTH
            )
        )

    if value.endswith("."):
        errors.append("{} cannot end with a period".format(key))

    if not RESOURCE_GROUP_NAME_RE.match(value):
        errors.append(
            "{} may only contain alphanumeric characters, dash, underscores, "
            "parentheses and periods".format(key)
        )

    return errors


def validate_workspace_name(value, key="workspace_name"):
    if not isinstance(value, str) or not value:
        return ["{} must be a non-empty string".format(key)]

    errors = []
    if not WORKSPACE_NAME_RE.match(value):
        errors.append(
            "{} can only contain alphabet, number, and '-' character. You can "
            "not use '-' as the start and end of the name".format(key)
        )

    if not WORKSPACE_NAME_MIN_LENGTH <= len(value) <= WORKSPACE_NAME_MAX_LENGTH:
        errors.append(
            "{} can only be between {} and {} letters".format(
                key, WORKSPACE_NAME_MIN_LENGTH, WORKSPACE_NAME_MAX_LENGTH
            )
        )

    return errors


def validate_linked_service_name(value, key="linked_service_name"):
    # -- exact match, case sensitive --
    if value not in ALLOWED_LINKED_SERVICE_NAMES:
        return [
            "expected {} to be one of {}, got {}".format(
                key, ALLOWED_LINKED_SERVICE_NAMES, value
            )
        ]

    return []


def validate_resource_id(value, key="resource_id"):
    if not isinstance(value, str) or not value:
        return ["{} must be a non-empty string".format(key)]

    if not is_valid_resource_id(value):
        return [
            "{} must be a valid Azure resource ID, got {!r}".format(key, value)
        ]

    return []


def validate_tags(value, key="tags"):
    if value is None:
        return []

    if not isinstance(value, dict):
        return ["{} must be a map of strings".format(key)]

    errors = []
    if len(value) > MAX_TAG_COUNT:
        errors.append(
            "a maximum of {} tags can be applied to each ARM resource".format(
                MAX_TAG_COUNT
            )
        )

    for k, v in value.items():
        if len(str(k)) > MAX_TAG_KEY_LENGTH:
            errors.append(
                "the maximum length for a tag key is {} characters: {!r} is "
                "{} characters".format(MAX_TAG_KEY_LENGTH, k, len(str(k)))
            )

        if v is not None and len(str(v)) > MAX_TAG_VALUE_LENGTH:
            errors.append(
                "the maximum length for a tag value is {} characters: the "
                "value for {!r} is {} characters".format(
                    MAX_TAG_VALUE_LENGTH, k, len(str(v))
                )
            )

    return errors
