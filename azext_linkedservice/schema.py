# ------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# ------------------------------------------------------------------------------

"""
Configuration schema of a workspace linked service.
"""

from collections import OrderedDict, namedtuple
from azure.cli.core.azclierror import ValidationError
from azext_linkedservice._util import expand_tags
from azext_linkedservice._validators import (
    validate_linked_service_name,
    validate_resource_group_name,
    validate_resource_id,
    validate_tags,
    validate_workspace_name,
)
from azext_linkedservice.constants import DEFAULT_LINKED_SERVICE_NAME
from knack.log import get_logger

import pydash as _

__all__ = ["SCHEMA", "LinkedServiceConfig", "Plan", "plan"]

logger = get_logger(__name__)

PROPERTIES_RESOURCE_ID = "resource_id"

SchemaField = namedtuple(
    "SchemaField",
    "name required force_new computed default case_insensitive validate",
)


def _field(
    name,
    required=False,
    force_new=False,
    computed=False,
    default=None,
    case_insensitive=False,
    validate=None,
):
    return SchemaField(
        name,
        required,
        force_new,
        computed,
        default,
        case_insensitive,
        validate,
    )


def validate_linked_service_properties(value, key="linked_service_properties"):
    if not isinstance(value, dict):
        return ["{} must be a map".format(key)]

    unknown = sorted(k for k in value if k != PROPERTIES_RESOURCE_ID)
    if unknown:
        return [
            "{} only supports `{}`, got unexpected keys: {}".format(
                key, PROPERTIES_RESOURCE_ID, ", ".join(unknown)
            )
        ]

    if value.get(PROPERTIES_RESOURCE_ID) is None:
        return [
            "{}.{} is required".format(key, PROPERTIES_RESOURCE_ID)
        ]

    return validate_resource_id(
        value[PROPERTIES_RESOURCE_ID],
        key="{}.{}".format(key, PROPERTIES_RESOURCE_ID),
    )


SCHEMA = OrderedDict(
    (f.name, f)
    for f in [
        _field(
            "resource_group_name",
            required=True,
            force_new=True,
            case_insensitive=True,
            validate=validate_resource_group_name,
        ),
        _field(
            "workspace_name",
            required=True,
            force_new=True,
            case_insensitive=True,
            validate=validate_workspace_name,
        ),
        _field(
            "linked_service_name",
            force_new=True,
            default=DEFAULT_LINKED_SERVICE_NAME,
            validate=validate_linked_service_name,
        ),
        _field(
            "linked_service_properties",
            required=True,
            force_new=True,
            validate=validate_linked_service_properties,
        ),
        # -- exported --
        _field("name", computed=True),
        _field("tags", default={}, validate=validate_tags),
    ]
)


class LinkedServiceConfig(object):
    """
    Desired state of a workspace linked service.
    """

    def __init__(
        self,
        resource_group_name,
        workspace_name,
        resource_id,
        linked_service_name=DEFAULT_LINKED_SERVICE_NAME,
        tags=None,
    ):
        self._resource_group_name = resource_group_name
        self._workspace_name = workspace_name
        self._linked_service_name = linked_service_name
        self._resource_id = resource_id
        self._tags = expand_tags(tags)

    @property
    def resource_group_name(self) -> str:
        return self._resource_group_name

    @property
    def workspace_name(self) -> str:
        return self._workspace_name

    @property
    def linked_service_name(self) -> str:
        return self._linked_service_name

    @property
    def resource_id(self) -> str:
        return self._resource_id

    @property
    def linked_service_properties(self) -> dict:
        return {PROPERTIES_RESOURCE_ID: self._resource_id}

    @property
    def tags(self) -> dict:
        return dict(self._tags)

    @classmethod
    def from_dict(cls, raw):
        """
        Decode and validate loosely-typed configuration, such as parsed
        arguments or a config file, into a `LinkedServiceConfig`.

        :raises ValidationError: listing every invalid field.
        """
        raw = raw or {}
        errors = []

        for key in raw:
            if key not in SCHEMA:
                errors.append("unsupported argument `{}`".format(key))
            elif SCHEMA[key].computed and raw[key] is not None:
                errors.append(
                    "`{}` is computed and cannot be configured".format(key)
                )

        values = {}
        for name, field in SCHEMA.items():
            if field.computed:
                continue

            value = raw.get(name)
            if value is None:
                if field.required:
                    errors.append("`{}` is required".format(name))
                    continue
                value = field.default

            if field.validate:
                errors.extend(field.validate(value, key=name))
            values[name] = value

        if errors:
            raise ValidationError(
                "Invalid linked service configuration:\n  "
                + "\n  ".join(errors)
            )

        logger.debug("Decoded linked service configuration: %s", values)

        return cls(
            resource_group_name=values["resource_group_name"],
            workspace_name=values["workspace_name"],
            linked_service_name=values["linked_service_name"],
            resource_id=_.get(raw, "linked_service_properties.resource_id"),
            tags=values["tags"],
        )

    def to_dict(self) -> dict:
        return {
            "resource_group_name": self.resource_group_name,
            "workspace_name": self.workspace_name,
            "linked_service_name": self.linked_service_name,
            "linked_service_properties": self.linked_service_properties,
            "tags": self.tags,
        }

    def __eq__(self, other):
        return (
            isinstance(other, LinkedServiceConfig)
            and self.to_dict() == other.to_dict()
        )

    def __str__(self):
        return "<LinkedServiceConfig {}/{}/{}>".format(
            self.resource_group_name,
            self.workspace_name,
            self.linked_service_name,
        )

    def __repr__(self):
        return self.__str__()


class Plan(object):
    """
    Difference between the prior state and a desired configuration.
    """

    def __init__(self, changes, requires_replacement):
        self.changes = changes
        self.requires_replacement = requires_replacement

    @property
    def has_changes(self) -> bool:
        return bool(self.changes)

    def __str__(self):
        return "<Plan changes={} replace={}>".format(
            sorted(self.changes), self.requires_replacement
        )

    def __repr__(self):
        return self.__str__()


def _normalize(field, value):
    if value is None and field.default is not None:
        value = field.default
    if field.case_insensitive and isinstance(value, str):
        return value.lower()
    return value


def plan(prior, desired):
    """
    Compare prior state data with a desired `LinkedServiceConfig`.

    Case-only differences are suppressed for case-insensitive fields. Any
    change to a force-new field requires the linked service to be replaced.

    :param prior: State data previously read, `None` when nothing exists.
    :param desired: The desired `LinkedServiceConfig`.
    :return: `Plan`
    """
    prior = prior or {}
    wanted = desired.to_dict()
    changes = OrderedDict()
    replace = False

    for name, field in SCHEMA.items():
        if field.computed:
            continue

        old, new = prior.get(name), wanted.get(name)
        if _normalize(field, old) == _normalize(field, new):
            continue

        changes[name] = (old, new)
        replace = replace or field.force_new

    return Plan(changes, requires_replacement=bool(prior) and replace)
