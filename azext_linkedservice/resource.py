# ------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# ------------------------------------------------------------------------------

"""
Lifecycle of a Log Analytics workspace linked service.
"""

from azure.core.exceptions import AzureError
from azure.mgmt.loganalytics.models import LinkedService
from azext_linkedservice._util import (
    expand_tags,
    flatten_tags,
    parse_linked_service_id,
)
from azext_linkedservice.constants import RESOURCE_TYPE_NAME
from azext_linkedservice.exceptions import (
    ImportAsExistsError,
    LinkedServiceRequestError,
    PostWriteVerificationError,
    response_was_not_found,
)
from azext_linkedservice.schema import PROPERTIES_RESOURCE_ID, plan
from knack.log import get_logger

__all__ = [
    "LinkedServiceResource",
    "ResourceState",
    "expand_linked_service_properties",
    "flatten_linked_service_properties",
]

logger = get_logger(__name__)


class ResourceState(object):
    """
    Tracked state of a linked service, either present with an ID and its
    schema data or absent.
    """

    def __init__(self, id=None, data=None):
        self._id = id or None
        self._data = dict(data or {}) if self._id else {}

    @classmethod
    def absent(cls):
        return cls()

    @classmethod
    def present(cls, id, data):
        if not id:
            raise ValueError("A present resource state requires an ID.")
        return cls(id=id, data=data)

    @property
    def id(self):
        return self._id

    @property
    def data(self) -> dict:
        return dict(self._data)

    @property
    def is_present(self) -> bool:
        return self._id is not None

    def to_dict(self) -> dict:
        if not self.is_present:
            return {}

        result = {"id": self._id}
        result.update(self._data)
        return result

    def __eq__(self, other):
        return (
            isinstance(other, ResourceState)
            and self.id == other.id
            and self.data == other.data
        )

    def __str__(self):
        if not self.is_present:
            return "<ResourceState absent>"
        return "<ResourceState present {}>".format(self._id)

    def __repr__(self):
        return self.__str__()


def expand_linked_service_properties(properties, tags=None):
    """
    Build the create-or-update payload from the schema shaped properties.
    """
    return LinkedService(
        tags=expand_tags(tags),
        resource_id=properties[PROPERTIES_RESOURCE_ID],
    )


def flatten_linked_service_properties(linked_service):
    """
    Flatten the remote linked service properties into the schema shape. The
    inverse of `expand_linked_service_properties`.
    """
    if linked_service is None:
        return {}

    properties = {}

    resource_id = getattr(linked_service, "resource_id", None)
    if resource_id is not None:
        properties[PROPERTIES_RESOURCE_ID] = resource_id

    return properties


def _to_state(linked_service, id):
    return ResourceState.present(
        linked_service.id,
        {
            "name": linked_service.name,
            "resource_group_name": id.resource_group_name,
            "workspace_name": id.workspace_name,
            "linked_service_name": id.linked_service_name,
            "linked_service_properties": flatten_linked_service_properties(
                linked_service
            ),
            "tags": flatten_tags(linked_service.tags),
        },
    )


def _describe(linked_service_name, workspace_name, resource_group_name):
    return "{!r} (Workspace {!r} / Resource Group {!r})".format(
        linked_service_name, workspace_name, resource_group_name
    )


class LinkedServiceResource(object):
    """
    Create, read, update, delete and import a workspace linked service.

    :param client: `azure.mgmt.loganalytics` `LinkedServicesOperations`.
    :param require_import: Fail instead of adopting a linked service that
                           already exists when creating a new one.
    """

    def __init__(self, client, require_import=False):
        self._client = client
        self._require_import = require_import

    def create_or_update(self, config, state=None):
        """
        Create or update the linked service described by `config`.

        :param config: The desired `LinkedServiceConfig`.
        :param state: Tracked `ResourceState`. Absent for a new resource.
        :return: The `ResourceState` read back after the write.
        """
        state = state or ResourceState.absent()
        rg = config.resource_group_name
        ws = config.workspace_name
        name = config.linked_service_name
        what = _describe(name, ws, rg)

        logger.info(
            "preparing arguments for Log Analytics Linked Service creation."
        )

        if self._require_import and not state.is_present:
            existing = None
            try:
                existing = self._client.get(rg, ws, name)
            except AzureError as e:
                if not response_was_not_found(e):
                    raise LinkedServiceRequestError(
                        "Error checking for presence of existing Linked "
                        "Service {}: {}".format(what, e),
                        cause=e,
                    )

            existing_id = getattr(existing, "id", None)
            if existing_id:
                raise ImportAsExistsError(RESOURCE_TYPE_NAME, existing_id)

        parameters = expand_linked_service_properties(
            config.linked_service_properties, config.tags
        )
        logger.debug("Linked Service %s payload: %s", what, parameters)

        try:
            self._client.begin_create_or_update(rg, ws, name, parameters).result()
        except AzureError as e:
            raise LinkedServiceRequestError(
                "Error creating Linked Service {}: {}".format(what, e),
                cause=e,
            )

        try:
            read = self._client.get(rg, ws, name)
        except AzureError as e:
            raise PostWriteVerificationError(
                "Error retrieving Linked Service {}: {}".format(what, e),
                cause=e,
            )

        if read is None or not getattr(read, "id", None):
            raise PostWriteVerificationError(
                "Cannot read Linked Service {} ID".format(what)
            )

        logger.debug("Linked Service %s has ID %s", what, read.id)

        return self.read(read.id)

    def read(self, resource_id):
        """
        Refresh a linked service from the remote API.

        :param resource_id: The persisted linked service ID.
        :return: Present `ResourceState`, or absent if it no longer exists.
        :raises ResourceIdParseError: before any request when `resource_id`
                                      is malformed.
        """
        id = parse_linked_service_id(resource_id)
        rg = id.resource_group_name
        ws = id.workspace_name
        name = id.linked_service_name

        try:
            resp = self._client.get(rg, ws, name)
        except AzureError as e:
            if response_was_not_found(e):
                logger.warning(
                    "Linked Service %s was not found, removing from state.",
                    _describe(name, ws, rg),
                )
                return ResourceState.absent()

            raise LinkedServiceRequestError(
                "Error making Read request on Log Analytics Linked Service "
                "{}: {}".format(_describe(name, ws, rg), e),
                cause=e,
            )

        if resp is None or not getattr(resp, "id", None):
            return ResourceState.absent()

        return _to_state(resp, id)

    def delete(self, resource_id):
        """
        Delete a linked service. Deleting one that is already gone succeeds.

        :raises ResourceIdParseError: before any request when `resource_id`
                                      is malformed.
        """
        id = parse_linked_service_id(resource_id)
        rg = id.resource_group_name
        ws = id.workspace_name
        name = id.linked_service_name

        try:
            self._client.begin_delete(rg, ws, name).result()
        except AzureError as e:
            if response_was_not_found(e):
                logger.debug(
                    "Linked Service %s is already deleted.",
                    _describe(name, ws, rg),
                )
                return

            raise LinkedServiceRequestError(
                "Error deleting Linked Service {}: {}".format(
                    _describe(name, ws, rg), e
                ),
                cause=e,
            )

    def import_state(self, resource_id):
        return self.read(resource_id)

    def apply(self, config, state=None):
        """
        Converge the linked service towards `config`, replacing it when a
        create-only field changed.

        :return: The resulting `ResourceState`.
        """
        state = state or ResourceState.absent()
        if not state.is_present:
            return self.create_or_update(config, ResourceState.absent())

        diff = plan(state.data, config)
        logger.debug("Linked Service plan for %s: %s", state.id, diff)

        if not diff.has_changes:
            return state

        if diff.requires_replacement:
            logger.info(
                "Replacing Linked Service %s, changed: %s",
                state.id,
                ", ".join(diff.changes),
            )
            self.delete(state.id)
            return self.create_or_update(config, ResourceState.absent())

        return self.create_or_update(config, state)

    def list_by_workspace(self, resource_group_name, workspace_name):
        """
        List the linked services of a workspace as present states.
        """
        try:
            items = list(
                self._client.list_by_workspace(
                    resource_group_name, workspace_name
                )
            )
        except AzureError as e:
            raise LinkedServiceRequestError(
                "Error listing Linked Services (Workspace {!r} / Resource "
                "Group {!r}): {}".format(workspace_name, resource_group_name, e),
                cause=e,
            )

        return [
            _to_state(item, parse_linked_service_id(item.id))
            for item in items
            if getattr(item, "id", None)
        ]
