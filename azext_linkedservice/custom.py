# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from azure.cli.core.azclierror import ResourceNotFoundError
from azure.cli.core.commands.client_factory import get_subscription_id
from azext_linkedservice._config import load_config_file
from azext_linkedservice._util import linked_service_id
from azext_linkedservice.constants import DEFAULT_LINKED_SERVICE_NAME
from azext_linkedservice.resource import ResourceState
from azext_linkedservice.schema import PROPERTIES_RESOURCE_ID, SCHEMA, LinkedServiceConfig
from knack.log import get_logger

# pylint:disable=line-too-long

logger = get_logger(__name__)


def _not_found(linked_service_name, workspace_name, resource_group_name):
    return ResourceNotFoundError(
        'Linked Service "{}" was not found in Workspace "{}" / Resource Group "{}".'.format(
            linked_service_name, workspace_name, resource_group_name))


def _read(cmd, client, resource_group_name, workspace_name, linked_service_name):
    rid = linked_service_id(get_subscription_id(cmd.cli_ctx), resource_group_name,
                            workspace_name, linked_service_name)
    state = client.read(rid)
    if not state.is_present:
        raise _not_found(linked_service_name, workspace_name, resource_group_name)
    return state


def create_linked_service(cmd, client, resource_group_name=None, workspace_name=None, resource_id=None,
                          linked_service_name=None, tags=None, config_file=None):
    raw = load_config_file(config_file) if config_file else {}

    # Explicit arguments take precedence over the configuration file
    overrides = {
        'resource_group_name': resource_group_name,
        'workspace_name': workspace_name,
        'linked_service_name': linked_service_name,
        'tags': tags,
    }
    raw.update({k: v for k, v in overrides.items() if v is not None})
    if resource_id is not None:
        raw['linked_service_properties'] = {PROPERTIES_RESOURCE_ID: resource_id}

    config = LinkedServiceConfig.from_dict(raw)
    logger.info("Creating %s", config)

    return client.create_or_update(config, ResourceState.absent()).to_dict()


def update_linked_service(cmd, client, resource_group_name, workspace_name,
                          linked_service_name=DEFAULT_LINKED_SERVICE_NAME, resource_id=None, tags=None):
    state = _read(cmd, client, resource_group_name, workspace_name, linked_service_name)

    raw = {k: v for k, v in state.data.items() if not SCHEMA[k].computed}
    if resource_id is not None:
        raw['linked_service_properties'] = {PROPERTIES_RESOURCE_ID: resource_id}
    if tags is not None:
        raw['tags'] = tags

    config = LinkedServiceConfig.from_dict(raw)
    return client.apply(config, state).to_dict()


def show_linked_service(cmd, client, resource_group_name, workspace_name,
                        linked_service_name=DEFAULT_LINKED_SERVICE_NAME):
    return _read(cmd, client, resource_group_name, workspace_name, linked_service_name).to_dict()


def list_linked_services(client, resource_group_name, workspace_name):
    return [s.to_dict() for s in client.list_by_workspace(resource_group_name, workspace_name)]


def delete_linked_service(cmd, client, resource_group_name, workspace_name,
                          linked_service_name=DEFAULT_LINKED_SERVICE_NAME):
    rid = linked_service_id(get_subscription_id(cmd.cli_ctx), resource_group_name,
                            workspace_name, linked_service_name)
    client.delete(rid)


def import_linked_service(client, linked_service_resource_id):
    state = client.import_state(linked_service_resource_id)
    if not state.is_present:
        raise ResourceNotFoundError(
            'Cannot import non-existent remote object "{}".'.format(linked_service_resource_id))
    return state.to_dict()
