# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------
# pylint: disable=line-too-long

from knack.arguments import CLIArgumentType
from azure.cli.core.commands.parameters import (
    get_enum_type,
    resource_group_name_type,
    tags_type
)
from .constants import ALLOWED_LINKED_SERVICE_NAMES, COMMAND_GROUP


def load_arguments(self, _):
    workspace_name_type = CLIArgumentType(options_list=['--workspace-name', '-w'], help='Name of the Log Analytics workspace.', id_part='name')
    linked_service_name_type = CLIArgumentType(options_list=['--name', '-n'], overrides=get_enum_type(ALLOWED_LINKED_SERVICE_NAMES), help='Name of the linked service.', id_part='child_name_1')

    with self.argument_context(COMMAND_GROUP) as c:
        c.argument('resource_group_name', resource_group_name_type)
        c.argument('workspace_name', workspace_name_type)
        c.argument('linked_service_name', linked_service_name_type)
        c.argument('resource_id', options_list=['--resource-id'], help='ID of the resource to link to the workspace, e.g. the full ID of an Automation account in the format /subscriptions/.../resourceGroups/.../providers/Microsoft.Automation/automationAccounts/...')
        c.argument('tags', tags_type)

    with self.argument_context(COMMAND_GROUP + ' create') as c:
        c.argument('resource_group_name', resource_group_name_type)
        c.argument('workspace_name', workspace_name_type, id_part=None)
        c.argument('linked_service_name', linked_service_name_type, id_part=None)
        c.argument('config_file', options_list=['--config-file', '-f'], help='YAML file with the linked service arguments (resource_group_name, workspace_name, linked_service_name, linked_service_properties.resource_id, tags). Explicit arguments take precedence.')

    with self.argument_context(COMMAND_GROUP + ' list') as c:
        c.argument('workspace_name', workspace_name_type, id_part=None)

    with self.argument_context(COMMAND_GROUP + ' import') as c:
        c.argument('linked_service_resource_id', options_list=['--id'], help='Full ID of the existing linked service to import.')
