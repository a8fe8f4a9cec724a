# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

# pylint: disable=line-too-long
from ._format import linked_service_show_table_format
from ._format import linked_service_list_table_format
from .constants import COMMAND_GROUP


def load_command_table(self, _):

    with self.command_group(COMMAND_GROUP) as g:
        g.custom_command('create', 'create_linked_service')
        g.custom_command('update', 'update_linked_service')
        g.custom_show_command('show', 'show_linked_service', table_transformer=linked_service_show_table_format)
        g.custom_command('delete', 'delete_linked_service', confirmation=True)
        g.custom_command('list', 'list_linked_services', table_transformer=linked_service_list_table_format)
        g.custom_command('import', 'import_linked_service')
