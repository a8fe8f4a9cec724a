# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------
# pylint: disable=unused-import

from azure.cli.core import AzCommandsLoader
from azure.cli.core.commands import CliCommandType
from azext_linkedservice._client_factory import cf_linked_service_resource
from azext_linkedservice._help import helps
from azext_linkedservice.commands import load_command_table
from azext_linkedservice._params import load_arguments


class LinkedServiceCommandsLoader(AzCommandsLoader):

    def __init__(self, cli_ctx=None):
        linked_service_custom = CliCommandType(
            operations_tmpl='azext_linkedservice.custom#{}',
            client_factory=cf_linked_service_resource)
        super(LinkedServiceCommandsLoader, self).__init__(cli_ctx=cli_ctx, custom_command_type=linked_service_custom)

    def load_command_table(self, args):
        load_command_table(self, args)
        return self.command_table

    def load_arguments(self, command):
        load_arguments(self, command)


COMMAND_LOADER_CLS = LinkedServiceCommandsLoader
