# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from azure.cli.core.commands.client_factory import get_mgmt_service_client
from azure.mgmt.loganalytics import LogAnalyticsManagementClient
from azext_linkedservice._config import get_require_import
from azext_linkedservice.resource import LinkedServiceResource


def cf_linked_services(cli_ctx, *_):
    return get_mgmt_service_client(cli_ctx, LogAnalyticsManagementClient).linked_services


def cf_linked_service_resource(cli_ctx, *_):
    return LinkedServiceResource(cf_linked_services(cli_ctx),
                                 require_import=get_require_import(cli_ctx))
