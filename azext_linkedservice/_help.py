# coding=utf-8
# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from knack.help_files import helps  # pylint: disable=unused-import


helps['loganalytics'] = """
    type: group
    short-summary: Commands to manage Log Analytics workspace resources.
"""

helps['loganalytics linked-service'] = """
    type: group
    short-summary: Commands to Create, Update, Get, List, Import and Delete Log Analytics workspace linked services.
"""

helps['loganalytics linked-service create'] = """
    type: command
    short-summary: Link a resource, such as an Automation account, to a Log Analytics workspace.
    long-summary: >
        When the `linkedservice.require_import` configuration option is enabled, creating a linked service that already
        exists fails and the existing linked service must be imported instead.
    examples:
        - name: Link an Automation account to a workspace.
          text: >
            az loganalytics linked-service create -g rg1 -w ws1 --resource-id
            /subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/rg1/providers/Microsoft.Automation/automationAccounts/acct1
        - name: Create a linked service from a configuration file.
          text: >
            az loganalytics linked-service create --config-file linked-service.yaml
"""

helps['loganalytics linked-service update'] = """
    type: command
    short-summary: Update a linked service. Changing the linked resource replaces the linked service.
    examples:
        - name: Update the tags of a linked service.
          text: >
            az loganalytics linked-service update -g rg1 -w ws1 --tags env=prod
"""

helps['loganalytics linked-service show'] = """
    type: command
    short-summary: Get details of a linked service.
"""

helps['loganalytics linked-service list'] = """
    type: command
    short-summary: List the linked services of a workspace.
"""

helps['loganalytics linked-service delete'] = """
    type: command
    short-summary: Delete a linked service. Deleting a linked service that no longer exists succeeds.
"""

helps['loganalytics linked-service import'] = """
    type: command
    short-summary: Import an existing linked service by its ID.
    examples:
        - name: Import an existing linked service.
          text: >
            az loganalytics linked-service import --id
            /subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/rg1/providers/Microsoft.OperationalInsights/workspaces/ws1/linkedServices/automation
"""
