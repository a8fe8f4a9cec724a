# ------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# ------------------------------------------------------------------------------

RESOURCE_TYPE_NAME = "loganalytics linked-service"
"""
Name of the managed resource type as reported in import errors.
"""

COMMAND_GROUP = "loganalytics linked-service"
"""
Command group the extension registers its commands under.
"""

RESOURCE_NAMESPACE = "Microsoft.OperationalInsights"
WORKSPACE_RESOURCE_TYPE = "workspaces"
LINKED_SERVICE_CHILD_TYPE = "linkedServices"

DEFAULT_LINKED_SERVICE_NAME = "automation"
"""
Linked service name used when none is supplied.
"""

ALLOWED_LINKED_SERVICE_NAMES = [DEFAULT_LINKED_SERVICE_NAME]
"""
Linked service names the service accepts.
"""

# -- naming rules --
WORKSPACE_NAME_MIN_LENGTH = 4
WORKSPACE_NAME_MAX_LENGTH = 63
RESOURCE_GROUP_NAME_MAX_LENGTH = 90

# -- tag limits --
MAX_TAG_COUNT = 50
MAX_TAG_KEY_LENGTH = 512
MAX_TAG_VALUE_LENGTH = 256

# -- configuration --
CONFIG_SECTION = "linkedservice"
"""
Azure CLI configuration section read by the extension. Options may also be set
through `AZURE_LINKEDSERVICE_<OPTION>` environment variables.
"""

CONFIG_REQUIRE_IMPORT = "require_import"
"""
When enabled, creating a linked service that already exists fails instead of
adopting the existing resource.
"""
