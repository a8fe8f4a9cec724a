# ------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# ------------------------------------------------------------------------------

from azure.cli.core.azclierror import InvalidArgumentValueError
from azext_linkedservice.constants import CONFIG_REQUIRE_IMPORT, CONFIG_SECTION
from knack.log import get_logger

import yaml

logger = get_logger(__name__)


def get_require_import(cli_ctx):
    """
    Reads the strict import policy from the CLI configuration, e.g.
    `az config set linkedservice.require_import=true` or the
    `AZURE_LINKEDSERVICE_REQUIRE_IMPORT` environment variable.
    """
    require_import = cli_ctx.config.getboolean(
        CONFIG_SECTION, CONFIG_REQUIRE_IMPORT, fallback=False
    )
    logger.debug("Linked service strict import policy = %s", require_import)
    return require_import


def load_config_file(path):
    """
    Load a YAML linked service configuration file.

    :return: The raw configuration mapping.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            config = yaml.safe_load(stream)
    except (IOError, OSError) as e:
        raise InvalidArgumentValueError(
            "Unable to read configuration file {!r}: {}".format(path, e)
        )
    except yaml.YAMLError as e:
        raise InvalidArgumentValueError(
            "Configuration file {!r} is not valid YAML: {}".format(path, e)
        )

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise InvalidArgumentValueError(
            "Configuration file {!r} must contain a mapping of linked service "
            "arguments.".format(path)
        )

    logger.debug("Configuration file: %s", path)
    return config
