# ------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# ------------------------------------------------------------------------------

from azure.cli.core.azclierror import (
    AzureResponseError,
    UserFault,
    ValidationError,
)
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
from azext_linkedservice.constants import COMMAND_GROUP

__all__ = [
    "ImportAsExistsError",
    "LinkedServiceRequestError",
    "PostWriteVerificationError",
    "ResourceIdParseError",
    "response_was_not_found",
]


class ResourceIdParseError(ValidationError):
    """
    The persisted identifier does not describe a workspace linked service.
    """

    def __init__(self, resource_id, reason):
        super(ResourceIdParseError, self).__init__(
            "Cannot parse linked service ID {!r}: {}".format(
                resource_id, reason
            )
        )
        self.resource_id = resource_id


class ImportAsExistsError(UserFault):
    """
    Raised when creating a resource that already exists remotely while the
    strict import policy is on.
    """

    def __init__(self, resource_type, resource_id):
        super(ImportAsExistsError, self).__init__(
            "A resource with the ID {!r} already exists - to be managed via "
            "this command it needs to be imported into the state. Please see "
            "the documentation for {!r} for more information.".format(
                resource_id, resource_type
            ),
            recommendation="az {} import --id {}".format(
                COMMAND_GROUP, resource_id
            ),
        )
        self.resource_id = resource_id


class LinkedServiceRequestError(AzureResponseError):
    """
    A request against the linked services API failed.
    """

    def __init__(self, message, cause=None):
        super(LinkedServiceRequestError, self).__init__(message)
        self.cause = cause


class PostWriteVerificationError(LinkedServiceRequestError):
    """
    The write was accepted but the linked service could not be read back.
    """


def response_was_not_found(error):
    """
    Indicates if an SDK error represents an HTTP 404.
    """
    if isinstance(error, ResourceNotFoundError):
        return True

    return (
        isinstance(error, HttpResponseError)
        and getattr(error, "status_code", None) == 404
    )
