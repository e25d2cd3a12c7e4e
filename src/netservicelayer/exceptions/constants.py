# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

# Error codes as seen by API callers
INVALID_ARGUMENT_CODE = "InvalidArgument"
RESOURCE_NOT_FOUND_CODE = "ResourceNotFound"
INTERNAL_ERROR_CODE = "InternalError"
NOT_IMPLEMENTED_CODE = "NotImplemented"
UNAUTHORIZED_CODE = "Unauthorized"
NOT_AUTHORIZED_CODE = "NotAuthorized"

# Generic
INVALID_ARGUMENT_VIOLATION_TYPE = "InvalidArgumentViolation"
UNEXISTING_RESOURCE_VIOLATION_TYPE = "UnexistingResourceViolation"
BACKEND_VIOLATION_TYPE = "BackendViolation"

# Fabric networks
CANNOT_DELETE_DEFAULT_NETWORK_VIOLATION_TYPE = (
    "CannotDeleteDefaultNetworkViolation"
)
MISSING_DEFAULT_NETWORK_VIOLATION_TYPE = "MissingDefaultNetworkViolation"
TOO_MANY_RESOLVERS_VIOLATION_TYPE = "TooManyResolversViolation"

# Feature gates
FABRICS_DISABLED_VIOLATION_TYPE = "FabricsDisabledViolation"
