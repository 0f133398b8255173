"""Domain enumerations for clouddriver."""

from enum import Enum


class WorkloadState(str, Enum):
    """Coarse lifecycle state of a cluster workload.

    The value strings are the vocabulary the orchestration layer reports
    upstream, so they keep their capitalized form.
    """

    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    # Defined for snapshot shapes not yet interpreted; never derived today.
    UNKNOWN = "Unknown"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid state values as strings."""
        return [state.value for state in cls]


class ResourceField(str, Enum):
    """Resource columns that may be named in a distinct-projection query."""

    ACCOUNT_NAME = "account_name"
    SPINNAKER_APP = "spinnaker_app"
    TASK_ID = "task_id"
    API_GROUP = "api_group"
    KIND = "kind"
    NAME = "name"
    NAMESPACE = "namespace"
    RESOURCE_BODY = "resource_body"
    VERSION = "version"

    @classmethod
    def values(cls) -> list[str]:
        """Return all column names as strings."""
        return [field.value for field in cls]
