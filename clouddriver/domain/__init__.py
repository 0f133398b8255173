"""Domain layer: enums, exceptions, and workload state derivation.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from clouddriver.domain.enums import ResourceField, WorkloadState
from clouddriver.domain.exceptions import (
    BackendUnavailableException,
    ClouddriverException,
    ConstraintViolationException,
    InvalidArgumentException,
    NotFoundException,
)
from clouddriver.domain.workload_status import Job, WorkloadSnapshot, derive_state

__all__ = [
    # Enums
    "ResourceField",
    "WorkloadState",
    # Exceptions
    "BackendUnavailableException",
    "ClouddriverException",
    "ConstraintViolationException",
    "InvalidArgumentException",
    "NotFoundException",
    # Workload status
    "Job",
    "WorkloadSnapshot",
    "derive_state",
]
