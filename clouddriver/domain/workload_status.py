"""Workload lifecycle state derivation.

Translates the status fields of a Kubernetes Job into the coarse
lifecycle vocabulary used by the orchestration layer. Pure functions only:
no I/O and no shared state, so callers may invoke them concurrently.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from clouddriver.domain.enums import WorkloadState

FAILED_CONDITION = "Failed"


@dataclass(frozen=True)
class WorkloadSnapshot:
    """The raw fields of a workload needed to derive its state.

    Attributes:
        completion_time: Completion timestamp as reported by the cluster, or None
            when the workload has not recorded completion.
        completions: Declared number of required completions, if any.
        succeeded: Observed succeeded count, if reported.
        condition_types: Condition type strings in the order reported.
    """

    completion_time: Any = None
    completions: int | None = None
    succeeded: int | None = None
    condition_types: tuple[str, ...] = ()

    @property
    def completed(self) -> bool:
        return self.completion_time is not None and self.completion_time != ""

    @classmethod
    def from_manifest(cls, obj: Any) -> "WorkloadSnapshot":
        """Build a snapshot from an unstructured Job object (dict from the API).

        Malformed or missing sections are read as absent rather than raising.
        """
        spec = _section(obj, "spec")
        status = _section(obj, "status")
        conditions = status.get("conditions")
        condition_types: list[str] = []
        if isinstance(conditions, Sequence) and not isinstance(conditions, str):
            for condition in conditions:
                if isinstance(condition, Mapping):
                    ctype = condition.get("type")
                    if isinstance(ctype, str):
                        condition_types.append(ctype)
        return cls(
            completion_time=status.get("completionTime"),
            completions=_as_count(spec.get("completions")),
            succeeded=_as_count(status.get("succeeded")),
            condition_types=tuple(condition_types),
        )


def _section(obj: Any, key: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        return {}
    value = obj.get(key)
    return value if isinstance(value, Mapping) else {}


def _as_count(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def derive_state(snapshot: WorkloadSnapshot) -> WorkloadState:
    """Return the lifecycle state of a workload snapshot.

    Rules, first match wins:
      1. no completion timestamp -> Running
      2. any condition of type "Failed" -> Failed
      3. succeeded count reaches the declared completions (or is positive when
         none are declared) -> Succeeded
      4. otherwise -> Running (completed but short of the target)

    WorkloadState.UNKNOWN is never returned by these rules.
    """
    if not snapshot.completed:
        return WorkloadState.RUNNING
    if FAILED_CONDITION in snapshot.condition_types:
        return WorkloadState.FAILED
    if snapshot.succeeded is not None:
        if snapshot.completions is not None:
            if snapshot.succeeded >= snapshot.completions:
                return WorkloadState.SUCCEEDED
        elif snapshot.succeeded > 0:
            return WorkloadState.SUCCEEDED
    return WorkloadState.RUNNING


class Job:
    """Thin wrapper around an unstructured Kubernetes Job object."""

    def __init__(self, obj: Mapping[str, Any] | None = None) -> None:
        self._obj: Mapping[str, Any] = obj if obj is not None else {}

    def object(self) -> Mapping[str, Any]:
        """Return the wrapped Job mapping."""
        return self._obj

    def snapshot(self) -> WorkloadSnapshot:
        return WorkloadSnapshot.from_manifest(self._obj)

    def state(self) -> WorkloadState:
        """Derive the lifecycle state of the wrapped Job."""
        return derive_state(self.snapshot())
