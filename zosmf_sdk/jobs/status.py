"""
Job status enumeration

z/OSMF reports a job as INPUT (queued), ACTIVE (running) or OUTPUT
(finished, output on spool). The statuses form a total order which the
monitor uses to decide whether a desired status has already been passed.
"""

from __future__ import annotations

from enum import Enum

from zosmf_sdk.shared.exceptions import InvalidParameterError


class JobStatus(str, Enum):
    INPUT = "INPUT"
    ACTIVE = "ACTIVE"
    OUTPUT = "OUTPUT"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: JobStatus | str) -> JobStatus:
        """Return the member for value.

        Raises:
            InvalidParameterError: when value is not a known status
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        known = ", ".join(JOB_STATUS_ORDER)
        raise InvalidParameterError(f"invalid job status {value!r}, expected one of {known}")


# natural order a job moves through; new states go in their lifecycle position
JOB_STATUS_ORDER: tuple[str, ...] = (
    JobStatus.INPUT.value,
    JobStatus.ACTIVE.value,
    JobStatus.OUTPUT.value,
)


def order_index_of_status(status_name: str | None) -> int:
    """Position of status_name in JOB_STATUS_ORDER, or -1 if unknown."""
    if status_name is None:
        return -1
    try:
        return JOB_STATUS_ORDER.index(str(status_name))
    except ValueError:
        return -1
