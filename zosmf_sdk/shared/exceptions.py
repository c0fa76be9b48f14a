"""
Custom exceptions

SDK-level exception classes. HTTP failures live in zosmf_sdk.api.exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zosmf_sdk.jobs.models import StatusWaitResult


class ZosmfSDKError(Exception):
    """Base exception of the SDK"""

    pass


# =============================================================================
# Validation
# =============================================================================


class InvalidParameterError(ZosmfSDKError):
    """A required parameter is missing, empty or out of range"""

    pass


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationError(ZosmfSDKError):
    """Base class of configuration errors"""

    pass


class TeamConfigError(ConfigurationError):
    """Team config file cannot be read or is malformed"""

    pass


# =============================================================================
# Jobs
# =============================================================================


class JobError(ZosmfSDKError):
    """Base class of job errors"""

    pass


class JobNotFoundError(JobError):
    """The job query returned no job"""

    pass


class JobStatusOrderError(JobError):
    """A status is not part of the known job status order"""

    pass


# =============================================================================
# Job monitor
# =============================================================================


class MonitorError(JobError):
    """Base class of job monitor errors"""

    pass


class DesiredStatusNotReachedError(MonitorError):
    """All poll attempts were used without seeing the desired status"""

    def __init__(
        self,
        message: str,
        attempts: int,
        result: StatusWaitResult | None = None,
    ) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.result = result


class MonitorCancelledError(MonitorError):
    """The wait was cancelled by the caller"""

    pass
