"""
Rejection policies for OrderTreeLib bulk builds.

A bulk build reads records until the stream is exhausted. Records that
cannot be inserted (malformed, duplicate, or whose parser raised) are
handed to a RejectionPolicy, which decides whether the build carries on
or stops. The default policy drops them silently so one bad record never
aborts a whole load.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import sys

from .config import RejectReason


class RecordRejectedError(Exception):
    """Raised by strict policies when a bulk build drops a record."""

    def __init__(self, reason: RejectReason, element: Any = None,
                 line_number: Optional[int] = None):
        self.reason = reason
        self.element = element
        self.line_number = line_number
        location = f" at line {line_number}" if line_number else ""
        super().__init__(f"Record rejected ({reason.value}){location}")


class RejectionPolicy(ABC):
    """
    Base class for rejection policies.

    Subclasses implement different strategies for records that a bulk
    build could not insert into the tree.
    """

    @abstractmethod
    def handle(self, reason: RejectReason, element: Any,
               error: Optional[Exception] = None,
               line_number: Optional[int] = None) -> None:
        """
        Handle a rejected record.

        The element has already been released by the build loop when
        this is called; it is passed for inspection only.

        Args:
            reason: Why the record was dropped
            element: The candidate element that was dropped
            error: Exception raised by parse_record(), for PARSE_ERROR
            line_number: Stream line number when the record was dropped

        Raises:
            Any exception to abort the build.
        """
        pass


class FailFastPolicy(RejectionPolicy):
    """
    Policy that stops the build at the first rejected record.

    Parser exceptions are re-raised unchanged; other rejections raise
    RecordRejectedError. Useful when the input is expected to be clean
    and partial trees are not acceptable.
    """

    def handle(self, reason: RejectReason, element: Any,
               error: Optional[Exception] = None,
               line_number: Optional[int] = None) -> None:
        """Re-raise the error or raise RecordRejectedError."""
        if error is not None:
            raise error
        raise RecordRejectedError(reason, element, line_number)


class CollectRejectionsPolicy(RejectionPolicy):
    """
    Policy that records every rejection and keeps going, silently.

    This is the default: bulk builds never report failure, but the
    collected records can be inspected afterwards.
    """

    def __init__(self):
        """Initialize the policy."""
        self.rejections: List[Dict[str, Any]] = []

    def handle(self, reason: RejectReason, element: Any,
               error: Optional[Exception] = None,
               line_number: Optional[int] = None) -> None:
        """Silently record the rejection."""
        self._record(reason, element, error, line_number)

    def _record(self, reason: RejectReason, element: Any,
                error: Optional[Exception],
                line_number: Optional[int]) -> Dict[str, Any]:
        """Append a rejection record and return it."""
        record = {
            'reason': reason,
            'element': element,
            'line_number': line_number,
            'error': error,
            'error_type': type(error).__name__ if error is not None else None,
            'error_message': str(error) if error is not None else None,
        }
        self.rejections.append(record)
        return record

    def count(self, reason: Optional[RejectReason] = None) -> int:
        """
        Count recorded rejections.

        Args:
            reason: Only count this reason (None counts all)

        Returns:
            Number of matching rejections
        """
        if reason is None:
            return len(self.rejections)
        return sum(1 for r in self.rejections if r['reason'] is reason)

    def get_statistics(self) -> dict:
        """
        Get statistics about rejections encountered.

        Returns:
            Dictionary with rejection counts and details
        """
        return {
            'total_rejections': len(self.rejections),
            'parse_failures': self.count(RejectReason.PARSE_FAILED),
            'parse_errors': self.count(RejectReason.PARSE_ERROR),
            'duplicates': self.count(RejectReason.DUPLICATE),
            'rejections': self.rejections,  # Full details
        }


class ContinueOnRejectionsPolicy(CollectRejectionsPolicy):
    """
    Policy that records rejections, warns about them, and continues.

    Same as CollectRejectionsPolicy but prints a warning to stderr for
    every dropped record when verbose.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when records are dropped
        """
        super().__init__()
        self.verbose = verbose

    def handle(self, reason: RejectReason, element: Any,
               error: Optional[Exception] = None,
               line_number: Optional[int] = None) -> None:
        """Record the rejection and print a warning if verbose."""
        self._record(reason, element, error, line_number)

        if self.verbose:
            location = f"line {line_number}" if line_number else "unknown line"
            if error is not None:
                print(f"\nWARNING: Dropping record at {location}: {error}", file=sys.stderr)
            elif reason is RejectReason.DUPLICATE:
                print(f"\nWARNING: Dropping duplicate '{element}' at {location}", file=sys.stderr)
            else:
                print(f"\nWARNING: Dropping malformed record at {location}", file=sys.stderr)


class ThresholdPolicy(CollectRejectionsPolicy):
    """
    Policy that tolerates rejections up to a threshold, then fails.

    Useful when a few bad records are expected but many indicate the
    input is in the wrong format altogether.
    """

    def __init__(self, max_rejections: int = 10, verbose: bool = False):
        """
        Initialize threshold policy.

        Args:
            max_rejections: Maximum rejections to tolerate before failing
            verbose: If True, print warnings for dropped records
        """
        super().__init__()
        self.max_rejections = max_rejections
        self.verbose = verbose

    def handle(self, reason: RejectReason, element: Any,
               error: Optional[Exception] = None,
               line_number: Optional[int] = None) -> None:
        """Record the rejection if under threshold, otherwise raise."""
        self._record(reason, element, error, line_number)
        total = len(self.rejections)

        if total > self.max_rejections:
            cause = error or RecordRejectedError(reason, element, line_number)
            raise RuntimeError(
                f"Rejection threshold exceeded ({self.max_rejections} records)"
            ) from cause

        if self.verbose:
            print(f"\nWARNING [{total}/{self.max_rejections}]: "
                  f"Dropping record ({reason.value}) at line {line_number}",
                  file=sys.stderr)


def create_rejection_policy(strict: bool = False, verbose: bool = False,
                            max_rejections: Optional[int] = None) -> RejectionPolicy:
    """
    Convenience function to create a rejection policy.

    Args:
        strict: If True, use FailFastPolicy
        verbose: If True, print warnings for dropped records
        max_rejections: If set (and not strict), use ThresholdPolicy

    Returns:
        A RejectionPolicy configured appropriately
    """
    if strict:
        return FailFastPolicy()
    if max_rejections is not None:
        return ThresholdPolicy(max_rejections=max_rejections, verbose=verbose)
    if verbose:
        return ContinueOnRejectionsPolicy(verbose=True)
    return CollectRejectionsPolicy()
