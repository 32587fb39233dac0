"""Testing utilities for OrderTreeLib consumers."""

from .fixtures import TreeTestHelper, ReleaseTracker, TrackedElement

__all__ = ['TreeTestHelper', 'ReleaseTracker', 'TrackedElement']
