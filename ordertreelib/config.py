"""Configuration system for OrderTreeLib.

This module defines how users tune an OrderedTree: how traversals are
executed, how display() formats its output, and how bulk builds react
to records they cannot insert.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TextIO, List


class TraversalMode(Enum):
    """How tree walks are executed.

    Both modes visit nodes in the same order. Recursive mode is bounded
    by the interpreter's recursion limit, which an unbalanced tree built
    from sorted input reaches quickly.
    """
    RECURSIVE = "recursive"     # Generator/function recursion
    ITERATIVE = "iterative"     # Explicit stack (safe for deep trees)


class RejectReason(Enum):
    """Why a bulk build dropped a candidate element."""
    PARSE_FAILED = "parse_failed"   # parse_record() returned False
    PARSE_ERROR = "parse_error"     # parse_record() raised
    DUPLICATE = "duplicate"         # Equal element already in the tree


@dataclass
class DisplayConfig:
    """Configuration for OrderedTree.display()."""

    separator: str = "  "               # Written after every element
    end: str = ""                       # Written once after the last element
    output: Optional[TextIO] = None     # None means sys.stdout at call time

    def validate(self) -> List[str]:
        """Validate display settings.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.separator, str):
            errors.append("separator must be a string")
        if not isinstance(self.end, str):
            errors.append("end must be a string")
        if self.output is not None and not hasattr(self.output, "write"):
            errors.append("output must be a writable text stream")
        return errors


@dataclass
class BuildConfig:
    """Configuration for bulk builds from a record stream."""

    skip_errors: bool = True                # Drop bad records vs fail fast
    verbose: bool = False                   # Print warnings for dropped records
    max_rejections: Optional[int] = None    # Give up after this many drops

    def validate(self) -> List[str]:
        """Validate build settings.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if self.max_rejections is not None and self.max_rejections < 0:
            errors.append("max_rejections cannot be negative")
        if not self.skip_errors and self.max_rejections is not None:
            errors.append("max_rejections has no effect when skip_errors is False")
        return errors

    def create_policy(self):
        """Create the rejection policy these settings describe.

        Returns:
            A fresh RejectionPolicy instance
        """
        from .error_policies import create_rejection_policy

        return create_rejection_policy(
            strict=not self.skip_errors,
            verbose=self.verbose,
            max_rejections=self.max_rejections,
        )


@dataclass
class TreeConfig:
    """Complete configuration for an OrderedTree.

    The default configuration matches the tree's classic behaviour:
    two-space separated display, best-effort bulk builds that silently
    drop bad records. Traversals use an explicit stack by default.
    """

    mode: TraversalMode = TraversalMode.ITERATIVE
    display: DisplayConfig = field(default_factory=DisplayConfig)
    build: BuildConfig = field(default_factory=BuildConfig)

    # Convenience constructors for common configurations

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Create config whose bulk builds stop at the first bad record.

        Returns:
            TreeConfig with fail-fast builds
        """
        return cls(build=BuildConfig(skip_errors=False))

    @classmethod
    def recursive(cls) -> 'TreeConfig':
        """Create config using plain recursion for every tree walk.

        Returns:
            TreeConfig with recursive traversal
        """
        return cls(mode=TraversalMode.RECURSIVE)

    @classmethod
    def line_per_element(cls, output: Optional[TextIO] = None) -> 'TreeConfig':
        """Create config whose display writes one element per line.

        Args:
            output: Stream to display to (default sys.stdout)

        Returns:
            TreeConfig with newline separated display
        """
        return cls(display=DisplayConfig(separator="\n", output=output))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, TraversalMode):
            errors.append(f"mode must be a TraversalMode, got {self.mode!r}")

        errors.extend(self.display.validate())
        errors.extend(self.build.validate())

        return errors
