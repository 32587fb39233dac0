"""Build planning for OrderTreeLib.

A BuildPlan validates, before any record is read, that a bulk build can
actually run: the configuration is consistent, there is a factory to
produce candidate elements, and those elements satisfy the capability
contract the tree relies on.
"""

from typing import Any, Callable, Dict, List, Optional

from .config import TreeConfig
from .error_policies import RejectionPolicy


class CapabilityMismatchError(Exception):
    """Raised when configuration or element type can't support an operation."""
    pass


def validate_config(config: TreeConfig) -> None:
    """Raise if a configuration is inconsistent.

    Args:
        config: Configuration to check

    Raises:
        CapabilityMismatchError: If config.validate() reports problems
    """
    config_errors = config.validate()
    if config_errors:
        raise CapabilityMismatchError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )


def missing_capabilities(element: Any) -> List[str]:
    """List the element capabilities the tree needs but element lacks.

    Args:
        element: Candidate element instance

    Returns:
        Names of missing capabilities (empty if element is usable)
    """
    cls = type(element)
    missing = []

    if cls.__eq__ is object.__eq__:
        missing.append("equality (__eq__)")
    if cls.__lt__ is object.__lt__:
        missing.append("ordering (__lt__)")
    if cls.__gt__ is object.__gt__:
        missing.append("ordering (__gt__)")
    if not callable(getattr(element, "parse_record", None)):
        missing.append("stream parsing (parse_record)")

    return missing


class BuildPlan:
    """Validated plan for one bulk build.

    The plan is the bridge between a build request and the build loop:
    it resolves the rejection policy, and produces candidate elements,
    checking the first one against the element capability contract.
    """

    def __init__(self, config: TreeConfig,
                 element_factory: Optional[Callable[[], Any]],
                 policy: Optional[RejectionPolicy] = None):
        """Create and validate a build plan.

        Args:
            config: Tree configuration
            element_factory: Callable returning a fresh, empty element
            policy: Rejection policy (default from config.build)

        Raises:
            CapabilityMismatchError: If the build can't run
        """
        validate_config(config)

        if element_factory is None:
            raise CapabilityMismatchError(
                "No element factory: pass one to build_tree() or to the tree"
            )
        if not callable(element_factory):
            raise CapabilityMismatchError(
                f"Element factory is not callable: {element_factory!r}"
            )

        self.config = config
        self.element_factory = element_factory
        self.policy = policy if policy is not None else config.build.create_policy()
        self._checked = False

    def new_candidate(self) -> Any:
        """Create a fresh candidate element.

        Returns:
            Unpopulated element from the factory

        Raises:
            CapabilityMismatchError: If the first candidate lacks a
                capability the build needs
        """
        candidate = self.element_factory()

        if not self._checked:
            missing = missing_capabilities(candidate)
            if missing:
                release = getattr(candidate, "release", None)
                if callable(release):
                    release()
                raise CapabilityMismatchError(
                    f"Element {type(candidate).__name__} lacks: {', '.join(missing)}"
                )
            self._checked = True

        return candidate

    def describe(self) -> Dict[str, Any]:
        """Get a summary of this plan.

        Useful for debugging and logging.

        Returns:
            Dictionary describing the plan
        """
        return {
            'element_factory': getattr(self.element_factory, '__name__',
                                       repr(self.element_factory)),
            'mode': self.config.mode.value,
            'policy': self.policy.__class__.__name__,
        }
