"""
Greeting domain service.

Builds the greeting returned by the Hello RPC. A missing name falls back to
a fixed placeholder; an empty name is still a name.
"""

from dataclasses import dataclass

GREETING_PREFIX = "Hello "
GREETING_SUFFIX = "!"
ANONYMOUS_NAME = "Anonymous"


@dataclass(frozen=True)
class GreetingService:
    """Domain service producing greeting messages."""

    default_name: str = ANONYMOUS_NAME

    def greet(self, name: str | None = None) -> str:
        """
        Build a greeting for the given name.

        Args:
            name: Name to greet, or None when the caller sent none

        Returns:
            "Hello <name>!", using the default name when name is None
        """
        if name is None:
            name = self.default_name
        return f"{GREETING_PREFIX}{name}{GREETING_SUFFIX}"
