"""Deeplink configuration.

DeeplinkConfig is a frozen dataclass, immutable after creation.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeeplinkConfig:
    """Options applied when a matched deeplink is dispatched.

    ::

        config = DeeplinkConfig(dismiss_before_navigating=True)
        parser = DeeplinkParser.for_deeplinks(Deeplinks, config)
    """

    # Clear the stack and every presentation slot before navigating
    dismiss_before_navigating: bool = False

    @classmethod
    def default(cls) -> "DeeplinkConfig":
        """Return the default configuration."""
        return cls()
