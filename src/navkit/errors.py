"""Navkit exception hierarchy.

Matching and dispatch never raise for well-typed input: a URL that does
not match is ``None``, a foreign deeplink is a no-op. The types here
cover the setup-time and contract-violation failures that remain.
"""


class NavkitError(Exception):
    """Base for all navkit-specific errors."""


class ConfigurationError(NavkitError):
    """Raised when a route table or codec registration is invalid.

    Surfaces while routes are being declared, never while a URL is
    being matched.
    """


class UninhabitedError(NavkitError):
    """Raised when a placeholder kind with no cases is instantiated.

    Placeholders such as ``NoSheets`` exist only to fill an unused
    capability slot. Reaching one at runtime means the static contract
    of the navigation declaration is broken.
    """

    def __init__(self, kind: type) -> None:
        self.kind = kind
        super().__init__(f"{kind.__name__} has no cases and cannot be instantiated")
