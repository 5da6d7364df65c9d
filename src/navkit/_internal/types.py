"""Shared type aliases used across navkit modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route factory: receives captured parameters positionally
Factory: TypeAlias = Callable[..., Any]

# Platform collaborator that opens external URLs
URLOpener: TypeAlias = Callable[[str], object]
