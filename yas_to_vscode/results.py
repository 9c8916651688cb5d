"""Result containers shared by the conversion stages."""

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from .errors import ConversionWarning

T = TypeVar("T")


@dataclass
class Converted(Generic[T]):
    """A conversion result together with the warnings raised producing it."""

    result: T
    warnings: List[ConversionWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when nothing was flagged."""
        return not self.warnings
