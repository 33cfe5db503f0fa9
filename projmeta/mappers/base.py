"""Base class for per-format field mappers."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..models import ConfigKind, UnifiedMetadata


class FieldMapper(ABC):
    """Contract for projecting a parsed config document onto UnifiedMetadata."""

    kind: ClassVar[ConfigKind]

    @abstractmethod
    def map(self, document: Any) -> UnifiedMetadata:
        """Return the unified record for ``document``. Must never raise."""
