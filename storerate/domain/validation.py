"""
Validation result types.
Rules append messages to a ValidationErrors collection instead of raising;
services hand the collection back to the caller inside a SaveResult.
"""

from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from storerate.core.exceptions import RecordInvalidException

T = TypeVar("T")

BASE = "base"


class ValidationErrors:
    """Field-scoped error messages. Record-level rules use the 'base' key."""

    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, []).append(message)

    def merge(self, other: "ValidationErrors") -> None:
        for field, messages in other.as_dict().items():
            for message in messages:
                self.add(field, message)

    def __getitem__(self, field: str) -> List[str]:
        return list(self._errors.get(field, []))

    def __contains__(self, field: str) -> bool:
        return field in self._errors

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._errors.values())

    def __bool__(self) -> bool:
        return bool(self._errors)

    def as_dict(self) -> Dict[str, List[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def full_messages(self) -> List[str]:
        """Human-readable messages, e.g. "Email has already been taken"."""
        messages = []
        for field, field_messages in self._errors.items():
            for message in field_messages:
                if field == BASE:
                    messages.append(message)
                else:
                    label = field.replace("_", " ").capitalize()
                    messages.append(f"{label} {message}")
        return messages

    def __repr__(self):
        return f"<ValidationErrors {self._errors}>"


class SaveResult(Generic[T]):
    """Outcome of a validate-then-write operation."""

    def __init__(self, record: T, errors: Optional[ValidationErrors] = None):
        self.record = record
        self.errors = errors or ValidationErrors()

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        """Return the saved record or raise RecordInvalidException."""
        if self.errors:
            raise RecordInvalidException(
                "Validation failed: " + ", ".join(self.errors.full_messages()),
                details=self.errors.as_dict(),
            )
        return self.record

    def __repr__(self):
        return f"<SaveResult ok={self.ok} record={self.record!r}>"
