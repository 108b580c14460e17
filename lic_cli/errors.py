"""Errors surfaced to the user by the lic command."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Union


class LicenseError(Exception):
    """Base class for failures reported by ``lic`` before exiting non-zero."""


class UnknownLicense(LicenseError, LookupError):
    def __init__(self, identifier: str, choices: Sequence[str]) -> None:
        self.identifier = identifier
        self.choices = tuple(choices)
        super().__init__(
            f"Unsupported license '{identifier}'. Valid identifiers: {', '.join(self.choices)}"
        )


class WriteFailure(LicenseError):
    def __init__(self, path: Path, error: Union[OSError, UnicodeError]) -> None:
        self.path = path
        self.error = error
        reason = getattr(error, "strerror", None) or str(error)
        super().__init__(f"Failed to write {path}: {reason}")


class MissingAuthor(LicenseError):
    def __init__(self) -> None:
        super().__init__("Author name not found. Please provide via --author or configure git.")


class UnresolvedPlaceholder(LicenseError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Unresolved placeholders in template: {', '.join(self.names)}")


class PromptAborted(LicenseError):
    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"No value given for '{prompt}'; input closed.")
