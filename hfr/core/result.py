"""Result type for explicit error handling.

Every fallible step of a release (listing tags, resolving the next version,
running the editor, writing the commit message) returns a Result instead of
raising, so the CLI layer decides how each failure is reported and which
exit code it maps to.

Usage:
    match resolve_next_tag("svc", "patch", ["svc-1.2.3"]):
        case Ok(resolved):
            print(resolved.new_tag)
        case Err(error):
            print(f"cannot release: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error payload.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
