"""Value envelope produced by generators."""

from typing import Any, Callable, Iterable, Iterator


class Shrinkable:
    """A generated value together with a lazy source of smaller candidates.

    Args:
        value: The generated value.
        shrink: Optional zero-argument factory returning an iterable of
            smaller Shrinkable instances. Called again on every shrink().
    """

    __slots__ = ("value", "_shrink")

    def __init__(
        self,
        value: Any,
        shrink: Callable[[], Iterable["Shrinkable"]] | None = None,
    ) -> None:
        self.value = value
        self._shrink = shrink

    def shrink(self) -> Iterator["Shrinkable"]:
        if self._shrink is None:
            return iter(())
        return iter(self._shrink())

    def map(self, mapper: Callable[[Any], Any]) -> "Shrinkable":
        """Map the value and, lazily, every shrink of it."""
        return Shrinkable(
            mapper(self.value),
            lambda: (candidate.map(mapper) for candidate in self.shrink()),
        )

    def __repr__(self) -> str:
        return f"Shrinkable({self.value!r})"
