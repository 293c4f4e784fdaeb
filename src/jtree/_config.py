from dataclasses import dataclass


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    allow_extra_data keeps whatever follows the first complete value instead
    of rejecting it. max_depth caps array/object nesting; None leaves only
    the interpreter's recursion limit.
    """

    allow_extra_data: bool = False
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.allow_extra_data, bool):
            raise TypeError("allow_extra_data must be a boolean")
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(
                self.max_depth, int
            ):
                raise TypeError("max_depth must be an integer or None")
            if self.max_depth < 1:
                raise ValueError("max_depth must be at least 1")
