# core/exceptions.py

class DiagsError(Exception):
    """Base exception for diagcsr errors."""
    pass

class DiagsInputError(DiagsError):
    """Raised when the band table, offsets or shape are structurally invalid."""
    pass

class InvalidOffsetError(DiagsError):
    """Raised when an offset places no element inside the target shape."""

    def __init__(self, offset: int, shape):
        self.offset = offset
        self.shape = tuple(shape)
        super().__init__(
            f"Offset {offset} lies outside a {self.shape[0]}x{self.shape[1]} matrix "
            f"(places no elements)"
        )

class BandTooShortError(DiagsError):
    """Raised when a band cannot supply every element its diagonal needs."""

    def __init__(self, index: int, offset: int, required: int, available: int):
        self.index = index
        self.offset = offset
        self.required = required
        self.available = available
        super().__init__(
            f"Band {index} (offset {offset}) needs {required} elements, "
            f"but only {available} are available"
        )

class ConfigError(DiagsError):
    """Raised when a diagonal configuration file cannot be read or validated."""
    pass
