"""Game errors."""


class MemoryGameError(Exception):
    """Base class for memory game errors."""


class InvalidIndexError(MemoryGameError, IndexError):
    """Card index outside the current deck."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Card index {index} out of range for {size} cards")
