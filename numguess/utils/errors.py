class GuessingGameError(Exception):
    pass


class InvalidRangeError(GuessingGameError, ValueError):
    def __init__(self, low, high):
        self.low = low
        self.high = high
        super().__init__(
            f"range bounds must be non-negative integers, got low={low!r}, high={high!r}"
        )

    def __repr__(self):
        s = self.__class__.__name__ + "("
        s += f"low={repr(self.low)}, high={repr(self.high)}"
        s += ")"
        return s


class NotInitializedError(GuessingGameError, RuntimeError):
    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"call `set_range` before `{operation}`")
