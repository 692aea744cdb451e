import enum
import numbers

from loguru import logger

from numguess.utils import InvalidRangeError, NotInitializedError


class State(enum.Enum):
    UNINITIALIZED = "uninitialized"
    SEARCHING = "searching"


def round_mean(low, high):
    # round half up: (1 + 4) / 2 -> 3, where `round(2.5)` gives 2
    return (low + high + 1) // 2


def _is_valid_bound(value):
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, bool)
        and value >= 0
    )


class GuessingGame():
    """
    Guess a hidden number by bisecting the range ``[low, high]``.

    The game never sees the hidden number. The caller compares it with
    :meth:`guess` and reports back through :meth:`narrow_down` (hidden number
    is smaller) or :meth:`narrow_up` (hidden number is bigger).

    Example, hidden number 18 in ``[0, 22]``::

        game = GuessingGame()
        game.set_range(0, 22)
        game.guess()        # 11
        game.narrow_up()
        game.guess()        # 17
        game.narrow_up()
        game.guess()        # 20
        game.narrow_down()
        game.guess()        # 19
        game.narrow_down()
        game.guess()        # 18

    Once ``low == high`` both narrowing methods leave the state unchanged.
    """

    def __init__(self):
        self._low = -1
        self._high = -1
        self._mid = -1
        self._state = State.UNINITIALIZED

    def set_range(self, low, high):
        """Start a new game over ``[low, high]``, discarding any previous one."""
        if not (_is_valid_bound(low) and _is_valid_bound(high)):
            raise InvalidRangeError(low, high)

        self._low = int(low)
        self._high = int(high)
        self._update_mid()
        self._state = State.SEARCHING

    def guess(self):
        self._check_initialized("guess")
        return self._mid

    def narrow_down(self):
        # the hidden number is smaller than the current guess
        self._check_initialized("narrow_down")
        self._high = self._mid
        self._update_mid()

    def narrow_up(self):
        # the hidden number is bigger than the current guess
        self._check_initialized("narrow_up")
        self._low = self._mid
        self._update_mid()

    def _update_mid(self):
        self._mid = round_mean(self._low, self._high)
        logger.debug(f"Range [{self._low}, {self._high}], guess {self._mid}.")

    def _check_initialized(self, operation):
        if self._state is not State.SEARCHING:
            raise NotInitializedError(operation)

    def __repr__(self):
        return f"{self.__class__.__name__}(state={self._state.value})"
