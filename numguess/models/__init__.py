from .bs_model import GuessingGame, State, round_mean
