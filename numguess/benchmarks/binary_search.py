import itertools
import json
import os.path as osp
import random

from loguru import logger

from numguess.models import GuessingGame
from numguess.utils import dict_mean, setup_logger
from .build import BENCHMARKS

_evaluator_ids = itertools.count()


@BENCHMARKS.register("BinarySearch")
class BinarySearchEvaluator():
    """
    Play the guessing game against a hidden target and measure how it goes.

    The evaluator is the caller the engine expects: it knows the target,
    compares every guess with it and answers with ``narrow_up`` /
    ``narrow_down`` until the guess is right, ``max_step`` guesses were made,
    or the engine stops moving.
    """

    def __init__(self, min=0, max=100, max_step=None, verbose=True, output_dir=None):
        assert 0 <= min <= max, (min, max)
        assert max_step is None or max_step > 0, max_step

        self.min = min
        self.max = max
        # `max_step` will be deactivated if `max_step is None`
        self.max_step = max_step
        self.verbose = verbose

        self.game = GuessingGame()
        self.test_cases = []
        self._target = None

        # the file sink only takes records bound to this evaluator
        self._id = next(_evaluator_ids)
        self.logger = logger.bind(evaluator=self._id)
        self._log_handler = None
        if output_dir:
            self._log_handler = setup_logger(
                filename=osp.join(output_dir, "log.txt"),
                filter=lambda record: record["extra"].get("evaluator") == self._id,
            )

    def close(self):
        if self._log_handler is not None:
            logger.remove(self._log_handler)
            self._log_handler = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def load_testcases_from_file(self, path):
        with open(path) as f:
            self.test_cases = json.load(f)
        assert isinstance(self.test_cases, list), self.test_cases

    def reset(self, test_case=None):
        if test_case is None:
            self.logger.info("Generating random number.")
            self._target = random.randint(self.min, self.max)
        else:
            self.logger.info("Using pre-generated random number.")
            self._target = test_case["target"]
            assert self.min <= self._target and self._target <= self.max, self._target

        self.game.set_range(self.min, self.max)

    def _get_feedback(self, guess):
        if guess < self._target:
            return "bigger"
        if guess > self._target:
            return "smaller"

        return "equal"

    def _play(self):
        qa_list = []

        while self.max_step is None or len(qa_list) < self.max_step:
            guess = self.game.guess()
            feedback = self._get_feedback(guess)
            qa_list.append((guess, feedback))

            if self.verbose:
                self.logger.info(f"Guess: {guess}, the true number is {feedback}.")

            if feedback == "equal":
                break

            if feedback == "bigger":
                self.game.narrow_up()
            else:
                self.game.narrow_down()

            # the range can no longer shrink, so every later guess is the same
            if self.game.guess() == guess:
                self.logger.info(f"Guess is stuck at {guess}, stop the interaction now.")
                break
        else:
            self.logger.info("Max steps reached, stop the interaction now.")

        return qa_list

    def calc_metric(self, qa_list):
        last_guess, last_feedback = qa_list[-1]

        if self.max == self.min:
            err = 0.0
        else:
            err = abs(last_guess - self._target) / (self.max - self.min)

        return {
            "steps": len(qa_list),
            "found": int(last_feedback == "equal"),
            "err": err,
        }

    def _get_result(self, metric, qa_list):
        result = {}
        result["metric"] = metric
        result["output"] = dict(
            answer_list=[guess for guess, _ in qa_list],
        )
        result["env"] = dict(
            min=self.min,
            max=self.max,
            target=self._target,
            max_step=self.max_step,
        )
        result["history"] = qa_list

        return result

    def naive_test(self, test_case=None):
        self.reset(test_case)
        self.logger.info("Target number: {}".format(self._target))

        qa_list = self._play()
        metric = self.calc_metric(qa_list)

        return metric, self._get_result(metric, qa_list)

    def _pack_results(self, metrics, single_results):
        # summarize the metrics from each test run and pack the detailed results
        metric = dict_mean(metrics)

        metric = {"mean_" + k: v for k, v in metric.items()}

        full_result = {}
        full_result["metric"] = metric
        full_result["env"] = dict(
            times=len(metrics),
            min=self.min,
            max=self.max,
        )
        full_result["single_results"] = single_results

        return metric, full_result

    def _run(self, test_cases):
        metrics = []
        single_results = []
        for i, test_case in enumerate(test_cases):
            metric, single_result = self.naive_test(test_case)

            self.logger.info(f"Evaluation metric #{i}: {metric}")
            metrics.append(metric)
            single_results.append(single_result)

        return self._pack_results(metrics, single_results)

    def test_multi_time(self, times):
        # every run draws a fresh random target
        return self._run([None] * times)

    def test_on_testcases(self, times=None):
        if times is None:
            times = len(self.test_cases)
        assert times <= len(self.test_cases), (times, len(self.test_cases))

        return self._run(self.test_cases[:times])
