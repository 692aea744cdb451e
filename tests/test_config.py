import json
from copy import deepcopy

import pytest

from numguess.configs import BASE_CONFIG, BINARY_SEARCH_CONFIG, Config


def test_attribute_and_item_access():
    config = Config(A=1, B=dict(C=2))

    assert config.A == config["A"] == 1
    assert isinstance(config.B, Config)
    assert config.B.C == 2

    config.D = 3
    assert config["D"] == 3


def test_update_is_recursive():
    config = Config(BENCHMARK=dict(MIN=0, MAX=100))
    config.update(BENCHMARK=dict(MAX=10))

    assert config.BENCHMARK == {"MIN": 0, "MAX": 10}


def test_update_not_recursive_replaces():
    config = Config(BENCHMARK=dict(MIN=0, MAX=100))
    config.update_not_recursive(BENCHMARK=dict(MAX=10))

    assert config.BENCHMARK == {"MAX": 10}


def test_pop():
    config = Config(A=1)

    assert config.pop("A") == 1
    assert "A" not in config
    assert not hasattr(config, "A")
    assert config.pop("A", None) is None
    with pytest.raises(KeyError):
        config.pop("A")


def test_update_from_list_converts_types():
    config = deepcopy(BASE_CONFIG)
    config.update_from_list([("BENCHMARK.MAX", "500"), ("EVAL.TIMES", "3")])

    assert config.BENCHMARK.MAX == 500
    assert config.EVAL.TIMES == 3


def test_deepcopy_leaves_base_config_alone():
    config = deepcopy(BASE_CONFIG)
    config.BENCHMARK.MAX = 1

    assert BASE_CONFIG.BENCHMARK.MAX == 100
    assert BINARY_SEARCH_CONFIG.MAX == 100


def test_str_is_json():
    assert json.loads(str(BASE_CONFIG)) == BASE_CONFIG


@pytest.mark.parametrize("raw, expected", [("5", 5), ("None", None), ("abc", "abc")])
def test_update_from_list_parses_none_defaults(raw, expected):
    config = deepcopy(BASE_CONFIG)
    config.update_from_list([("BENCHMARK.MAX_STEP", raw)])

    assert config.BENCHMARK.MAX_STEP == expected


def test_update_from_list_bool():
    config = deepcopy(BASE_CONFIG)
    config.update_from_list([("BENCHMARK.VERBOSE", "False")])

    assert config.BENCHMARK.VERBOSE is False
