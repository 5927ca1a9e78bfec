import json

import pytest

from adaptive_lns import AlgorithmParams, TerminationCriterion
from adaptive_lns.config import Config, load_algorithm_params, load_record_to_record_travel


def write_json(tmp_path, data):
    path = tmp_path / "params.json"
    path.write_text(json.dumps(data))
    return path


def test_config_defaults():
    config = Config()
    assert config.algorithm_params() == AlgorithmParams()
    acceptance = config.record_to_record_travel()
    assert acceptance.termination_criterion is TerminationCriterion.ITERATIONS
    assert acceptance.iterations_limit == 1000000


def test_load_full_file(tmp_path):
    path = write_json(tmp_path, {
        "scores": {
            "score_decay": 0.5,
            "new_best_multiplier": 20,
            "new_improving_multiplier": 5,
            "new_accepted_multiplier": 2
        },
        "acceptance": {
            "main_termination_criterion": "time",
            "start_threshold": 0.2,
            "end_threshold": 0.01
        },
        "iterations_limit": 500,
        "time_limit": 30
    })

    params = load_algorithm_params(path)
    assert params == AlgorithmParams(0.5, 20.0, 5.0, 2.0)

    acceptance = load_record_to_record_travel(path)
    assert acceptance.termination_criterion is TerminationCriterion.TIME
    assert acceptance.iterations_limit == 500
    assert acceptance.time_limit == 30.0
    assert acceptance.start_threshold == 0.2
    assert acceptance.end_threshold == 0.01


def test_missing_keys_fall_back_to_defaults(tmp_path):
    path = write_json(tmp_path, {"scores": {"score_decay": 0.8}})

    params = load_algorithm_params(path)
    assert params.score_decay == 0.8
    assert params.new_best_multiplier == 10.0

    acceptance = load_record_to_record_travel(path)
    assert acceptance.termination_criterion is TerminationCriterion.ITERATIONS
    assert acceptance.time_limit == 3600.0
    assert acceptance.start_threshold == 0.1


def test_unknown_termination_criterion(tmp_path):
    path = write_json(tmp_path, {"acceptance": {"main_termination_criterion": "never"}})
    with pytest.raises(ValueError, match="never"):
        load_record_to_record_travel(path)


def test_invalid_score_values(tmp_path):
    path = write_json(tmp_path, {"scores": {"score_decay": 1.5}})
    with pytest.raises(ValueError):
        load_algorithm_params(path)
