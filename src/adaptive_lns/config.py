# adaptive_lns/config.py

import json

from .acceptance import LinearRecordToRecordTravel, TerminationCriterion
from .params import AlgorithmParams


class Config:
    # 算子得分参数
    SCORE_PARAMS = {
        'score_decay': 0.9,               # 得分衰减
        'new_best_multiplier': 10.0,      # 新最优解
        'new_improving_multiplier': 4.0,  # 优于当前解
        'new_accepted_multiplier': 1.5    # 仅被接受
    }

    # 接受准则参数 (record-to-record travel)
    ACCEPTANCE_PARAMS = {
        'main_termination_criterion': 'iterations',
        'iterations_limit': 1000000,
        'time_limit': 3600.0,
        'start_threshold': 0.1,
        'end_threshold': 0.0
    }

    # 实验参数
    EXPERIMENT_PARAMS = {
        'initial_price': 100.0,
        'iterations': 10000,
        'start_threshold': 0.05,
        'end_threshold': 0.0,
        'log_every': 100,
        'seed': None
    }

    # 实验结果目录 (相对于运行目录)
    RESULTS_DIR = 'results'

    def algorithm_params(self):
        return AlgorithmParams(**self.SCORE_PARAMS)

    def record_to_record_travel(self):
        return _build_rrt(self.ACCEPTANCE_PARAMS)


def _read_json(params_file):
    with open(params_file, 'r', encoding='utf-8') as f:
        return json.load(f)


def _build_rrt(values):
    criterion = values['main_termination_criterion']
    try:
        criterion = TerminationCriterion(criterion)
    except ValueError:
        raise ValueError(
            f"unknown main_termination_criterion {criterion!r}, "
            f"expected one of {[c.value for c in TerminationCriterion]}"
        ) from None

    return LinearRecordToRecordTravel(
        termination_criterion=criterion,
        iterations_limit=int(values['iterations_limit']),
        time_limit=float(values['time_limit']),
        start_threshold=float(values['start_threshold']),
        end_threshold=float(values['end_threshold']),
    )


def load_algorithm_params(params_file):
    """Score parameters from the "scores" object of a json file.

    Missing keys keep the values of :attr:`Config.SCORE_PARAMS`.
    """
    scores = _read_json(params_file).get('scores', {})
    values = {
        key: float(scores.get(key, default))
        for key, default in Config.SCORE_PARAMS.items()
    }
    return AlgorithmParams(**values)


def load_record_to_record_travel(params_file):
    """Record-to-record travel acceptance from a json file.

    Thresholds and the termination criterion live in the "acceptance" object,
    ``iterations_limit`` and ``time_limit`` at the root level. Missing keys
    keep the values of :attr:`Config.ACCEPTANCE_PARAMS`.
    """
    data = _read_json(params_file)
    acceptance = data.get('acceptance', {})

    values = dict(Config.ACCEPTANCE_PARAMS)
    for key in ('main_termination_criterion', 'start_threshold', 'end_threshold'):
        if key in acceptance:
            values[key] = acceptance[key]
    for key in ('iterations_limit', 'time_limit'):
        if key in data:
            values[key] = data[key]

    return _build_rrt(values)
