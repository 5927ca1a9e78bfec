import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from adaptive_lns import (
    ALNSSolver,
    ChainedVisitor,
    MaxIterations,
    ProgressLogger,
    StatisticsCollector,
)
from adaptive_lns.config import Config
from adaptive_lns.utils import RunEvaluator, Visualizer


@dataclass
class PriceSolution:
    """一维玩具问题：解即一个价格，成本等于价格本身"""

    price: float

    def cost(self):
        return self.price

    def copy(self):
        return PriceSolution(self.price)


class RaisePrice:
    def __init__(self, rng):
        self.rng = rng

    def __call__(self, solution):
        solution.price += self.rng.uniform(0.0, 1.0)


class LowerPrice:
    def __init__(self, rng):
        self.rng = rng

    def __call__(self, solution):
        solution.price -= self.rng.uniform(0.0, 1.0)


class ExperimentRunner:
    def __init__(self, config=None):
        self.config = config if config is not None else Config()
        self.evaluator = RunEvaluator()
        self.visualizer = Visualizer()

        # 创建实验目录
        self.experiment_dir = self._create_experiment_dir()

    def run_experiment(self):
        """运行一次玩具问题上的 ALNS 求解"""
        params = self.config.EXPERIMENT_PARAMS
        print(f"\nRunning experiment: price={params['initial_price']}, iterations={params['iterations']}")

        rng = np.random.default_rng(params['seed'])
        initial = PriceSolution(params['initial_price'])

        acceptance = self.config.record_to_record_travel()
        acceptance.iterations_limit = params['iterations']
        acceptance.start_threshold = params['start_threshold']
        acceptance.end_threshold = params['end_threshold']

        statistics = StatisticsCollector()
        visitor = ChainedVisitor(
            statistics,
            ProgressLogger(every=params['log_every']),
            MaxIterations(params['iterations'])
        )

        solver = ALNSSolver(
            self.config.algorithm_params(),
            initial,
            acceptance=acceptance,
            visitor=visitor,
            seed=params['seed']
        )
        solver.add_destroy_operator(RaisePrice(rng), name='raise_price')
        solver.add_repair_operator(LowerPrice(rng), name='lower_price')

        best = solver.solve()
        print(f"[ExperimentRunner] best cost {best.cost():.4f} after {solver.iteration + 1} iterations")

        history = statistics.to_frame()
        metrics = self.evaluator.evaluate_run(history, initial_cost=initial.cost())
        print(self.evaluator.generate_report(metrics))

        self._save_results(history, metrics)
        return metrics

    def _create_experiment_dir(self):
        """创建实验目录"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        experiment_dir = Path(self.config.RESULTS_DIR) / f"experiment_{timestamp}"

        for subdir in ['visualizations', 'data']:
            (experiment_dir / subdir).mkdir(parents=True, exist_ok=True)

        return experiment_dir

    def _save_results(self, history, metrics):
        """保存实验结果"""
        history.to_csv(self.experiment_dir / 'data' / 'history.csv', index=False)

        with open(self.experiment_dir / 'data' / 'summary.json', 'w') as f:
            json.dump(metrics, f, indent=2)

        fig = self.visualizer.plot_convergence(history)
        fig.savefig(self.experiment_dir / 'visualizations' / 'convergence.png')
        plt.close(fig)

        for kind in ('destroy', 'repair'):
            fig = self.visualizer.plot_operator_scores(history, kind=kind)
            fig.savefig(self.experiment_dir / 'visualizations' / f'{kind}_scores.png')
            plt.close(fig)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(message)s")
    runner = ExperimentRunner()
    runner.run_experiment()
    print("Experiment completed successfully!")
