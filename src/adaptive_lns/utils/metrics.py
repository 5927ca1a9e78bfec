import numpy as np
import pandas as pd


class RunEvaluator:
    def __init__(self):
        pass

    def evaluate_run(self, history: pd.DataFrame, initial_cost=None):
        """评估一次求解过程的各项指标

        ``history`` is the frame built by ``StatisticsCollector.to_frame()``.
        Without ``initial_cost`` the current cost before the first iteration
        is not known, so the first recorded best cost is used instead.
        """
        if history.empty:
            raise ValueError("history is empty: no iteration was recorded")

        metrics = {}
        metrics.update(self._calculate_cost_metrics(history, initial_cost))
        metrics.update(self._calculate_acceptance_metrics(history))
        metrics.update(self._calculate_operator_metrics(history))
        return metrics

    def _calculate_cost_metrics(self, history, initial_cost):
        if initial_cost is None:
            initial_cost = history['best_cost'].iloc[0]
        best_cost = history['best_cost'].iloc[-1]

        if initial_cost != 0:
            improvement = (initial_cost - best_cost) / abs(initial_cost)
        else:
            improvement = np.nan

        return {
            'iterations': int(len(history)),
            'elapsed_time': float(history['elapsed_time'].iloc[-1]),
            'initial_cost': float(initial_cost),
            'best_cost': float(best_cost),
            'improvement': float(improvement)
        }

    def _calculate_acceptance_metrics(self, history):
        outcomes = history['outcome']
        return {
            'acceptance_rate': float((outcomes != 'rejected').mean()),
            'new_best_count': int((outcomes == 'new_best').sum()),
            'improving_count': int((outcomes == 'improving').sum())
        }

    def _calculate_operator_metrics(self, history):
        return {
            'destroy_usage': {k: int(v) for k, v in history['destroy'].value_counts().items()},
            'repair_usage': {k: int(v) for k, v in history['repair'].value_counts().items()}
        }

    def generate_report(self, metrics):
        """生成评估报告"""
        report = "ALNS Run Report\n"
        report += "===============\n\n"

        report += "Cost Analysis:\n"
        report += f"- Iterations: {metrics['iterations']}\n"
        report += f"- Elapsed Time: {metrics['elapsed_time']:.2f}s\n"
        report += f"- Initial Cost: {metrics['initial_cost']:.4f}\n"
        report += f"- Best Cost: {metrics['best_cost']:.4f}\n"
        report += f"- Improvement: {metrics['improvement']:.2%}\n\n"

        report += "Acceptance Analysis:\n"
        report += f"- Acceptance Rate: {metrics['acceptance_rate']:.2%}\n"
        report += f"- New Best Solutions: {metrics['new_best_count']}\n"
        report += f"- Improving Solutions: {metrics['improving_count']}\n\n"

        report += "Operator Usage:\n"
        for name, count in metrics['destroy_usage'].items():
            report += f"- destroy {name}: {count}\n"
        for name, count in metrics['repair_usage'].items():
            report += f"- repair {name}: {count}\n"

        return report
