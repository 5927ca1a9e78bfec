import matplotlib.pyplot as plt
import numpy as np


class Visualizer:
    def __init__(self):
        self.colors = plt.cm.Set3(np.linspace(0, 1, 12))

    def plot_convergence(self, history, figsize=(12, 6)):
        """绘制最优解、当前解与候选解的成本曲线"""
        fig, ax = plt.subplots(figsize=figsize)

        ax.plot(
            history['iteration'],
            history['candidate_cost'],
            color='lightgray',
            linewidth=0.8,
            label='Candidate'
        )
        ax.plot(
            history['iteration'],
            history['current_cost'],
            color='tab:blue',
            alpha=0.7,
            label='Current'
        )
        ax.step(
            history['iteration'],
            history['best_cost'],
            where='post',
            color='tab:red',
            linewidth=2,
            label='Best'
        )

        ax.set_title('ALNS Convergence')
        ax.set_xlabel('Iteration')
        ax.set_ylabel('Cost')
        ax.legend()

        return fig

    def plot_operator_scores(self, history, kind='destroy', figsize=(12, 6)):
        """绘制算子得分随迭代的变化"""
        if kind not in ('destroy', 'repair'):
            raise ValueError(f"kind must be 'destroy' or 'repair', got {kind!r}")

        prefix = f'{kind}_score['
        columns = [c for c in history.columns if c.startswith(prefix)]

        fig, ax = plt.subplots(figsize=figsize)
        for i, column in enumerate(columns):
            ax.plot(
                history['iteration'],
                history[column],
                color=self.colors[i % len(self.colors)],
                label=column[len(prefix):-1]
            )

        ax.set_title(f'{kind.capitalize()} Operator Scores')
        ax.set_xlabel('Iteration')
        ax.set_ylabel('Score')
        if columns:
            ax.legend()

        return fig
