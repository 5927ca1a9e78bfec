from dataclasses import dataclass


@dataclass
class ScalarSolution:
    value: float

    def cost(self):
        return self.value


class Add:
    """Adds a constant to the solution and counts its calls."""

    def __init__(self, amount):
        self.amount = amount
        self.calls = 0

    def __call__(self, solution):
        self.calls += 1
        solution.value += self.amount


class SetTo:
    """Sets the solution to the next value of a fixed list."""

    def __init__(self, values):
        self.values = list(values)

    def __call__(self, solution):
        solution.value = self.values.pop(0)


class StopAfter:
    """Stops once the visitor has been called ``calls`` times; records candidates."""

    def __init__(self, calls):
        self.calls = calls
        self.seen = []

    def on_iteration_end(self, state):
        self.seen.append(state.candidate_solution.cost())
        return len(self.seen) < self.calls


class RejectAll:
    def accept(self, state):
        return False
