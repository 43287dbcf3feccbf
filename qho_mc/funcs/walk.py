import numpy as np

from .energy import rate
from .errors import InvalidInputError


class RandomWalk:
    """Metropolis walk of one oscillator occupation number.

    The walk owns a single generator for its whole life. Direction bits and
    acceptance thresholds are both drawn from it, so a fixed seed gives a
    fixed trajectory. run() draws all direction bits for the call first and
    then all thresholds, rather than alternating bit and threshold per step.
    """

    def __init__(self, coupling, n_init, rng=None, seed=None, sink=None):
        self.coupling = float(coupling)
        self.current = int(n_init)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.sink = sink
        self.times = []
        self.states = []

    def propose(self, up):
        """Neighbouring state, never equal to the current one."""
        return self.current + 1 if up else self.current - 1

    def step(self, up, threshold):
        """One proposal/accept cycle; returns the recorded state."""
        n_next = self.propose(up)
        if rate(self.coupling, self.current, n_next) > threshold:
            self.current = n_next
        t = len(self.times)
        self.times.append(t)
        self.states.append(self.current)
        if self.sink is not None:
            self.sink(t, self.current)
        return self.current

    def run(self, num_steps):
        """Advance num_steps steps. Returns (times, states) for the whole walk."""
        if num_steps <= 0:
            raise InvalidInputError(f"num_steps must be positive, got {num_steps}")
        directions = self.rng.integers(0, 2, size=num_steps)
        thresholds = self.rng.random(num_steps)
        for up, u in zip(directions, thresholds):
            self.step(up, u)
        return self.trajectory()

    def trajectory(self):
        return np.asarray(self.times, dtype=np.int64), np.asarray(self.states, dtype=np.int64)


def run_random_walk(num_steps, n_init, coupling, seed=None, rng=None, sink=None):
    """Run a fresh walk. Returns (times, states)."""
    walk = RandomWalk(coupling, n_init, rng=rng, seed=seed, sink=sink)
    return walk.run(num_steps)
