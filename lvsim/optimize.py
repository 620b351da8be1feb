"""Grid search for Lotka-Volterra rates that keep the populations steady."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from lvsim.model import Parameters, simulate


@dataclass(frozen=True)
class SearchRange:
    """Values from start to stop (inclusive) reached by repeatedly adding step."""

    start: float
    stop: float
    step: float

    def __post_init__(self) -> None:
        if not self.step > 0:
            raise ValueError("search step must be positive")

    def values(self) -> Iterator[float]:
        """Yield start, start+step, ... while the running value does not exceed stop."""
        value = self.start
        while value <= self.stop:
            yield value
            value += self.step


@dataclass(frozen=True)
class SearchResult:
    """The best rates found and their fitness (lower is better)."""

    params: Parameters
    fitness: float


def fitness(
    params: Parameters,
    prey: float = 100.0,
    predator: float = 10.0,
    h: float = 0.1,
    end_time: float = 50.0,
) -> float:
    """Return the summed swing (max - min) of both populations over a simulation.

    The running maxima start at 0 and the running minima at 1e6.
    """
    prey_max, prey_min = 0.0, 1e6
    predator_max, predator_min = 0.0, 1e6
    for sample in simulate(prey, predator, params, h, end_time):
        prey_max = max(prey_max, sample.prey)
        prey_min = min(prey_min, sample.prey)
        predator_max = max(predator_max, sample.predator)
        predator_min = min(predator_min, sample.predator)
    return (prey_max - prey_min) + (predator_max - predator_min)


def search(
    alpha_range: SearchRange,
    beta_range: SearchRange,
    delta_range: SearchRange,
    eta_range: SearchRange,
    prey: float = 100.0,
    predator: float = 10.0,
    h: float = 0.1,
    end_time: float = 50.0,
    progress: Callable[[float], None] | None = None,
) -> SearchResult:
    """Try every combination of rates and return the one with the lowest fitness.

    Ties keep the combination met first. progress, if given, is called with
    each alpha value before its combinations are tried.
    """
    best: SearchResult | None = None
    best_fitness = math.inf
    for alpha in alpha_range.values():
        if progress is not None:
            progress(alpha)
        for beta in beta_range.values():
            for delta in delta_range.values():
                for eta in eta_range.values():
                    params = Parameters(alpha, beta, delta, eta)
                    value = fitness(params, prey, predator, h, end_time)
                    if value < best_fitness:
                        best_fitness = value
                        best = SearchResult(params, value)
    if best is None:
        raise ValueError("the search space holds no parameter combination")
    return best


def _range_argument(parser: argparse.ArgumentParser, name: str, default: tuple[float, float, float]) -> None:
    parser.add_argument(
        f"--{name}",
        type=float,
        nargs=3,
        metavar=("MIN", "MAX", "STEP"),
        default=list(default),
        help=f"range of {name} values (default: %(default)s)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lvsim-optimize",
        description="Search a grid of Lotka-Volterra rates for the steadiest populations.",
    )
    _range_argument(parser, "alpha", (0.1, 1.0, 0.1))
    _range_argument(parser, "beta", (0.001, 0.1, 0.001))
    _range_argument(parser, "delta", (0.001, 0.1, 0.001))
    _range_argument(parser, "eta", (0.01, 1.0, 0.01))
    parser.add_argument("--prey", type=float, default=100.0, help="initial prey population")
    parser.add_argument("--predator", type=float, default=10.0, help="initial predator population")
    parser.add_argument("--step", type=float, default=0.1, help="integration step size")
    parser.add_argument("--end-time", type=float, default=50.0, help="time at which to stop")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the parameter search and print the best rates."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.step <= 0:
        parser.error("step size must be positive")
    try:
        ranges = [SearchRange(*getattr(args, name)) for name in ("alpha", "beta", "delta", "eta")]
        result = search(
            *ranges,
            prey=args.prey,
            predator=args.predator,
            h=args.step,
            end_time=args.end_time,
            progress=lambda alpha: print(f"We are on step:{alpha:g}"),
        )
    except ValueError as exc:
        parser.error(str(exc))
    p = result.params
    print("Optimal Parameters: ")
    print(f"Alpha: {p.alpha:g} Beta: {p.beta:g} Delta: {p.delta:g} Eta: {p.eta:g}")
    return 0