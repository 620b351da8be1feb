"""Lotka-Volterra predator-prey model integrated with a fourth-order Runge-Kutta scheme."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

DEFAULT_OUTPUT = "lotka_volterra.dat"


@dataclass(frozen=True)
class Parameters:
    """Rates of the Lotka-Volterra equations.

    alpha: natural birth rate of prey in the absence of predation.
    beta: death rate of prey due to predation (hunting efficiency).
    delta: rate at which predators increase by consuming prey.
    eta: death rate of predators in the absence of prey.
    """

    alpha: float
    beta: float
    delta: float
    eta: float

    def equilibrium(self) -> tuple[float, float]:
        """Return the non-trivial fixed point as (prey, predator) = (eta/delta, alpha/beta)."""
        if self.delta == 0 or self.beta == 0:
            raise ValueError("equilibrium is undefined when delta or beta is zero")
        return self.eta / self.delta, self.alpha / self.beta


@dataclass(frozen=True)
class Sample:
    """One recorded point of a simulation."""

    time: float
    prey: float
    predator: float


def derivatives(prey: float, predator: float, params: Parameters) -> tuple[float, float]:
    """Return the rates of change (dprey/dt, dpredator/dt)."""
    dprey = prey * params.alpha - prey * predator * params.beta
    dpredator = predator * params.delta * prey - params.eta * predator
    return dprey, dpredator


def rk4_step(prey: float, predator: float, params: Parameters, h: float) -> tuple[float, float]:
    """Advance both populations by one step of size h."""

    def scaled(x: float, y: float) -> tuple[float, float]:
        dx, dy = derivatives(x, y, params)
        return h * dx, h * dy

    kx1, ky1 = scaled(prey, predator)
    kx2, ky2 = scaled(prey + 0.5 * kx1, predator + 0.5 * ky1)
    kx3, ky3 = scaled(prey + 0.5 * kx2, predator + 0.5 * ky2)
    kx4, ky4 = scaled(prey + kx3, predator + ky3)
    return (
        prey + (kx1 + 2 * (kx2 + kx3) + kx4) / 6,
        predator + (ky1 + 2 * (ky2 + ky3) + ky4) / 6,
    )


def simulate(
    prey: float,
    predator: float,
    params: Parameters,
    h: float,
    end_time: float,
) -> Iterator[Sample]:
    """Yield samples while the step clock has not passed end_time.

    Each step advances the populations first and records them against the
    clock value from before the step, then advances the clock by h.
    """
    if h <= 0:
        raise ValueError("step size must be positive")
    time = 0.0
    while time <= end_time:
        prey, predator = rk4_step(prey, predator, params, h)
        yield Sample(time, prey, predator)
        time += h


def write_data(stream: TextIO, samples: Iterable[Sample]) -> int:
    """Write a header and one fixed-width line per sample; return the number of samples."""
    stream.write(f"#{'Time':>19}{'Prey':>20}{'Predator':>20}\n")
    count = 0
    for sample in samples:
        stream.write(f"{sample.time:20.10e}{sample.prey:20.10e}{sample.predator:20.10e}\n")
        count += 1
    return count


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lvsim",
        description="Integrate the Lotka-Volterra equations and save the populations over time.",
    )
    parser.add_argument("--prey", type=float, default=110.0, help="initial prey population")
    parser.add_argument("--predator", type=float, default=12.0, help="initial predator population")
    parser.add_argument("--alpha", type=float, default=0.1, help="prey birth rate")
    parser.add_argument("--beta", type=float, default=0.01, help="predation rate")
    parser.add_argument("--delta", type=float, default=0.001, help="predator growth rate")
    parser.add_argument("--eta", type=float, default=0.1, help="predator death rate")
    parser.add_argument("--step", type=float, default=1e-4, help="integration step size")
    parser.add_argument("--end-time", type=float, default=10.0, help="time at which to stop")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="data file to write")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a simulation and save it to a data file."""
    args = _build_parser().parse_args(argv)
    params = Parameters(args.alpha, args.beta, args.delta, args.eta)
    if args.step <= 0:
        raise SystemExit("error: step size must be positive")
    with open(args.output, "w", encoding="utf-8") as output:
        write_data(output, simulate(args.prey, args.predator, params, args.step, args.end_time))
    print(f"The data has been saved to {args.output}")
    return 0