"""Named predator-prey scenarios with their rates and starting populations."""

from __future__ import annotations

from dataclasses import dataclass

from lvsim.model import Parameters, Sample, simulate


@dataclass(frozen=True)
class Scenario:
    """A predator-prey system with its rates, starting populations and time span."""

    name: str
    description: str
    params: Parameters
    prey: float
    predator: float
    end_time: float
    time_unit: str = "years"

    def run(self, h: float = 1e-4) -> list[Sample]:
        """Simulate the scenario with step size h."""
        return list(simulate(self.prey, self.predator, self.params, h, self.end_time))


_SCENARIOS: dict[str, Scenario] = {
    s.name: s
    for s in (
        Scenario(
            name="rabbits_foxes",
            description="Rabbits and foxes in Australia: fast, large oscillations.",
            params=Parameters(alpha=1.0, beta=0.1, delta=0.075, eta=1.5),
            prey=40.0,
            predator=9.0,
            end_time=50.0,
        ),
        Scenario(
            name="moose_wolves",
            description="Moose and wolves on Isle Royale: slow oscillations near the start values.",
            params=Parameters(alpha=0.1, beta=0.005, delta=0.0002, eta=0.015),
            prey=100.0,
            predator=18.0,
            end_time=200.0,
        ),
        Scenario(
            name="plankton",
            description="Phytoplankton and zooplankton, populations measured as biomass in g/m^3.",
            params=Parameters(alpha=2.0, beta=0.1, delta=0.075, eta=0.5),
            prey=100.0,
            predator=5.0,
            end_time=50.0,
            time_unit="days",
        ),
        Scenario(
            name="optimized_prey20_pred1",
            description="Rates found by the parameter search for 20 prey and 1 predator.",
            params=Parameters(alpha=0.1, beta=0.1, delta=0.1, eta=1.0),
            prey=20.0,
            predator=1.0,
            end_time=50.0,
        ),
        Scenario(
            name="optimized_prey100_pred10",
            description="Rates found by the search for 100 prey and 10 predators, started just off equilibrium.",
            params=Parameters(alpha=0.1, beta=0.01, delta=0.001, eta=0.1),
            prey=110.0,
            predator=12.0,
            end_time=10.0,
        ),
    )
}


def scenario_names() -> list[str]:
    """Return the names of all known scenarios."""
    return list(_SCENARIOS)


def get_scenario(name: str) -> Scenario:
    """Return the scenario with the given name."""
    try:
        return _SCENARIOS[name]
    except KeyError:
        raise KeyError(f"unknown scenario: {name!r}") from None