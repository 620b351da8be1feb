# lvsim

Numerical simulation of the Lotka-Volterra predator-prey equations

    prey'     = alpha * prey - beta * prey * predator
    predator' = delta * prey * predator - eta * predator

integrated with the classic fourth-order Runge-Kutta method. The package also
holds a few named real-world scenarios and a brute-force grid search for rate
sets that keep both populations as steady as possible.

## Installation

    pip install .

Install with the `test` extra to run the test suite:

    pip install .[test]
    pytest

## Command line

### `lvsim`

Runs one simulation and writes a table of time, prey and predator values:

    lvsim

Options (defaults in brackets):

- `--prey` initial prey population [110]
- `--predator` initial predator population [12]
- `--alpha` prey birth rate [0.1]
- `--beta` predation rate [0.01]
- `--delta` predator growth rate [0.001]
- `--eta` predator death rate [0.1]
- `--step` integration step size [1e-4]; must be positive
- `--end-time` time at which to stop [10]
- `--output` data file to write [`lotka_volterra.dat`]

The file starts with a header line beginning with `#`, then one line per step
holding time, prey and predator, each right-aligned in 20 columns in
scientific notation with 10 decimal places. Each line records the populations
after a step against the clock value from before that step.

### `lvsim-optimize`

Searches a grid of rates for the combination whose populations swing the
least over a run:

    lvsim-optimize

Each of `--alpha`, `--beta`, `--delta` and `--eta` takes three numbers,
`MIN MAX STEP`; the defaults are `0.1 1.0 0.1`, `0.001 0.1 0.001`,
`0.001 0.1 0.001` and `0.01 1.0 0.01`. `--prey` [100], `--predator` [10],
`--step` [0.1] and `--end-time` [50] set the simulation used to score each
combination.

For every alpha value it prints a progress line such as
`We are on step:0.1`, and at the end:

    Optimal Parameters: 
    Alpha: ... Beta: ... Delta: ... Eta: ...

A sweep over the default grid tries about a hundred million combinations and
is very slow; narrow the ranges for quick runs.

## Library use

### Model (`lvsim.model`)

```python
from lvsim.model import Parameters, simulate, write_data

params = Parameters(alpha=0.1, beta=0.01, delta=0.001, eta=0.1)
print(params.equilibrium())          # (eta/delta, alpha/beta) = (100.0, 10.0)

samples = simulate(110, 12, params, h=1e-4, end_time=10.0)
with open("run.dat", "w") as stream:
    count = write_data(stream, samples)
```

- `Parameters(alpha, beta, delta, eta)` is a frozen dataclass;
  `equilibrium()` raises `ValueError` when `delta` or `beta` is zero.
- `derivatives(prey, predator, params)` returns the two rates of change.
- `rk4_step(prey, predator, params, h)` advances the system by one step.
- `simulate(prey, predator, params, h, end_time)` is a generator of `Sample`
  objects (`time`, `prey`, `predator`); it raises `ValueError` for a
  non-positive step.
- `write_data(stream, samples)` writes the data table and returns the number
  of samples written.

### Scenarios (`lvsim.scenarios`)

```python
from lvsim.scenarios import get_scenario, scenario_names

print(scenario_names())
# ['rabbits_foxes', 'moose_wolves', 'plankton',
#  'optimized_prey20_pred1', 'optimized_prey100_pred10']
foxes = get_scenario("rabbits_foxes")
samples = foxes.run(0.01)            # list of Sample
```

A `Scenario` carries a `name`, `description`, `params`, starting `prey` and
`predator`, `end_time` and `time_unit` (`"years"`, or `"days"` for the
plankton case). `run(h=1e-4)` simulates it. `get_scenario` raises `KeyError`
for an unknown name.

### Parameter search (`lvsim.optimize`)

```python
from lvsim.optimize import SearchRange, fitness, search

result = search(
    SearchRange(0.1, 0.3, 0.1),
    SearchRange(0.01, 0.02, 0.01),
    SearchRange(0.001, 0.002, 0.001),
    SearchRange(0.1, 0.2, 0.1),
)
print(result.params, result.fitness)
```

- `SearchRange(start, stop, step)` yields values from `start` up to `stop`
  inclusive by repeated addition; `step` must be positive.
- `fitness(params, prey=100, predator=10, h=0.1, end_time=50)` is the sum of
  the prey and predator swings (maximum minus minimum) over a run; the running
  maxima start at 0 and the minima at 1e6. Lower is steadier.
- `search(...)` tries every combination, keeps the first one with the lowest
  fitness and returns a `SearchResult`. An optional `progress` callable is
  called with each alpha value. It raises `ValueError` if a range is empty.

## What it does not do

The package writes data files but draws no plots; use any plotting tool on
the output. The named scenarios are available from Python only, not from the
command line.