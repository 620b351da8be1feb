import pytest

from lvsim.model import Parameters
from lvsim.optimize import SearchRange, SearchResult, fitness, main, search


def _ranges():
    return (
        SearchRange(0.05, 0.1, 0.05),
        SearchRange(0.01, 0.02, 0.01),
        SearchRange(0.001, 0.002, 0.001),
        SearchRange(0.1, 0.1, 0.1),
    )


def test_range_values_inclusive():
    assert list(SearchRange(0.0, 1.0, 0.25).values()) == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_range_single_value():
    assert list(SearchRange(0.1, 0.1, 0.5).values()) == [0.1]


def test_range_empty_when_start_above_stop():
    assert list(SearchRange(1.0, 0.5, 0.1).values()) == []


@pytest.mark.parametrize("step", [0.0, -0.1])
def test_range_rejects_non_positive_step(step):
    with pytest.raises(ValueError):
        SearchRange(0.0, 1.0, step)


def test_fitness_near_zero_at_equilibrium():
    params = Parameters(0.1, 0.01, 0.001, 0.1)
    assert fitness(params, 100.0, 10.0) == pytest.approx(0.0, abs=1e-9)


def test_fitness_positive_off_equilibrium():
    params = Parameters(0.1, 0.01, 0.001, 0.1)
    assert fitness(params, 110.0, 12.0) > fitness(params, 100.0, 10.0)


def test_fitness_nonnegative():
    params = Parameters(1.0, 0.1, 0.075, 1.5)
    assert fitness(params, 40.0, 9.0, h=0.1, end_time=5.0) >= 0.0


def test_fitness_rejects_bad_step():
    with pytest.raises(ValueError):
        fitness(Parameters(0.1, 0.01, 0.001, 0.1), h=0.0)


def test_search_finds_equilibrium_rates():
    result = search(*_ranges())
    assert result.params == Parameters(0.1, 0.01, 0.001, 0.1)
    assert result.fitness == pytest.approx(0.0, abs=1e-9)


def test_search_result_matches_fitness():
    result = search(*_ranges())
    assert result == SearchResult(result.params, fitness(result.params))


def test_search_reports_progress_per_alpha():
    seen = []
    search(*_ranges(), progress=seen.append)
    assert seen == [0.05, 0.1]


def test_search_empty_space_raises():
    alpha, beta, delta, _ = _ranges()
    with pytest.raises(ValueError):
        search(alpha, beta, delta, SearchRange(1.0, 0.5, 0.1))


def test_main_prints_optimum(capsys):
    code = main(
        [
            "--alpha", "0.05", "0.1", "0.05",
            "--beta", "0.01", "0.02", "0.01",
            "--delta", "0.001", "0.002", "0.001",
            "--eta", "0.1", "0.1", "0.1",
        ]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "We are on step:0.05" in out
    assert "Optimal Parameters:" in out
    assert "Alpha: 0.1 Beta: 0.01 Delta: 0.001 Eta: 0.1" in out


def test_main_rejects_bad_step():
    with pytest.raises(SystemExit):
        main(["--step", "0"])