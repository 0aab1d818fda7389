import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest

from bank_queue.system import SimulationConfig, run_bank_day
from bank_queue.visualization import (
    create_performance_report,
    plot_arrival_fit,
    plot_queue_length,
    plot_wait_distribution,
)


@pytest.fixture
def busy_day():
    return run_bank_day(SimulationConfig(arrival_rate=0.8, teller_count=2,
                                         simulation_minutes=120, seed=21))


@pytest.fixture
def empty_day():
    return run_bank_day(SimulationConfig(arrival_rate=0.0, teller_count=1,
                                         simulation_minutes=30, seed=0))


@pytest.mark.parametrize('plot', [plot_wait_distribution, plot_queue_length, plot_arrival_fit])
def test_plots_return_figures(plot, busy_day):
    fig = plot(busy_day)
    assert isinstance(fig, plt.Figure)
    plt.close(fig)


def test_plots_draw_on_given_axes(busy_day):
    fig, ax = plt.subplots()
    assert plot_queue_length(busy_day, ax=ax) is fig
    assert len(ax.lines) >= 1
    plt.close(fig)


def test_empty_day_plots(empty_day):
    fig = plot_wait_distribution(empty_day)
    assert 'No customers were served' in [t.get_text() for t in fig.axes[0].texts]
    plt.close(fig)


def test_performance_report_saved(busy_day, tmp_path):
    path = tmp_path / 'report.png'
    fig = create_performance_report(busy_day, save_path=str(path))
    assert path.exists()
    assert len(fig.axes) == 4
    plt.close(fig)
