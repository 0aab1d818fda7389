"""
Visualization utilities for the bank queue simulation.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import Optional
import seaborn as sns
from scipy import stats


def plot_wait_distribution(clock, ax=None, title: str = "Customer Wait Times"):
    """Histogram of the recorded wait samples with mean and median marked."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    waits = clock.stats.samples
    if not waits:
        ax.text(0.5, 0.5, 'No customers were served',
                ha='center', va='center', transform=ax.transAxes)
        ax.set_title(title)
        return fig

    # One bin per whole minute
    bins = np.arange(min(waits), max(waits) + 2) - 0.5
    sns.histplot(list(waits), bins=bins, ax=ax, color='steelblue')
    ax.axvline(clock.stats.mean(), color='red', linestyle='--',
               label=f"Mean {clock.stats.mean():.2f}")
    ax.axvline(clock.stats.median(), color='green', linestyle=':',
               label=f"Median {clock.stats.median():.2f}")
    ax.set_xlabel('Wait (minutes)')
    ax.set_ylabel('Customers')
    ax.set_title(title)
    ax.legend()
    return fig


def plot_queue_length(clock, ax=None, title: str = "Line Length Over the Day"):
    """Plot the number of waiting customers after each minute."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    history = clock.queue_length_history
    ax.plot(np.arange(len(history)), history, color='darkorange')
    ax.axvline(clock.config.simulation_minutes, color='gray', linestyle='--',
               label='Closing time')
    ax.set_xlabel('Minute')
    ax.set_ylabel('Customers waiting')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()
    return fig


def plot_arrival_fit(clock, ax=None, title: str = "Arrivals per Minute"):
    """Compare observed per-minute arrival counts with the Poisson pmf."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    counts = np.asarray(clock.arrival_history, dtype=int)
    if counts.size == 0:
        ax.text(0.5, 0.5, 'No arrival data',
                ha='center', va='center', transform=ax.transAxes)
        ax.set_title(title)
        return fig

    k = np.arange(counts.max() + 1)
    observed = np.bincount(counts, minlength=k.size) / counts.size
    expected = stats.poisson.pmf(k, clock.config.arrival_rate)

    width = 0.4
    ax.bar(k - width / 2, observed, width, label='Simulated')
    ax.bar(k + width / 2, expected, width, label='Poisson pmf')
    ax.set_xlabel('Arrivals in a minute')
    ax.set_ylabel('Probability')
    ax.set_title(f"{title} (lambda = {clock.config.arrival_rate:.3f})")
    ax.set_xticks(k)
    ax.legend()
    return fig


def create_performance_report(clock, save_path: Optional[str] = None):
    """Create a dashboard with all plots and a text summary of the day."""
    fig, ((ax1, ax2), (ax3, ax4)) = plt.subplots(2, 2, figsize=(15, 10))
    fig.suptitle('Bank Queue Simulation', fontsize=16)

    plot_wait_distribution(clock, ax=ax1)
    plot_queue_length(clock, ax=ax2)
    plot_arrival_fit(clock, ax=ax3)

    metrics = clock.get_metrics_summary()
    system = metrics['system']
    ax4.axis('off')

    stats_text = f"""
    Day Summary
    -----------
    Window: {clock.config.simulation_minutes} min, closed after {system['end_minute']} min
    Tellers: {clock.config.teller_count}
    Customers arrived: {system['total_arrived']}
    Customers served: {system['total_served']}
    Longest line: {system['max_queue_length']}
    Teller utilization: {system['server_utilization']:.2%}
    """
    waits = metrics['waits']
    if waits is None:
        stats_text += "\n    No customers were served."
    else:
        stats_text += f"""
    Mean wait: {waits['mean']:.2f} min
    Median wait: {waits['median']:.2f} min
    Mode wait: {waits['mode']} min
    Std. deviation: {waits['stddev']:.2f} min
    Longest wait: {waits['max']:.2f} min
    """

    ax4.text(0.05, 0.95, stats_text, transform=ax4.transAxes,
             fontfamily='monospace', verticalalignment='top')

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig
