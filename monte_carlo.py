"""
monte_carlo.py

Monte Carlo analysis of the ADC transfer model.

Draws N_ITERATIONS error vectors with each of the three generators
(get_errors, get_errors2, get_errors2_inv), builds the real
characteristic for each draw and collects DNL, INL, monotonicity and
deviation statistics. The distributions are plotted per generator.

Usage:
    python monte_carlo.py
"""

import numpy as np
import matplotlib.pyplot as plt

from adc_model import AdcModel
from characterize import compute_deviation, compute_dnl_inl, count_non_monotonic

# Parameters
N_BITS       = 8
U0           = 1.0
N_ITERATIONS = 500
SEED         = 2024

GENERATORS = {
    "Uniform"           : "get_errors",
    "Stratified"        : "get_errors2",
    "Stratified (rev.)" : "get_errors2_inv",
}


def run_generator(adc, method, n_iterations=N_ITERATIONS):
    """
    Run n_iterations draws of a single error generator.

    :param adc: Model to draw errors from
    :type adc: AdcModel
    :param method: Name of the AdcModel error generator method
    :type method: str
    :param n_iterations: Number of error vectors to draw
    :type n_iterations: int
    :return: Dict of metric arrays, one value per draw
    :rtype: dict
    """
    generate = getattr(adc, method)
    ideal = adc.get_ideal_characteristic()
    metrics = {"dnl_peak": [], "inl_peak": [], "non_monotonic": [], "max_deviation": []}

    for _ in range(n_iterations):
        real = adc.get_real_characteristic(generate())
        dnl, inl = compute_dnl_inl(real)

        metrics["dnl_peak"].append(np.max(np.abs(dnl)))
        metrics["inl_peak"].append(np.max(np.abs(inl)))
        metrics["non_monotonic"].append(count_non_monotonic(real))
        metrics["max_deviation"].append(
            np.max(np.abs(compute_deviation(ideal, real, adc.u0))))

    return {k: np.array(v) for k, v in metrics.items()}


def run_all_generators(adc, n_iterations=N_ITERATIONS):
    """
    Run the Monte Carlo simulation for every generator in GENERATORS.

    :param adc: Model to draw errors from
    :type adc: AdcModel
    :param n_iterations: Number of error vectors per generator
    :type n_iterations: int
    :return: Dict mapping generator label to its metrics dict
    :rtype: dict
    """
    all_results = {}

    for label, method in GENERATORS.items():
        print(f"  {label} is running")
        all_results[label] = run_generator(adc, method, n_iterations)

    return all_results


def print_statistics(all_results):
    """
    Print summary statistics for each generator.

    Yield is the share of draws with peak DNL below 1 LSB and no
    decreasing step.

    :param all_results: Dict mapping generator label to metrics dict
    :type all_results: dict
    """
    print(f"  {'Generator':>18}  {'DNL mean':>10} {'INL mean':>10} "
          f"{'Non-mono':>10} {'Yield':>8}")

    for label, r in all_results.items():
        yield_pct = compute_yield(r) * 100
        print(f"  {label:>18}  "
              f"{np.mean(r['dnl_peak']):>10.3f} "
              f"{np.mean(r['inl_peak']):>10.3f} "
              f"{np.mean(r['non_monotonic']):>10.2f} "
              f"{yield_pct:>7.1f}%")


def compute_yield(result):
    """
    Fraction of draws with peak DNL < 1 LSB and a monotonic curve.

    :param result: Metrics dict from run_generator
    :type result: dict
    :return: Yield in [0, 1]
    :rtype: float
    """
    good = (result["dnl_peak"] < 1.0) & (result["non_monotonic"] == 0)
    return float(np.mean(good))


def plot_distributions(all_results):
    """
    Plot DNL and INL peak distributions for each generator as overlapping histograms.

    :param all_results: Dict mapping generator label to metrics dict
    :type all_results: dict
    """
    colors = ['#2196F3', '#4CAF50', '#FF5722']

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    fig.suptitle(f"Monte Carlo Distributions for {N_BITS}-bit ADC, u0={U0}")
    for i, (label, r) in enumerate(all_results.items()):
        color = colors[i % len(colors)]

        axes[0].hist(r["dnl_peak"], bins=30, color=color, alpha=0.4,
                     label=label, edgecolor='none')
        axes[1].hist(r["inl_peak"], bins=30, color=color, alpha=0.4,
                     label=label, edgecolor='none')

    axes[0].axvline(1.0, color='red',
                    linestyle='--', label='DNL = 1 LSB limit')
    axes[0].set_xlabel("DNL Peak (LSB)")
    axes[0].set_ylabel("Number of draws")
    axes[0].set_title("DNL Peak Distribution")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].set_xlabel("INL Peak (LSB)")
    axes[1].set_ylabel("Number of draws")
    axes[1].set_title("INL Peak Distribution")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig('monte_carlo_distributions.png', dpi=150, bbox_inches='tight')
    print("Plot saved: monte_carlo_distributions.png")
    plt.show()


if __name__ == "__main__":
    adc = AdcModel(U0, N_BITS, rng=SEED)

    print(f"Running Monte Carlo: {len(GENERATORS)} generators x "
          f"{N_ITERATIONS} draws each\n")

    all_results = run_all_generators(adc)
    print_statistics(all_results)
    plot_distributions(all_results)
