"""
demo.py

Demonstration script for the ADC transfer model.
Computes the ideal characteristic, one real characteristic per error
generator and one with a custom multiplicative bit term, prints the
linearity summary of each and plots transfer curves, deviation and INL.

Usage:
    python demo.py
"""

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.gridspec as gridspec

from adc_model import AdcModel
from characterize import (compute_deviation, compute_dnl_inl,
                          count_non_monotonic, print_summary)

# ── Parameters ─────────────────────────────────────────────────────────────
N_BITS = 6
U0     = 1.0
SEED   = 7

COLORS = ['#2196F3', '#FF5722', '#4CAF50', '#9C27B0']


def multiplicative_term(n_bits):
    """
    Bit term where the error scales the weight instead of shifting its exponent.

    :param n_bits: ADC resolution
    :type n_bits: int
    :return: Term function f(bit, error, j) for get_real_characteristic
    :rtype: callable
    """
    def term(bit, error, j):
        return bit * 2.0 ** -(n_bits - 1 - j) * (1 + error)
    return term


def build_curves(adc):
    """
    Real characteristics for each error generator and the custom term.

    :param adc: Model to evaluate
    :type adc: AdcModel
    :return: Dict mapping label to real characteristic
    :rtype: dict
    """
    return {
        "Uniform"             : adc.get_real_characteristic(adc.get_errors()),
        "Stratified"          : adc.get_real_characteristic(adc.get_errors2()),
        "Stratified (rev.)"   : adc.get_real_characteristic(adc.get_errors2_inv()),
        "Multiplicative term" : adc.get_real_characteristic(
            adc.get_errors2(), sum_element=multiplicative_term(adc.n)),
    }


def analyze(adc, ideal, real):
    dnl, inl = compute_dnl_inl(real)
    return {
        "curve"         : real,
        "dnl"           : dnl,
        "inl"           : inl,
        "deviation"     : compute_deviation(ideal, real, adc.u0),
        "non_monotonic" : count_non_monotonic(real),
    }


def main():
    adc = AdcModel(U0, N_BITS, rng=SEED)
    ideal = adc.get_ideal_characteristic()
    codes = np.arange(adc.n_levels)

    results = {name: analyze(adc, ideal, real)
               for name, real in build_curves(adc).items()}

    print(f"\n{N_BITS}-bit ADC, u0={U0}, error bound=±{adc.error_bound:.4f}\n")
    for name, r in results.items():
        print_summary(name, r["dnl"], r["inl"], r["deviation"], r["non_monotonic"])

    fig = plt.figure(figsize=(16, 10))
    fig.suptitle(f"ADC transfer characteristic: {N_BITS}-bit, u0={U0}",
                 fontsize=14, fontweight='bold')
    gs = gridspec.GridSpec(2, 2, figure=fig, hspace=0.35, wspace=0.25)

    ax0 = plt.subplot(gs[0, :])
    ax0.step(codes, adc.u0 * ideal, where='post', color='black',
             linewidth=1.5, label='Ideal (x u0)')
    for color, (name, r) in zip(COLORS, results.items()):
        ax0.step(codes, r["curve"], where='post', color=color,
                 linewidth=0.9, alpha=0.8, label=name)
    ax0.set_xlabel("Code")
    ax0.set_ylabel("Output")
    ax0.set_title("Transfer characteristic")
    ax0.legend(fontsize=8)
    ax0.grid(True, alpha=0.3)

    ax1 = plt.subplot(gs[1, 0])
    for color, (name, r) in zip(COLORS, results.items()):
        ax1.plot(codes, r["deviation"], color=color, linewidth=1.0, label=name)
    ax1.axhline(0, color='black', linewidth=0.7)
    ax1.set_xlabel("Code")
    ax1.set_ylabel("real - u0 * ideal")
    ax1.set_title("Deviation")
    ax1.grid(True, alpha=0.3)

    ax2 = plt.subplot(gs[1, 1])
    for color, (name, r) in zip(COLORS, results.items()):
        ax2.plot(codes, r["inl"], color=color, linewidth=1.0, label=name)
    ax2.axhline(0, color='black', linewidth=0.7)
    ax2.set_xlabel("Code")
    ax2.set_ylabel("INL (LSB)")
    ax2.set_title("INL (endpoint fit)")
    ax2.grid(True, alpha=0.3)

    plt.savefig('adc_characteristic.png', dpi=150, bbox_inches='tight')
    print("\nPlot saved: adc_characteristic.png")
    plt.show()


if __name__ == "__main__":
    main()
