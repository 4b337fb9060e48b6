"""
bit_errors.py

Per-bit error generators for the ADC transfer model.

Each generator returns an error vector of n values, one per bit, that is
added to the exponent of the bit weight in the real characteristic.
All of them draw from a uniform distribution over [-upper, +upper]:
    - uniform_errors    : n independent samples over the whole range
    - stratified_errors : the range is cut into n equal strata and one
                          sample is drawn from each stratum

The random source is a numpy Generator so results are reproducible
when the caller seeds it.
"""

import numpy as np


def error_bound(u0, n):
    """
    Half-width of the error range for an n-bit converter.

    :param u0: Reference voltage
    :type u0: float
    :param n: Number of bits
    :type n: int
    :return: upper = 0.5 * u0 / n
    :rtype: float
    """
    return 0.5 * u0 / n


def uniform_errors(n, upper, rng):
    """
    Draw n i.i.d. errors from uniform [-upper, upper).

    :param n: Number of bits
    :type n: int
    :param upper: Half-width of the error range
    :type upper: float
    :param rng: Random source
    :type rng: np.random.Generator
    :return: Error vector
    :rtype: np.ndarray
    """
    return rng.uniform(-upper, upper, size=n)


def stratum_bounds(n, upper):
    """
    Split [-upper, upper] into n contiguous strata of equal width.

    :param n: Number of strata (one per bit)
    :type n: int
    :param upper: Half-width of the error range
    :type upper: float
    :return: Tuple of (lower edges, upper edges), stratum i is [lows[i], highs[i])
    :rtype: tuple(np.ndarray, np.ndarray)
    """
    lower = -upper
    width = (upper - lower) / n
    lows = lower + width * np.arange(n)
    highs = lows + width
    return lows, highs


def stratified_errors(n, upper, rng, reverse=False):
    """
    Draw one uniform error per stratum of [-upper, upper].

    Stratum i lands at index i, or at index n-1-i when reverse is set,
    so the reversed vector starts with the most positive stratum.

    :param n: Number of bits
    :type n: int
    :param upper: Half-width of the error range
    :type upper: float
    :param rng: Random source
    :type rng: np.random.Generator
    :param reverse: Assign strata in descending index order
    :type reverse: bool
    :return: Error vector
    :rtype: np.ndarray
    """
    lows, highs = stratum_bounds(n, upper)
    samples = rng.uniform(lows, highs)
    if reverse:
        return samples[::-1].copy()
    return samples
