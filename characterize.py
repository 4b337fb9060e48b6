"""
characterize.py

Static linearity metrics computed from a transfer characteristic:
    - Deviation of the real curve from the scaled ideal curve
    - LSB (endpoint fit)
    - DNL (Differential Non-Linearity)
    - INL (Integral Non-Linearity)
    - Non-monotonic steps

The curves are the arrays returned by AdcModel, indexed by code.
"""

import numpy as np


def compute_deviation(ideal, real, u0):
    """
    Per-code error of the real characteristic against the ideal one.

    The ideal curve is not scaled by u0, so it is scaled here before
    the difference is taken.

    :param ideal: Ideal characteristic
    :type ideal: np.ndarray
    :param real: Real characteristic
    :type real: np.ndarray
    :param u0: Reference voltage of the model
    :type u0: float
    :return: real - u0 * ideal for each code
    :rtype: np.ndarray
    """
    return np.asarray(real, dtype=float) - u0 * np.asarray(ideal, dtype=float)


def compute_lsb(curve):
    """
    Average step size of the curve, from the first and last code.

    :param curve: Transfer characteristic
    :type curve: np.ndarray
    :return: (curve[-1] - curve[0]) / (2^n - 1)
    :rtype: float
    """
    curve = np.asarray(curve, dtype=float)
    if curve.size < 2:
        raise ValueError("Need at least two codes to compute an LSB")
    return (curve[-1] - curve[0]) / (curve.size - 1)


def compute_dnl_inl(curve):
    """
    Compute DNL and INL of a transfer characteristic with an endpoint fit.

    DNL[k] = (curve[k+1] - curve[k]) / lsb - 1             in LSB
    INL[k] = (curve[k] - (curve[0] + k * lsb)) / lsb       in LSB

    :param curve: Transfer characteristic indexed by code
    :type curve: np.ndarray
    :return: Tuple of (DNL with 2^n - 1 values, INL with 2^n values)
    :rtype: tuple(np.ndarray, np.ndarray)
    :raises ValueError: If the curve has fewer than two codes or no span
    """
    curve = np.asarray(curve, dtype=float)
    lsb = compute_lsb(curve)
    if lsb == 0:
        raise ValueError("Curve has zero span, DNL/INL undefined")

    dnl = np.diff(curve) / lsb - 1.0
    inl = (curve - (curve[0] + np.arange(curve.size) * lsb)) / lsb
    return dnl, inl


def count_non_monotonic(curve):
    """
    Number of codes whose output is below the output of the previous code.

    :param curve: Transfer characteristic indexed by code
    :type curve: np.ndarray
    :return: Count of decreasing steps
    :rtype: int
    """
    return int(np.sum(np.diff(np.asarray(curve, dtype=float)) < 0))


def print_summary(name, dnl, inl, deviation, non_monotonic):
    """
    Print a formatted linearity summary table.

    :param name: Label of the characteristic
    :type name: str
    :param dnl: DNL array in LSB
    :type dnl: np.ndarray
    :param inl: INL array in LSB
    :type inl: np.ndarray
    :param deviation: Per-code deviation from the scaled ideal curve
    :type deviation: np.ndarray
    :param non_monotonic: Number of decreasing steps
    :type non_monotonic: int
    """
    print("=" * 45)
    print(f"  {name}")
    print("=" * 45)
    print(f"  DNL (peak)      : {np.max(np.abs(dnl)):.3f} LSB")
    print(f"  INL (peak)      : {np.max(np.abs(inl)):.3f} LSB")
    print(f"  Deviation (max) : {np.max(np.abs(deviation)):.4e}")
    print(f"  Non-monotonic   : {non_monotonic}")
    print("=" * 45)
