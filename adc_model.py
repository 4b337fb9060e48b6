"""
adc_model.py

Transfer characteristic model of an N-bit ADC with per-bit weight errors.

Every code a = [0; 2^n - 1] is mapped to an analog value by summing the
binary weights of its set bits:

    ideal:  ua = SUM{i = [0; n-1]}( ai * 2^-(n-1-i) )
    real:   ua = u0 * SUM{j = [0; n-1]}( aj * 2^-((n-1-j) + dj) )

where ai is the value of bit i of a and dj is the error of bit j.
The ideal curve is not scaled by u0, the real one is.

The per-bit errors are generated in bit_errors.py.
"""

import numpy as np

from bit_errors import error_bound, stratified_errors, stratum_bounds, uniform_errors


class AdcModel:
    """
    Ideal and real transfer characteristic of an n-bit ADC.

    :param u0: Reference voltage, scales the real characteristic and the error range
    :type u0: float
    :param n: ADC resolution in bits
    :type n: int
    :param rng: Seed or Generator for the error generators, default None (fresh entropy)
    :type rng: int or np.random.Generator, optional
    """

    def __init__(self, u0, n, rng=None):
        self._u0 = u0
        self._n = n
        self.rng = np.random.default_rng(rng)

    @property
    def u0(self):
        return self._u0

    @property
    def n(self):
        return self._n

    @property
    def n_levels(self):
        """Number of codes, 2^n."""
        return 2 ** self._n

    @property
    def error_bound(self):
        """Half-width of the per-bit error range, 0.5 * u0 / n."""
        return error_bound(self._u0, self._n)

    def get_ideal_characteristic(self, sum_element=None):
        """
        Compute the ideal characteristic for every code 0 .. 2^n - 1.

        :param sum_element: Optional term function f(bit, i) replacing ai * 2^-(n-1-i)
        :type sum_element: callable, optional
        :return: Ideal analog value for each code, indexed by code
        :rtype: np.ndarray
        """
        if sum_element is not None:
            return np.array([self.get_ideal_characteristic_step(a, sum_element)
                             for a in range(self.n_levels)], dtype=float)

        codes = np.arange(self.n_levels)
        result = np.zeros(self.n_levels, dtype=float)
        for i in range(self._n):
            j = self._n - 1 - i
            result += ((codes >> i) & 1) * 2.0 ** -j
        return result

    def get_ideal_characteristic_step(self, a, sum_element=None):
        """
        Ideal characteristic for a single code.

        :param a: Code in 0 .. 2^n - 1
        :type a: int
        :param sum_element: Optional term function f(bit, i) replacing ai * 2^-(n-1-i)
        :type sum_element: callable, optional
        :return: Ideal analog value (not scaled by u0)
        :rtype: float
        """
        summ = 0.0
        for i in range(self._n):
            j = self._n - 1 - i
            ai = (a >> i) & 1
            if sum_element is not None:
                summ += sum_element(ai, i)
            else:
                summ += ai * 2.0 ** -j
        return summ

    def get_real_characteristic(self, errors, sum_element=None):
        """
        Compute the real characteristic for every code 0 .. 2^n - 1.

        :param errors: Per-bit errors, errors[j] belongs to bit j
        :type errors: array_like
        :param sum_element: Optional term function f(bit, error, j) replacing aj * 2^-((n-1-j) + dj)
        :type sum_element: callable, optional
        :return: Real analog value for each code, indexed by code
        :rtype: np.ndarray
        :raises ValueError: If the number of errors is not n
        """
        if len(errors) != self._n:
            raise ValueError(
                f"Number of errors ({len(errors)}) does not match the number of bits {self._n}")

        errors = np.asarray(errors, dtype=float)

        if sum_element is not None:
            return np.array([self.get_real_characteristic_step(a, errors, sum_element)
                             for a in range(self.n_levels)], dtype=float)

        codes = np.arange(self.n_levels)
        summ = np.zeros(self.n_levels, dtype=float)
        for j in range(self._n):
            i = self._n - 1 - j
            summ += ((codes >> j) & 1) * 2.0 ** -(i + errors[j])
        return self._u0 * summ

    def get_real_characteristic_step(self, a, errors, sum_element=None):
        """
        Real characteristic for a single code.

        :param a: Code in 0 .. 2^n - 1
        :type a: int
        :param errors: Per-bit errors, errors[j] belongs to bit j
        :type errors: array_like
        :param sum_element: Optional term function f(bit, error, j)
        :type sum_element: callable, optional
        :return: Real analog value, scaled by u0
        :rtype: float
        """
        summ = 0.0
        for j in range(self._n):
            i = self._n - 1 - j
            aj = (a >> j) & 1
            error = errors[j]
            if sum_element is not None:
                summ += sum_element(aj, error, j)
            else:
                summ += aj * 2.0 ** -(i + error)
        return self._u0 * summ

    def get_errors(self):
        """
        Errors drawn independently from uniform [-upper, upper], upper = 0.5 * u0 / n.

        :return: Error vector of length n
        :rtype: np.ndarray
        """
        return uniform_errors(self._n, self.error_bound, self.rng)

    def get_errors2(self):
        """
        Stratified errors: entry i is drawn from the i-th of n equal strata of [-upper, upper].

        :return: Error vector of length n
        :rtype: np.ndarray
        """
        return stratified_errors(self._n, self.error_bound, self.rng)

    def get_errors2_inv(self):
        """
        Same strata as get_errors2, but stratum i goes to index n-1-i.

        :return: Error vector of length n
        :rtype: np.ndarray
        """
        return stratified_errors(self._n, self.error_bound, self.rng, reverse=True)

    def stratum_bounds(self):
        """
        Strata used by get_errors2 and get_errors2_inv.

        :return: Tuple of (lower edges, upper edges)
        :rtype: tuple(np.ndarray, np.ndarray)
        """
        return stratum_bounds(self._n, self.error_bound)
