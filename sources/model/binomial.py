#!/usr/bin/python

"""
Coefficients binomiaux "n parmi k".

Formule multiplicative iterative : a chaque etape le produit partiel est
divisible par i, le resultat reste donc entier sans perte. Les entiers
Python n'ont pas de limite de taille, il n'y a pas de debordement.

Usage::

    binomial_coefficient(4, 2)   # 6
    binomial_coefficient(4, 5)   # 0 (hors bornes)
    binomial_row(3)              # [1, 3, 3, 1]

@author: Nervures
@date: 2026-10
"""

import numbers


def _check_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(
            "%s doit etre un entier, recu %s" % (name, type(value).__name__))


def binomial_coefficient(n, k):
    """Coefficient binomial C(n, k).

    Retourne 0 si k < 0 ou k > n (extension usuelle, pas une erreur).

    :param n: degre
    :type n: int
    :param k: indice
    :type k: int
    :returns: n parmi k
    :rtype: int
    :raises TypeError: si n ou k n'est pas entier
    """
    _check_int('n', n)
    _check_int('k', k)
    n, k = int(n), int(k)
    if k < 0 or k > n:
        return 0
    result = 1
    for i in range(1, k + 1):
        # multiplier avant de diviser : division exacte
        result = result * (n - i + 1) // i
    return result


def binomial_row(n):
    """Ligne n du triangle de Pascal : [C(n,0), ..., C(n,n)].

    :param n: degre (>= 0)
    :type n: int
    :rtype: list[int]
    """
    _check_int('n', n)
    if n < 0:
        raise ValueError("n doit etre >= 0, recu %d" % n)
    return [binomial_coefficient(n, k) for k in range(n + 1)]
