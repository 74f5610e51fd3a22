#!/usr/bin/python

"""
Package beziertools : courbes de Bezier 2D de degre arbitraire.

Coefficients binomiaux, evaluation par la base de Bernstein,
echantillonnage en polyligne.

Usage::

    from beziertools import Bezier, sample_bezier

    b = Bezier.from_config()
    poly = b.points

@author: Nervures
@date: 2026-10
"""

from .binomial import binomial_coefficient, binomial_row
from .bezier import (
    Bezier,
    DEFAULT_STEPS,
    MAX_DEGREE,
    bernstein_basis,
    bezier_point,
    control_bounds,
    control_polygon,
    parameter_values,
    sample_bezier,
)
from .curveconfig import load_config, load_defaults, merge_params
