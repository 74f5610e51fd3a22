#!/usr/bin/python

"""
Courbe de Bezier 2D de degre arbitraire.

Evaluation par la base de Bernstein :

    B(t) = somme_i C(n,i) * (1-t)^(n-i) * t^i * P[i]

Echantillonnage uniforme en parametre : steps + 1 points en
t = 0, 1/steps, ..., 1. Le resultat est une polyligne destinee a une
couche de dessin externe.

Usage::

    pts = [[50, 300], [150, 50], [250, 350], [350, 150]]

    # Fonctions pures
    pt = bezier_point(pts, 0.5)        # ndarray(2,)
    poly = sample_bezier(pts)          # ndarray(101, 2)

    # Objet courbe (echantillonnage mis en cache)
    b = Bezier(pts, name='Cubique', steps=50)
    b.points                           # ndarray(51, 2)

@author: Nervures
@date: 2026-10
"""

import logging
import numbers

import numpy as np

from .binomial import binomial_row
from .curveconfig import load_config, load_defaults, merge_params

logger = logging.getLogger(__name__)

#: Nombre de pas par defaut pour l'echantillonnage
DEFAULT_STEPS = 100

#: Au-dela, C(n, n/2) ne tient plus dans un float64
MAX_DEGREE = 1000


# --------------------------------------------------------------------------
#  Validation (fonctions utilitaires)
# --------------------------------------------------------------------------

def _as_points(control_points):
    """Convertit des points de controle en ndarray(count, 2) float.

    Une sequence vide donne un tableau de shape (0, 2).
    """
    pts = np.asarray(control_points, dtype=float)
    if pts.size == 0:
        return pts.reshape(0, 2)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(
            "control_points doit etre un tableau (*, 2), "
            "recu shape %s" % str(pts.shape))
    return pts


def _check_steps(steps):
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise ValueError("steps doit etre un entier, recu %r" % (steps,))
    if steps < 1:
        raise ValueError("steps doit etre >= 1, recu %d" % steps)
    return int(steps)


# --------------------------------------------------------------------------
#  Base de Bernstein, evaluation et echantillonnage
# --------------------------------------------------------------------------

def bernstein_basis(n, t):
    """Poids de Bernstein de degre n en t.

    N[..., i] = C(n,i) * (1 - t)^(n-i) * t^i

    Les coefficients binomiaux sont calcules une seule fois pour tous
    les t. 0^0 vaut 1, les poids sont donc exacts en t=0 et t=1.

    :param n: degre de la courbe
    :type n: int
    :param t: parametre(s) dans [0, 1], scalaire ou ndarray(m,)
    :returns: ndarray(n+1,) si t scalaire, ndarray(m, n+1) sinon
    :rtype: numpy.ndarray
    :raises ValueError: si n < 0 ou n > MAX_DEGREE
    """
    if n < 0:
        raise ValueError("n doit etre >= 0, recu %d" % n)
    if n > MAX_DEGREE:
        raise ValueError(
            "Degre %d trop eleve (max %d) : coefficients binomiaux "
            "hors de la plage des flottants" % (n, MAX_DEGREE))
    binom = np.array([float(c) for c in binomial_row(n)])
    i = np.arange(n + 1)
    t = np.asarray(t, dtype=float)[..., None]
    return binom * (1.0 - t)**(n - i) * t**i


def bezier_point(control_points, t):
    """Point de la courbe de Bezier en t.

    :param control_points: points de controle P0..Pn, shape (n+1, 2)
    :type control_points: numpy.ndarray or list
    :param t: parametre dans [0, 1], scalaire ou array
    :type t: float or numpy.ndarray
    :returns: ndarray(2,) si t scalaire, ndarray(m, 2) si t array
    :rtype: numpy.ndarray
    :raises ValueError: si aucun point de controle
    """
    pts = _as_points(control_points)
    if len(pts) == 0:
        raise ValueError("Au moins 1 point de controle requis, recu 0")
    return np.dot(bernstein_basis(len(pts) - 1, t), pts)


def parameter_values(steps):
    """Parametres uniformes 0, 1/steps, ..., 1 (steps + 1 valeurs).

    :param steps: nombre de pas (>= 1)
    :type steps: int
    :rtype: numpy.ndarray
    """
    steps = _check_steps(steps)
    return np.arange(steps + 1) / float(steps)


def sample_bezier(control_points, steps=None):
    """Echantillonne la courbe en steps + 1 points uniformes en parametre.

    Moins de 2 points de controle : polyligne vide, shape (0, 2).

    :param control_points: points de controle, shape (count, 2)
    :type control_points: numpy.ndarray or list
    :param steps: nombre de pas (defaut DEFAULT_STEPS)
    :type steps: int or None
    :returns: polyligne, ndarray(steps + 1, 2)
    :rtype: numpy.ndarray
    """
    if steps is None:
        steps = DEFAULT_STEPS
    t = parameter_values(steps)
    pts = _as_points(control_points)
    if len(pts) < 2:
        logger.debug("%d point(s) de controle : polyligne vide", len(pts))
        return np.empty((0, 2), dtype=float)
    logger.debug("Echantillonnage degre %d, %d pas", len(pts) - 1, len(t) - 1)
    return np.dot(bernstein_basis(len(pts) - 1, t), pts)


def control_polygon(control_points):
    """Polygone de controle : les points de controle dans l'ordre (copie)."""
    return _as_points(control_points).copy()


def control_bounds(control_points):
    """Boite englobante des points de controle.

    La courbe y est contenue pour tout t dans [0, 1] (enveloppe convexe).

    :returns: (xmin, ymin, xmax, ymax)
    :rtype: tuple(float, float, float, float)
    """
    pts = _as_points(control_points)
    if len(pts) == 0:
        raise ValueError("Boite englobante d'une courbe vide")
    xmin, ymin = pts.min(axis=0)
    xmax, ymax = pts.max(axis=0)
    return float(xmin), float(ymin), float(xmax), float(ymax)


# --------------------------------------------------------------------------
#  Classe Bezier
# --------------------------------------------------------------------------

class Bezier:
    """Courbe de Bezier 2D de degre arbitraire.

    Les points de controle sont figes (tableau en lecture seule) ;
    pour une autre geometrie, utiliser :meth:`with_control_points`.
    Degre n = nombre de points de controle - 1.
    """

    def __init__(self, control_points, name='Sans nom', steps=DEFAULT_STEPS):
        """
        :param control_points: points de controle P0..Pn
        :type control_points: numpy.ndarray or list
        :param name: nom de la courbe
        :type name: str
        :param steps: nombre de pas pour l'echantillonnage par defaut
        :type steps: int
        """
        pts = _as_points(control_points).copy()
        pts.setflags(write=False)
        self._cpts = pts
        self._name = str(name)
        self._steps = _check_steps(steps)
        self._cache = {}

    @classmethod
    def from_config(cls, filepath=None, **overrides):
        """Cree une courbe depuis la configuration.

        Ordre de priorite : ``overrides`` > fichier ``filepath`` >
        defauts (defaults_bezier.cfg).

        :param filepath: fichier .cfg (cle=valeur), optionnel
        :type filepath: str or None
        :returns: nouvelle courbe
        :rtype: Bezier
        """
        user_file = load_config(filepath) if filepath is not None else None
        params = merge_params(load_defaults(), user_file, overrides)
        curve = cls(params['control_points'],
                    name=params.get('name', 'Sans nom'),
                    steps=params.get('steps', DEFAULT_STEPS))
        logger.info("Courbe '%s' chargee (degre %d, %d pas)",
                    curve.name, curve.degree, curve.steps)
        return curve

    def __repr__(self):
        return "Bezier('%s', degre=%d, %d pts, steps=%d)" % (
            self._name, self.degree, len(self._cpts), self._steps)

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def control_points(self):
        """Points de controle, ndarray(n+1, 2) en lecture seule."""
        return self._cpts

    @property
    def degree(self):
        """Degre de la courbe (n = nb_points - 1, -1 si vide)."""
        return len(self._cpts) - 1

    @property
    def name(self):
        """Nom de la courbe."""
        return self._name

    @name.setter
    def name(self, value):
        self._name = str(value)

    @property
    def steps(self):
        """Nombre de pas pour l'echantillonnage par defaut."""
        return self._steps

    @steps.setter
    def steps(self, value):
        value = _check_steps(value)
        if value != self._steps:
            self._steps = value
            self._cache.pop('points', None)

    @property
    def points(self):
        """Polyligne echantillonnee, ndarray(steps + 1, 2).

        Mise en cache, recalculee uniquement si ``steps`` change.
        """
        if 'points' not in self._cache:
            self._cache['points'] = sample_bezier(self._cpts, self._steps)
        return self._cache['points'].copy()

    @property
    def start_cpoint(self):
        """Premier point de controle P0, ndarray(2,)."""
        return self._cpts[0].copy()

    @property
    def end_cpoint(self):
        """Dernier point de controle Pn, ndarray(2,)."""
        return self._cpts[-1].copy()

    @property
    def polygon(self):
        """Polygone de controle, ndarray(n+1, 2)."""
        return control_polygon(self._cpts)

    @property
    def bounds(self):
        """Boite englobante (xmin, ymin, xmax, ymax) des points de controle."""
        return control_bounds(self._cpts)

    def cpoint(self, index):
        """Retourne une copie du point de controle d'index donne.

        Supporte l'indexation negative (ex: -1 = dernier point).

        :param index: index du point de controle
        :type index: int
        :rtype: numpy.ndarray, shape (2,)
        """
        n = len(self._cpts)
        if index < -n or index >= n:
            raise IndexError(
                "Index %d hors limites pour %d points de controle"
                % (index, n))
        return self._cpts[index].copy()

    def with_control_points(self, control_points):
        """Nouvelle courbe, memes nom et steps, autres points de controle."""
        return Bezier(control_points, name=self._name, steps=self._steps)

    # ------------------------------------------------------------------
    #  Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, t):
        """Evalue la courbe en t (base de Bernstein).

        :param t: parametre dans [0, 1], scalaire ou array
        :returns: ndarray(2,) si t scalaire, ndarray(m, 2) si t array
        """
        return bezier_point(self._cpts, t)

    def sample(self, steps=None):
        """Echantillonne en steps + 1 points (defaut : self.steps). Sans cache."""
        if steps is None:
            steps = self._steps
        return sample_bezier(self._cpts, steps)
