#!/usr/bin/python

"""
Lecture des fichiers de configuration des courbes.

Format : cle=valeur, une par ligne. Les lignes commencant par # sont ignorees.
Les types sont inferes automatiquement (bool, int, float, liste de points, str).

Une liste de points s'ecrit ``x,y; x,y; ...``::

    name=Demo cubique
    steps=100
    control_points=50,300; 150,50; 250,350; 350,150

Une valeur avec virgule dont les elements ne sont pas tous numeriques
reste une chaine (``name=Courbe A, version 2``).

@author: Nervures
@date: 2026-10
"""

import os
import re
import logging

logger = logging.getLogger(__name__)

_CFG_DIR = os.path.dirname(os.path.abspath(__file__))


def _is_number(s):
    try:
        float(s)
    except ValueError:
        return False
    return True


def _parse_points(value_str):
    """Lit une liste de points ``x,y; x,y; ...``.

    :returns: liste de tuples (x, y)
    :rtype: list[tuple(float, float)]
    :raises ValueError: si un point n'a pas exactement 2 coordonnees
    """
    points = []
    for chunk in value_str.split(';'):
        chunk = chunk.strip()
        if not chunk:
            continue
        coords = chunk.split(',')
        if len(coords) != 2:
            raise ValueError(
                "Point invalide '%s' : 2 coordonnees attendues" % chunk)
        points.append((float(coords[0]), float(coords[1])))
    return points


def _parse_value(value_str):
    """Infere le type d'une valeur depuis sa representation texte.

    :param value_str: valeur brute lue depuis le fichier
    :type value_str: str
    :returns: valeur typee (bool, int, float, liste de points ou str)
    """
    s = value_str.strip()
    # Booleens
    if s.lower() in ('true', 'yes', 'on'):
        return True
    if s.lower() in ('false', 'no', 'off'):
        return False
    # Entier
    try:
        return int(s)
    except ValueError:
        pass
    # Flottant
    try:
        return float(s)
    except ValueError:
        pass
    # Liste de points : seulement si tous les elements sont numeriques
    if ',' in s and all(_is_number(c) for c in re.split('[,;]', s)
                        if c.strip()):
        return _parse_points(s)
    return s


def load_config(filepath):
    """Charge un fichier de configuration cle=valeur.

    :param filepath: chemin du fichier .cfg
    :type filepath: str
    :returns: dictionnaire des parametres
    :rtype: dict
    :raises IOError: si le fichier n'existe pas
    :raises ValueError: si une liste de points est mal formee
    """
    if not os.path.isfile(filepath):
        raise IOError("Fichier de configuration introuvable : %s" % filepath)
    params = {}
    with open(filepath, 'r') as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            if '=' not in line:
                logger.warning("%s:%d : ligne ignoree (pas de '=') : %s",
                               filepath, lineno, line)
                continue
            key, value = line.split('=', 1)
            try:
                params[key.strip()] = _parse_value(value)
            except ValueError as e:
                raise ValueError("%s:%d : %s" % (filepath, lineno, e)) from e
    return params


def load_defaults(name='bezier'):
    """Parametres embarques du fichier defaults_<name>.cfg du package."""
    return load_config(os.path.join(_CFG_DIR, 'defaults_%s.cfg' % name))


def merge_params(defaults, *layers):
    """Empile des jeux de parametres, le dernier l'emporte.

    Les couches None ou vides sont ignorees ; ``defaults`` n'est pas modifie.

    :param defaults: parametres de base
    :type defaults: dict
    :param layers: surcharges successives (dict or None)
    :returns: parametres fusionnes
    :rtype: dict
    """
    merged = dict(defaults)
    for layer in layers:
        merged.update(layer or {})
    return merged
