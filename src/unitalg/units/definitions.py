"""
unitalg.units.definitions
=========================

The built-in definition table, in GNU units format
(``/usr/share/units/definitions.units``).

Each line reads ``name [coefficient] [ref[^n] ...] [# comment]``. A body of
``!`` declares a fundamental unit. Coefficients are written as an integer, a
decimal, or an exact fraction ``p|q``. Lines are processed in order, so a
definition may only refer to names declared above it.
"""

from __future__ import annotations

from typing import Tuple

DEFINITIONS: Tuple[str, ...] = (
    # --- fundamental units --------------------------------------------------
    "cm                      !",
    "s                       !",

    # --- length -------------------------------------------------------------
    "inch                    2.54 cm",
    "in                      inch",
    "mm                      1|10 cm",
    "m                       100 cm",
    "km                      1000 m",
    "foot                    12 inch",
    "ft                      foot",
    "yard                    3 ft",
    "yd                      yard",
    "mile                    5280 ft",

    # --- volume -------------------------------------------------------------
    "cc                      cm^3",
    "liter                   1000 cc",
    "l                       liter",
    "ml                      1|1000 liter",
    "usgallon                231 in^3        # US liquid measure is derived from",
    "gallon                  usgallon",
    "gal                     gallon          # the British wine gallon of 1707.",
    "quart                   1|4 gallon      # See the \"winegallon\" entry below",
    "pint                    1|2 quart       # more historical information.",
    "gill                    1|4 pint",
    "usquart                 1|4 usgallon",
    "uspint                  1|2 usquart",
    "usgill                  1|4 uspint",
    "usfluidounce            1|16 uspint",
    "usfloz                  usfluidounce",
    "fluiddram               1|8 usfloz",
    "minimvolume             1|60 fluiddram",
    "qt                      quart",
    "pt                      pint",
    "uscup                   8 usfloz",
    "ustablespoon            1|16 uscup",
    "usteaspoon              1|3 ustablespoon",
    "ustbl                   ustablespoon",
    "ustbsp                  ustablespoon",
    "ustblsp                 ustablespoon",
    "ustsp                   usteaspoon",

    # --- time ---------------------------------------------------------------
    "minute                  60 s",
    "min                     minute",
    "hour                    60 min",
    "hr                      hour",

    # --- counts -------------------------------------------------------------
    "dozen                   12",
)

__all__ = ["DEFINITIONS"]
