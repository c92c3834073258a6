"""Geometry, labels, viewport scrolling, file name rules, font resolution, SI units and ODE error weights for reaction network layouts."""

__version__ = "0.1.0"