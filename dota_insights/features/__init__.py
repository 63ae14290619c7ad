"""Analysis features.

Each feature is self-contained: the four analysis engines (stats, patterns,
draft, builds) are pure and synchronous, and ``insights`` wires them to the
data provider and the HTTP surface.
"""
