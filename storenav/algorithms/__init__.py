"""Routing algorithms over venue graphs.

`spf` holds the Dijkstra shortest-path solver; `compose` resolves ordered
multi-stop itineraries.
"""
