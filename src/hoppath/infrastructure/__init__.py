"""Infrastructure layer: identifier registry, graph store, BFS engine, edge files.

This layer depends on stdlib, NetworkX, and the domain error taxonomy.
It must never import from services, commands, or output.
"""
