"""clouddriver: cluster catalog, permission index, and workload state derivation."""

__version__ = "1.0.0"
