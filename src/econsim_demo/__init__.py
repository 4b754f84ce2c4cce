"""Demo data for the economy simulator.

This package seeds a small, fixed US bank catalog so the search and
selection endpoints can be tried without running the catalog ingestion.

Usage:
    econsim demo seed
    # or
    econsim-seed-demo
    # or
    python -m econsim_demo.seed
"""

__version__ = "0.1.0"
