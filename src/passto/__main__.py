"""
Passto Entry Point
==================

Allows running the CLI via: python -m passto
"""

from passto.cli import main

if __name__ == "__main__":
    main()
