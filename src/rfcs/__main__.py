"""
Main entry point for the rfcs CLI.

Allows running the package as a module:
    python -m rfcs create "My New RFC"
"""

from .cli import app

if __name__ == "__main__":
    app(prog_name="rfcs")
