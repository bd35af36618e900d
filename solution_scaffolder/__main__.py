"""Allow ``python -m solution_scaffolder``."""

from .cli import run

if __name__ == "__main__":
    run()
