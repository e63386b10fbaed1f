"""
Entry point for ``python -m docker_dx``.
"""

from docker_dx.cli.commands import app


if __name__ == '__main__':
    app(prog_name="dx")
