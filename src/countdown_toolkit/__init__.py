"""Top-level package for the countdown numbers-game solver.

Provides subpackages:
- countdown_toolkit.core – expression models, schemas and serialization
- countdown_toolkit.solver – exhaustive search and parallel fan-out
- countdown_toolkit.runner – batch solving, timing and the CLI
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import version as pkg_version, PackageNotFoundError
        return pkg_version("countdown-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
