"""Operating system boundary (subprocess execution)."""

from .process import ProcessError, run, run_silent

__all__ = ["ProcessError", "run", "run_silent"]
