"""Run context and diagnostics shared by the applier and the CLI."""

from .context import Options, RunContext
from .logging import log_event

__all__ = ["Options", "RunContext", "log_event"]
