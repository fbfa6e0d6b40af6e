"""Domain objects for spinarak - explicit re-exports to satisfy linters."""
from .result import Result as Result
from .run_config import RunConfig as RunConfig

__all__ = ["Result", "RunConfig"]
