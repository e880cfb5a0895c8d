"""
Run settings for struktur.

The root is the folder holding the `struktur` console script or the frozen
executable. Running `python -m struktur.build_tree` makes it the package
source folder instead.
"""

import os
import sys
from pathlib import Path

from pydantic import BaseModel, ConfigDict

OUTPUT_NAME = "struktur.txt"
ERROR_NAME = "struktur-error.txt"


class Settings(BaseModel):
    """Fixed file names plus the paths resolved from the running program."""

    model_config = ConfigDict(frozen=True)

    root: Path
    executable_name: str = ""
    output_name: str = OUTPUT_NAME
    error_name: str = ERROR_NAME

    @property
    def output_path(self) -> Path:
        return self.root / self.output_name

    @property
    def error_path(self) -> Path:
        return self.root / self.error_name

    @property
    def ignore_names(self) -> tuple[str, str]:
        return (self.executable_name, self.output_name)

    @classmethod
    def from_runtime(cls) -> "Settings":
        """Locate the running program: the frozen executable, else the launched script."""
        if getattr(sys, "frozen", False):
            program = sys.executable
        else:
            program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
        program = os.path.abspath(program)
        return cls(root=Path(program).parent, executable_name=os.path.basename(program))
