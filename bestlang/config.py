"""
bestlang.config - Compiler and shell configuration

CompilerOptions holds the settings shared by the compiler entry points,
the REPL and the command line. Values come from keyword arguments or from
the environment:

    BESTLANG_FILE       file name recorded in source locations (default: stdin)
    BESTLANG_SEPARATOR  text placed between emitted top-level fragments
                        (default: empty, fragments are concatenated)
    BESTLANG_PROMPT     REPL prompt (default: "bestlang > ")
    BESTLANG_LOG        path of a log file for REPL evaluations
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_FILE_NAME = "stdin"
DEFAULT_SEPARATOR = ""
DEFAULT_PROMPT = "bestlang > "


@dataclass
class CompilerOptions:
    """
    Settings for a compile call or a shell session.

    Attributes:
        file_name: Name recorded in every SourceLocation
        separator: Text inserted between the code of consecutive top-level
                   expressions
        prompt: Prompt shown by the terminal REPL
        log_path: Optional log file receiving one line per evaluation
    """

    file_name: str = DEFAULT_FILE_NAME
    separator: str = DEFAULT_SEPARATOR
    prompt: str = DEFAULT_PROMPT
    log_path: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "CompilerOptions":
        """Load options from environment variables; keyword overrides win."""
        if environ is None:
            environ = os.environ
        values = {
            "file_name": environ.get("BESTLANG_FILE", DEFAULT_FILE_NAME),
            "separator": environ.get("BESTLANG_SEPARATOR", DEFAULT_SEPARATOR),
            "prompt": environ.get("BESTLANG_PROMPT", DEFAULT_PROMPT),
            "log_path": environ.get("BESTLANG_LOG") or None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = [
    "CompilerOptions",
    "DEFAULT_FILE_NAME",
    "DEFAULT_SEPARATOR",
    "DEFAULT_PROMPT",
]
