"""
bestlang.repl - Interactive shell

Modules:
- backend.py: REPL backend (modes, evaluation, logging) and the terminal
  frontend

Modes:
- repl: compile each line and print the JavaScript
- printAST: print the parsed AST of each line
- printDesugared: print the desugared AST of each line
"""

from bestlang.repl.backend import (
    QUIT_COMMAND,
    EvalResult,
    ReplBackend,
    ReplFrontend,
    ReplMode,
    ResultType,
    TerminalRepl,
    create_repl,
)

__all__ = [
    "ReplBackend",
    "ReplFrontend",
    "ReplMode",
    "TerminalRepl",
    "EvalResult",
    "ResultType",
    "create_repl",
    "QUIT_COMMAND",
]
