"""
BestLang REPL - a read-compile-print loop with pluggable frontends.

The backend turns one line of input into an EvalResult according to the
session mode (compile to JavaScript, or dump the AST). Frontends handle
input and output; errors from the compiler never end the session.
"""

import sys
import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from bestlang.compiler import (
    BestLangError,
    BestLangSyntaxError,
    compile,
    pprint_ast,
    pprint_desugared_ast,
)
from bestlang.config import CompilerOptions

QUIT_COMMAND = "quit"


class ReplMode(Enum):
    """What the REPL does with each line of input."""

    COMPILE = "repl"
    PRINT_AST = "printAST"
    PRINT_DESUGARED = "printDesugared"

    @classmethod
    def parse(cls, name: str) -> "ReplMode":
        for mode in cls:
            if mode.value == name:
                return mode
        raise BestLangError("Invalid REPL mode specified")


class ResultType(Enum):
    """Type of result returned from evaluation."""

    VALUE = "value"
    ERROR = "error"
    EMPTY = "empty"


@dataclass
class EvalResult:
    """Result of evaluating one line in the REPL."""

    type: ResultType
    value: Any = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    traceback: Optional[str] = None

    def is_success(self) -> bool:
        return self.type == ResultType.VALUE or self.type == ResultType.EMPTY

    def is_error(self) -> bool:
        return self.type == ResultType.ERROR


class ReplBackend:
    """
    Frontend-agnostic evaluation logic.

    Each call to eval() is independent: the compiler keeps no state between
    calls, so the backend holds only the mode, options and log file.
    """

    def __init__(
        self,
        mode: ReplMode = ReplMode.COMPILE,
        options: Optional[CompilerOptions] = None,
        log_file: Any = None,
    ):
        self.mode = mode
        self.options = options or CompilerOptions()
        self.log_file = log_file

    def _log(self, message: str) -> None:
        """Write a message to the log file, if one is configured."""
        if self.log_file:
            self.log_file.write(f"{message}\n")
            self.log_file.flush()

    @property
    def proc(self) -> Callable[[str], str]:
        """The pipeline function for the current mode."""
        file_name = self.options.file_name
        if self.mode == ReplMode.PRINT_AST:
            return lambda src: pprint_ast(src, file_name)
        if self.mode == ReplMode.PRINT_DESUGARED:
            return lambda src: pprint_desugared_ast(src, file_name)
        return lambda src: compile(src, file_name, self.options)

    def eval(self, code: str) -> EvalResult:
        """Run one line of input through the pipeline for the current mode."""
        try:
            output = self.proc(code)
        except (BestLangSyntaxError, BestLangError) as e:
            result = EvalResult(
                type=ResultType.ERROR,
                error=str(e),
                error_type=type(e).__name__,
                traceback=traceback.format_exc(),
            )
            self._log(f"[{self.mode.value}] {code!r} -> {result.error_type}: {e}")
        else:
            if output:
                result = EvalResult(type=ResultType.VALUE, value=output)
            else:
                result = EvalResult(type=ResultType.EMPTY)
            self._log(f"[{self.mode.value}] {code!r} -> {output!r}")

        return result


class ReplFrontend(ABC):
    """
    Abstract base class for REPL frontends.

    Subclasses should implement the run method to provide
    specific input/output behavior.
    """

    def __init__(self, backend: Optional[ReplBackend] = None):
        self.backend = backend or ReplBackend()

    @abstractmethod
    def run(self):
        """Run the REPL frontend."""
        pass


class TerminalRepl(ReplFrontend):
    """
    Terminal REPL with readline history when available.
    Type ``quit`` or press Ctrl-D to leave.
    """

    def __init__(
        self,
        backend: Optional[ReplBackend] = None,
        use_readline: bool = True,
    ):
        super().__init__(backend)
        self.readline = None
        if use_readline:
            self.setup_readline()

    @property
    def prompt(self) -> str:
        return self.backend.options.prompt

    def setup_readline(self):
        """Setup readline for better line editing."""
        try:
            import readline

            self.readline = readline

            try:
                readline.read_history_file(".bestlang_history")
            except FileNotFoundError:
                pass

            import atexit

            atexit.register(lambda: readline.write_history_file(".bestlang_history"))

        except ImportError:
            self.readline = None

    def print_result(self, result: EvalResult):
        """Print an evaluation result."""
        if result.is_error():
            print(f"Error: {result.error}", file=sys.stderr)
            if result.traceback and "--verbose" in sys.argv:
                print(result.traceback, file=sys.stderr)
        elif result.type == ResultType.VALUE:
            print(result.value)

    def run(self):
        """Run the terminal REPL."""
        while True:
            try:
                line = input(self.prompt)
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue

            if line.strip() == QUIT_COMMAND:
                break

            result = self.backend.eval(line)
            self.print_result(result)


def create_repl(
    mode: ReplMode = ReplMode.COMPILE,
    options: Optional[CompilerOptions] = None,
    log_file: Any = None,
) -> TerminalRepl:
    """Create a terminal REPL for the given mode."""
    return TerminalRepl(ReplBackend(mode, options, log_file))
