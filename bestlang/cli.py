"""
bestlang.cli - BestLang Command Line Interface

- bestlang                  Start the interactive REPL (compile mode)
- bestlang repl             Start the interactive REPL (explicit)
- bestlang -i               Start the interactive REPL (flag form)
- bestlang print -a         REPL printing the AST of each line
- bestlang print -d         REPL printing the desugared AST of each line
- bestlang -c <code>        Compile code and print the JavaScript
- bestlang -e <file>        Compile a file and print the JavaScript
"""

import argparse
import sys
import traceback
from typing import Optional

from bestlang.compiler import BestLangError, BestLangSyntaxError
from bestlang.config import CompilerOptions

# Known subcommands - anything else in first position is rejected
SUBCOMMANDS = {"repl", "print"}


def cmd_repl(mode_name: str, options: CompilerOptions) -> int:
    """Start the interactive REPL in the given mode."""
    from bestlang.repl import ReplMode, create_repl

    try:
        mode = ReplMode.parse(mode_name)
    except BestLangError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_file = None
    if options.log_path:
        log_file = open(options.log_path, "a", encoding="utf-8")
    try:
        repl_instance = create_repl(mode, options, log_file)
        repl_instance.run()
    finally:
        if log_file is not None:
            log_file.close()
    return 0


def cmd_compile_code(code: str, options: CompilerOptions, verbose: bool = False) -> int:
    """Compile BestLang code given on the command line."""
    from bestlang.compiler import compile

    try:
        print(compile(code, options.file_name, options))
        return 0
    except (BestLangSyntaxError, BestLangError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if verbose:
            traceback.print_exc(file=sys.stderr)
        return 1


def cmd_compile_file(
    filepath: str, options: CompilerOptions, verbose: bool = False
) -> int:
    """Compile a BestLang file and print the JavaScript."""
    from bestlang.compiler import compile_file

    try:
        print(compile_file(filepath, options))
        return 0
    except (BestLangSyntaxError, BestLangError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if verbose:
            traceback.print_exc(file=sys.stderr)
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="bestlang",
        description="BestLang - a literal language that compiles to JavaScript",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  bestlang                      Start interactive REPL
  bestlang repl                 Start interactive REPL (explicit)
  bestlang print -a             REPL that prints the AST
  bestlang print -d             REPL that prints the desugared AST
  bestlang -c ':hello'          Compile code directly
  bestlang -e script.best       Compile a file to JavaScript
        """,
    )

    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Start the REPL (default when no command is given)",
    )

    parser.add_argument(
        "-c",
        "--command",
        metavar="CODE",
        help="Compile BestLang code directly and print the JavaScript",
    )

    parser.add_argument(
        "-e",
        "--export",
        metavar="FILE",
        help="Compile a BestLang file and print the JavaScript",
    )

    parser.add_argument(
        "--separator",
        default=None,
        help="Text placed between top-level expressions in the output",
    )

    parser.add_argument(
        "--log",
        metavar="FILE",
        default=None,
        help="Log file for REPL evaluations",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print tracebacks for errors",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    subparsers.add_parser("repl", help="Start the interactive REPL")

    print_parser = subparsers.add_parser(
        "print", help="Start a REPL that prints the AST instead of code"
    )
    print_group = print_parser.add_mutually_exclusive_group()
    print_group.add_argument(
        "-a", "--ast", action="store_true", help="Print the parsed AST"
    )
    print_group.add_argument(
        "-d",
        "--desugared",
        action="store_true",
        help="Print the desugared AST",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the BestLang CLI. Calls sys.exit with return code."""
    sys.exit(_main(argv))


def _main(argv: Optional[list[str]] = None) -> int:
    """Internal main that returns exit code."""
    if argv is None:
        argv = sys.argv[1:]

    if argv and not argv[0].startswith("-") and argv[0] not in SUBCOMMANDS:
        print("Error: Invalid command specified", file=sys.stderr)
        return 1

    parser = create_parser()
    args = parser.parse_args(argv)

    options = CompilerOptions.from_env(separator=args.separator, log_path=args.log)

    if args.command is not None:
        return cmd_compile_code(args.command, options, args.verbose)

    if args.export:
        return cmd_compile_file(args.export, options, args.verbose)

    if args.subcommand == "print":
        if args.desugared:
            return cmd_repl("printDesugared", options)
        if args.ast:
            return cmd_repl("printAST", options)

    # No arguments, -i, repl, or print without a flag
    return cmd_repl("repl", options)


if __name__ == "__main__":
    main()
