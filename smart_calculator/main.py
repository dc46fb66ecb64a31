"""
Command line entry point.

Without arguments the calculator runs interactively, reading statements
from stdin until "/exit" or end of input.

With a file argument it runs the statements of that file (or of the first
.txt inside a .zip, .tar.xz or .7z archive) and writes the results next to it.
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, FilePath, ValidationError

from smart_calculator.common.logger import configure_logging
from smart_calculator.common.settings import Settings
from smart_calculator.script.loader import load_script
from smart_calculator.script.runner import ScriptRunner, build_output_path
from smart_calculator.session.calculator import Calculator


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath, optional
        Script of statements to run instead of the interactive session.
    """

    file_path: Optional[FilePath] = None


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="smart-calculator",
        description="Integer calculator with variables",
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        default=None,
        help="Path to a file (or archive) of statements to run; interactive when omitted",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path)
    except ValidationError as exc:
        parser.error(str(exc))


def run_script(input_path: Path, settings: Settings) -> Path:
    """
    Run a script file and write its results.

    :param input_path: Script or archive to run
    :param settings: Calculator settings
    :return: Path of the results file
    """
    output_path = build_output_path(input_path)
    runner = ScriptRunner(settings=settings)
    script = load_script(input_path)
    if script.member is not None:
        print(f"Statements read from {script.member} in {input_path.name}")
    runner.run_file(script.content, output_path)
    return output_path


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function of the ``smart-calculator`` command.
    """
    cli_args = parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        sys.exit(f"Invalid configuration: {exc}")
    configure_logging(settings.log_level)

    if cli_args.file_path is None:
        Calculator(settings=settings).run()
    else:
        output_path = run_script(cli_args.file_path, settings)
        print(f"Results written to {output_path}")


if __name__ == "__main__":
    main()
