"""Interactive calculator session."""
from typing import Callable, Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from smart_calculator.common.digits import format_decimal
from smart_calculator.common.errors import CalculatorError
from smart_calculator.common.logger import logger
from smart_calculator.common.settings import Settings
from smart_calculator.core.variables import VariableStore
from smart_calculator.session.statement import execute_statement

COMMAND_PREFIX = "/"
EXIT_MESSAGE = "Bye!"
UNKNOWN_COMMAND_MESSAGE = "Unknown command"

HELP = """\
This program evaluates expressions containing integers and the plus, minus, times, divide and power operators.
Unary plus and minus are supported, and multiple operators in succession are evaluated correctly
(e.g. "2 -- 3" is 5). Parentheses group sub-expressions. Division truncates toward zero.
Variables made of Latin letters can be assigned with "name = expression" and used in later expressions.
Commands: /help shows this message, /exit quits."""


class Calculator(BaseModel):
    """
    Interactive session reading statements line by line.

    Lifecycle:
        - Created with an empty variable store
        - Each non-empty line is either a command or a statement
        - A statement is executed to completion before the next line is read
        - Errors are printed and the session continues
        - "/exit" or end of input ends the session
    """

    # Allow arbitrary types like VariableStore
    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: Settings = Field(default_factory=Settings, description="Calculator settings")
    variables: VariableStore = Field(default_factory=VariableStore, description="Variables of the session")
    output: Callable[[str], None] = Field(default=print, description="Sink for printed lines")

    def run_command(self, command: str) -> bool:
        """
        Execute a "/" command.

        :param str command: Command line, including the leading "/"

        :return: True if the session must end
        :rtype: bool
        """
        if command == "/exit":
            return True
        if command == "/help":
            self.output(HELP)
        else:
            self.output(UNKNOWN_COMMAND_MESSAGE)
        return False

    def run_statement(self, statement: str) -> None:
        """Execute a statement and print its value, or the error message."""
        try:
            outcome = execute_statement(statement, self.variables, self.settings)
        except CalculatorError as exc:
            logger.info(f"❌ {statement!r}: {exc.detail or exc}")
            self.output(str(exc))
            return
        if outcome.result is not None:
            self.output(format_decimal(outcome.result))

    def handle_line(self, line: str) -> bool:
        """
        Dispatch one input line.

        :param str line: Raw input line

        :return: True if the session must end
        :rtype: bool
        """
        line = line.strip()
        if not line:
            return False
        if line.startswith(COMMAND_PREFIX):
            return self.run_command(line)
        self.run_statement(line)
        return False

    def run(self, lines: Optional[Iterable[str]] = None) -> None:
        """
        Run the session until "/exit" or the end of input.

        :param Iterable[str] lines: Input lines, read from stdin when omitted
        """
        logger.info("🧮 Session started")
        for line in _read_stdin(self.settings.prompt) if lines is None else lines:
            if self.handle_line(line):
                break
        self.output(EXIT_MESSAGE)
        logger.info(f"🧮 Session ended with {len(self.variables)} variable(s)")


def _read_stdin(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return
