"""Run a script of statements and write one result line per statement."""
from pathlib import Path
from typing import List, TextIO, Union

from pydantic import BaseModel, ConfigDict, Field

from smart_calculator.common.digits import format_decimal
from smart_calculator.common.errors import CalculatorError
from smart_calculator.common.logger import logger
from smart_calculator.common.operations import StatementError, StatementResult
from smart_calculator.common.settings import Settings
from smart_calculator.core.variables import VariableStore
from smart_calculator.session.calculator import COMMAND_PREFIX
from smart_calculator.session.statement import execute_statement

Outcome = Union[StatementResult, StatementError]


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: scripts/session.7z
    output: scripts/session_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffixes = "".join(input_path.suffixes)
    stem = input_path.name[: len(input_path.name) - len(suffixes)] or input_path.name
    suffix_safe = suffixes.replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def format_outcome(outcome: Outcome) -> str:
    """Render an outcome as a single results line (without newline)."""
    if isinstance(outcome, StatementError):
        return f"{outcome.statement} -> ERROR: {outcome.error}"
    if outcome.is_assignment:
        return f"{outcome.statement} -> OK"
    return f"{outcome.statement} = {format_decimal(outcome.result)}"


class ScriptRunner(BaseModel):
    """
    Sequential runner of statement scripts.

    Features:
        - Executes statements in file order against one variable store.
        - Skips empty lines and "/" commands.
        - Writes each result to disk as soon as the statement finishes.
        - Records failures and keeps going.
    """

    # Allow arbitrary types like VariableStore
    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: Settings = Field(default_factory=Settings, description="Calculator settings")
    variables: VariableStore = Field(default_factory=VariableStore, description="Variables shared by the script")

    @staticmethod
    def _statements(content: str) -> List[str]:
        """
        Split script content into statements.

        :param str content: Script text

        :return: Non-empty, non-command lines, stripped
        :rtype: List[str]
        """
        lines = [line.strip() for line in content.splitlines()]
        return [line for line in lines if line and not line.startswith(COMMAND_PREFIX)]

    def execute(self, statement: str) -> Outcome:
        try:
            return execute_statement(statement, self.variables, self.settings)
        except CalculatorError as exc:
            logger.warning(f"❌ Statement failed: {statement!r}: {exc}")
            return StatementError(statement=statement, error=str(exc))

    def run(self, content: str, f_out: TextIO) -> List[Outcome]:
        """
        Execute every statement of ``content`` and write result lines to ``f_out``.

        :param str content: Script text
        :param TextIO f_out: Open text stream receiving the results

        :return: Outcomes in statement order
        :rtype: List[Outcome]
        """
        outcomes: List[Outcome] = []
        for statement in self._statements(content):
            outcome = self.execute(statement)
            outcomes.append(outcome)
            # Write output immediately
            f_out.write(format_outcome(outcome) + "\n")
            f_out.flush()
        return outcomes

    def run_file(self, content: str, output_file: Path) -> List[Outcome]:
        """
        Execute a script and write its results to ``output_file``.

        :param str content: Script text
        :param Path output_file: Path where results will be written

        :return: Outcomes in statement order
        :rtype: List[Outcome]
        """
        logger.info(f"📄 Writing results to {output_file}")
        with output_file.open("w", encoding="utf-8") as f_out:
            return self.run(content, f_out)
