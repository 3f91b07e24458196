import logging
from typing import Iterable, List, NamedTuple

from dollarcents.dollars import Dollars, ParseError
from dollarcents.my_progress import no_progress_factory

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


class LineAmount(NamedTuple):
    line_no: int
    text: str
    value: Dollars


class LineError(NamedTuple):
    line_no: int
    text: str
    message: str


class ParsedAmounts:
    """The outcome of parsing many amounts; failures never abort the scan."""

    def __init__(self):
        self.amounts: List[LineAmount] = []
        self.errors: List[LineError] = []

    @property
    def success(self) -> bool:
        return not self.errors

    def values(self) -> List[Dollars]:
        return [a.value for a in self.amounts]

    def total(self) -> Dollars:
        return total(self.values())


def total(amounts: Iterable[Dollars]) -> Dollars:
    # Dollars addition wraps on overflow, so the total does too.
    return sum(amounts, Dollars())


def parse_amounts(
    lines: Iterable[str],
    progress_label="Parsing amounts",
    num_lines=None,
    progress_factory=no_progress_factory,
    file_lines=True,
) -> ParsedAmounts:
    """Parses one amount per line.

    With file_lines, surrounding whitespace is stripped, and blank lines and
    lines starting with '#' are skipped but still counted for line numbers
    (1-based). Without it every string is parsed exactly as given.
    """
    result = ParsedAmounts()
    progress = progress_factory(progress_label, num_lines)
    for line_no, line in enumerate(lines, start=1):
        progress.next()
        text = line.strip() if file_lines else line
        if file_lines and (not text or text.startswith(COMMENT_PREFIX)):
            continue
        try:
            result.amounts.append(LineAmount(line_no, text, Dollars.parse(text)))
        except ParseError as e:
            logger.warning(f"Line {line_no}: cannot parse {text!r}: {e}")
            result.errors.append(LineError(line_no, text, str(e)))
    progress.finish()
    logger.debug(
        f"Parsed {len(result.amounts)} amounts with {len(result.errors)} errors")
    return result


def read_amounts_file(path, progress_factory=no_progress_factory) -> ParsedAmounts:
    logger.info(f"Loading amounts from file: {path}")
    with open(path, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()
    # Strip a leading BOM if present.
    if lines and lines[0].startswith("\ufeff"):
        lines[0] = lines[0][1:]
    return parse_amounts(
        lines,
        progress_label=f"Parsing {path}",
        num_lines=len(lines),
        progress_factory=progress_factory,
    )
