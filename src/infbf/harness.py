from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .engine import RunOptions, RunResult, run_program
from .errors import ContractError, make_contract_error
from .tape import Tape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fixture:
    """
    One conformance check: run `cmds` on `tape` with `stdin`, expect `want`.

    `left_bounded` asserts that the program never moves the pointer below
    index 0, as on a brainfuck implementation whose tape ends on the left.
    """
    desc: str
    cmds: str
    tape: str
    want: str
    stdin: str = ''
    want_stdout: str = ''
    left_bounded: bool = False


@dataclass(frozen=True)
class Outcome:
    fixture: Fixture
    error: Optional[ContractError] = None

    @property
    def passed(self) -> bool:
        return self.error is None


def check(fixture: Fixture, *, options: Optional[RunOptions] = None) -> RunResult:
    """Run `fixture`, raising ContractError on the first mismatch."""
    want = Tape.parse(fixture.want)
    result = run_program(fixture.cmds, fixture.stdin, Tape.parse(fixture.tape), options=options)
    got = result.tape

    if fixture.left_bounded and result.min_index_reached < 0:
        raise ContractError(
            message=(
                f"{fixture.desc}: failed: tape was bounded to the left but algorithm reached "
                f"as low as index {result.min_index_reached}"
            ),
            want="min index >= 0",
            got=str(result.min_index_reached),
        )
    if not got.equals(want):
        raise make_contract_error(desc=fixture.desc, what="tape", want=want.pretty(), got=got.pretty())
    if '[' in fixture.want and got.pointer != want.pointer:
        raise make_contract_error(
            desc=fixture.desc,
            what=f"pointer at {want.pointer}",
            want=want.pretty(),
            got=got.pretty(),
        )
    if result.text != fixture.want_stdout:
        raise make_contract_error(desc=fixture.desc, what="stdout", want=fixture.want_stdout, got=result.text)
    return result


def run_suite(fixtures: Iterable[Fixture], *, options: Optional[RunOptions] = None) -> List[Outcome]:
    outcomes = []
    for fixture in fixtures:
        try:
            check(fixture, options=options)
        except ContractError as e:
            logger.warning("%s", e)
            outcomes.append(Outcome(fixture, e))
        else:
            outcomes.append(Outcome(fixture))

    failed = sum(1 for o in outcomes if not o.passed)
    logger.info("%d fixtures, %d passed, %d failed", len(outcomes), len(outcomes) - failed, failed)
    return outcomes
