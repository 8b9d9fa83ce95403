"""Fixed demonstration games and the console runner that checks them."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .config import log_level, strict_tenth_frame_enabled
from .constants import FRAME_COUNT, LAST_FRAME
from .exceptions import DomainException, problem_from_exception
from .models import Player
from .schemas import ScenarioReport, ScenarioResult
from .utils.sentry import capture_exception, init_sentry

logger = logging.getLogger(__name__)


@dataclass
class Scenario:
    name: str
    player_name: str
    expected: int
    fill: Callable[[Player], None]

    def run(self, *, strict_tenth_frame: bool = False) -> int:
        player = Player(self.player_name, strict_tenth_frame=strict_tenth_frame)
        self.fill(player)
        return player.calculate_score()


def _fill_simple(player: Player) -> None:
    for i in range(FRAME_COUNT):
        player.record_frame(i, 3, 4)


def _fill_spare(player: Player) -> None:
    player.record_frame(0, 4, 6)
    player.record_frame(1, 3, 5)
    for i in range(2, FRAME_COUNT):
        player.record_frame(i, 0, 0)


def _fill_strike(player: Player) -> None:
    player.record_frame(0, 10, 0)
    player.record_frame(1, 3, 5)
    for i in range(2, FRAME_COUNT):
        player.record_frame(i, 0, 0)


def _fill_final_strike(player: Player) -> None:
    for i in range(LAST_FRAME):
        player.record_frame(i, 0, 0)
    player.record_frame(LAST_FRAME, 10, 10, 10)


def _fill_final_spare(player: Player) -> None:
    for i in range(LAST_FRAME):
        player.record_frame(i, 0, 0)
    player.record_frame(LAST_FRAME, 4, 6, 7)


SCENARIOS: List[Scenario] = [
    Scenario("simple_score", "TestPlayer", 70, _fill_simple),
    Scenario("spare_score", "SparePlayer", 21, _fill_spare),
    Scenario("strike_score", "StrikePlayer", 26, _fill_strike),
    Scenario("final_frame_strike", "FinalFramePlayer", 30, _fill_final_strike),
    Scenario("final_frame_spare", "FinalSparePlayer", 17, _fill_final_spare),
]


def run_scenario(scenario: Scenario, *, strict_tenth_frame: bool = False) -> ScenarioResult:
    try:
        actual = scenario.run(strict_tenth_frame=strict_tenth_frame)
    except DomainException as exc:
        logger.warning("Scenario %s raised %s: %s", scenario.name, exc.code, exc)
        capture_exception(exc)
        return ScenarioResult(
            name=scenario.name,
            expected=scenario.expected,
            passed=False,
            error=problem_from_exception(exc, instance=scenario.name),
        )
    passed = actual == scenario.expected
    if not passed:
        logger.warning(
            "Scenario %s expected %d, got %d", scenario.name, scenario.expected, actual
        )
    return ScenarioResult(
        name=scenario.name,
        expected=scenario.expected,
        actual=actual,
        passed=passed,
    )


def run_scenarios(
    scenarios: Sequence[Scenario] = SCENARIOS, *, strict_tenth_frame: bool = False
) -> ScenarioReport:
    return ScenarioReport(
        results=[
            run_scenario(s, strict_tenth_frame=strict_tenth_frame) for s in scenarios
        ]
    )


def _print_text(report: ScenarioReport) -> None:
    print("Test cases...")
    for result in report.results:
        if result.passed:
            print(f"{result.name} passed.")
        elif result.error is not None:
            print(f"{result.name} FAILED: {result.error.detail}")
            print(result.error.model_dump_json(), file=sys.stderr)
        else:
            print(
                f"{result.name} FAILED: expected {result.expected}, got {result.actual}"
            )
    if report.all_passed:
        print("All tests passed successfully.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score the built-in demonstration games and check their totals."
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of one line per game.",
    )
    parser.add_argument(
        "--strict-tenth-frame",
        action="store_true",
        default=None,
        help="Reject tenth-frame roll combinations that cannot occur on a lane.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=log_level())
    init_sentry()

    strict = args.strict_tenth_frame
    if strict is None:
        strict = strict_tenth_frame_enabled()

    try:
        report = run_scenarios(strict_tenth_frame=strict)
    except Exception as exc:
        logger.error("Unhandled exception", exc_info=(type(exc), exc, exc.__traceback__))
        capture_exception(exc)
        return 1

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        _print_text(report)
    return 0 if report.all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
