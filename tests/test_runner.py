"""
Tests for the runner: selection, containment of solver errors, examples
and the report output.

Usage:
    pytest tests/test_runner.py
"""

import io
import re
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.days import Day, DayFactory, InputNotFoundError, UnitNotFoundError
from src.days.day01 import Day1
from src.runner import Options, ResourceSample, ResourceSampler, Runner


ANSI = re.compile(r"\033\[[0-9;]*m")


class FakeSampler(ResourceSampler):
    """Fixed memory readings."""
    name = "fake"

    def __init__(self, current: int = 512, peak: int = 2048):
        self.current = current
        self.peak = peak
        self.calls = 0

    def sample(self) -> ResourceSample:
        self.calls += 1
        return ResourceSample(current=self.current, peak=self.peak)


class FakeClock:
    """Advances by a fixed step each time it is read."""

    def __init__(self, step: float = 0.001):
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


def make_day(day_id: int, fail_part1: bool = False):
    class NumberedDay(Day):
        EXAMPLE1 = "x"

        def solve_part1(self, input):
            if fail_part1:
                raise RuntimeError(f"day {day_id} exploded")
            return day_id * 10 + 1

        def solve_part2(self, input):
            return day_id * 10 + 2

    NumberedDay.day_id = day_id
    NumberedDay.name = f"Day{day_id}"
    return NumberedDay


def make_factory(tmp_path: Path, registry) -> DayFactory:
    for day_id in registry:
        (tmp_path / f"day{day_id}.txt").write_text("input\n", encoding="utf-8")
    return DayFactory(tmp_path, registry=registry)


def run(options: Options, factory: DayFactory, sampler=None) -> str:
    """Run and return the output with ANSI codes removed."""
    stream = io.StringIO()
    runner = Runner(2025, options, factory, sampler=sampler or FakeSampler(),
                    clock=FakeClock(), stream=stream)
    runner.run()
    return ANSI.sub("", stream.getvalue())


def test_help_runs_nothing():
    factory = Mock(spec=DayFactory)

    output = run(Options(wants_help=True), factory)

    assert "Usage:" in output
    assert "--day=PATTERN" in output
    factory.create.assert_not_called()
    factory.all_available.assert_not_called()


def test_runs_all_available_days(tmp_path):
    factory = make_factory(tmp_path, {n: make_day(n) for n in (1, 2, 3)})

    output = run(Options(), factory)

    assert "Advent of Code 2025 Python" in output
    assert "Days: all" in output
    assert "Part: 1,2" in output
    assert "With Examples: no" in output
    for day_id in (1, 2, 3):
        assert f"Day{day_id}\n    Part1 {day_id}1\n" in output
        assert f"    Part2 {day_id}2\n" in output
    assert "Day4" not in output
    assert "Total time:" in output


def test_explicit_days_in_order(tmp_path):
    factory = make_factory(tmp_path, {n: make_day(n) for n in (1, 2, 3)})

    output = run(Options(days=[3, 1]), factory)

    assert output.index("Day3") < output.index("Day1")
    assert "Day2" not in output
    assert "Days: 3,1" in output


def test_explicit_unregistered_day_propagates(tmp_path):
    factory = make_factory(tmp_path, {1: make_day(1)})
    (tmp_path / "day2.txt").write_text("input\n", encoding="utf-8")

    with pytest.raises(UnitNotFoundError):
        run(Options(days=[2]), factory)

    # Discovery treats the same gap as the end of the calendar
    output = run(Options(), factory)
    assert "Day1" in output
    assert "Total time:" in output


def test_explicit_day_without_input_propagates(tmp_path):
    factory = make_factory(tmp_path, {1: make_day(1)})
    with pytest.raises(InputNotFoundError):
        run(Options(days=[1, 5]), factory)


def test_solver_error_does_not_stop_run(tmp_path):
    registry = {n: make_day(n) for n in (1, 2, 4)}
    registry[3] = make_day(3, fail_part1=True)
    factory = make_factory(tmp_path, registry)

    output = run(Options(), factory)

    assert "Day3\n    Part1 Error: day 3 exploded\n" in output
    assert "    Part2 32\n" in output
    assert "Day4\n    Part1 41\n" in output
    assert "Total time:" in output


def test_part_selection(tmp_path):
    factory = make_factory(tmp_path, {1: make_day(1)})

    output = run(Options(parts=[2]), factory)

    assert "Part1" not in output
    assert "Part2 12" in output
    assert "Part: 2" in output


def test_report_after_each_part(tmp_path):
    factory = make_factory(tmp_path, {1: make_day(1), 2: make_day(2)})
    sampler = FakeSampler(current=512, peak=2048)

    output = run(Options(), factory, sampler)

    reports = [line for line in output.splitlines() if "Mem[" in line]
    assert len(reports) == 4
    assert sampler.calls == 4
    assert reports[0].strip() == "Mem[512b] Peak[2kb] Time[0.00100s]"


def test_single_example(tmp_path):
    factory = make_factory(tmp_path, {1: Day1})

    output = run(Options(days=[1], with_examples=True), factory)

    assert "With Examples: yes" in output
    assert "Day1 Examples\n    Part1 Example 3\n" in output
    assert "    Part2 Example 6\n" in output
    # Examples come before the real input
    assert output.index("Day1 Examples") < output.index("Day1\n")


def test_multiple_examples_are_lettered(tmp_path):
    class ManyExamples(make_day(1)):
        EXAMPLE2 = ["a", "bb", "ccc"]

        def solve_part2(self, input):
            return len(input)

    factory = make_factory(tmp_path, {1: ManyExamples})

    output = run(Options(parts=[2], with_examples=True), factory)

    assert "    Part2A 1\n    Part2B 2\n    Part2C 3\n" in output
    example_block = output.split("Day1 Examples")[1].split("Day1\n")[0]
    assert example_block.count("Mem[") == 1


def test_example_error_is_contained(tmp_path):
    factory = make_factory(tmp_path, {1: make_day(1, fail_part1=True)})

    output = run(Options(with_examples=True), factory)

    assert "Part1 Example Error: day 1 exploded" in output
    assert "Part2 Example 12" in output
    assert "Part2 12" in output


def test_none_answer_prints_empty(tmp_path):
    class Unsolved(make_day(1)):
        def solve_part2(self, input):
            return None

    factory = make_factory(tmp_path, {1: Unsolved})

    output = run(Options(parts=[2]), factory)

    assert "    Part2 \n" in output


def test_long_running_callback_prints_report(tmp_path):
    class Slow(make_day(1)):
        def solve_part1(self, input):
            self.report_long_running()
            return 1

    factory = make_factory(tmp_path, {1: Slow})

    output = run(Options(parts=[1]), factory)

    assert output.count("Mem[") == 2


def test_unknown_part_dispatch():
    runner = Runner(2025, Options(), Mock(spec=DayFactory), sampler=FakeSampler())
    day = Day1([])

    assert runner.solver_for(day, 1) == day.solve_part1
    assert runner.example_for(day, 2) == day.get_example2()
    with pytest.raises(ValueError):
        runner.solver_for(day, 3)
    with pytest.raises(ValueError):
        runner.example_for(day, 0)


def test_undecodable_input_does_not_abort_run(tmp_path):
    (tmp_path / "day1.txt").write_bytes(b"R10\nL5\xff\n")
    factory = DayFactory(tmp_path, registry={1: Day1})

    output = run(Options(), factory)

    assert "Day1\n" in output
    assert "Total time:" in output
