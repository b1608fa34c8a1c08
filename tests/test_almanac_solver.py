from __future__ import annotations

import json
from pathlib import Path

import pytest

from almanac.cli import main
from almanac.errors import ChainIncomplete, MalformedInput, MissingCategory, OverlappingRules
from almanac.logging_utils import log_failure
from almanac.memory import hash_puzzle, load_memory_db, save_memory_db
from almanac.parser import load_puzzle, parse_header, parse_puzzle, parse_rule, parse_seeds
from almanac.solver import SolverConfig, lowest_location, resolve_puzzle, solve_puzzle, solve_text
from almanac.types import Interval, RangeMap


def quiet(**kwargs) -> SolverConfig:
    return SolverConfig(verbose=False, **kwargs)


def test_parse_sample(sample_text):
    puzzle = parse_puzzle(sample_text)
    assert puzzle.seeds == (Interval(79, 93), Interval(55, 68))
    assert len(puzzle.chain) == 7
    seed_to_soil = puzzle.chain["seed"]
    assert seed_to_soil.dest == "soil"
    assert seed_to_soil.rules == (RangeMap.from_triple(50, 98, 2), RangeMap.from_triple(52, 50, 48))


def test_parse_seeds_values_mode():
    assert parse_seeds("seeds: 79 14", "values") == [Interval(79, 80), Interval(14, 15)]


@pytest.mark.parametrize(
    "line",
    ["79 14 55 13", "seeds: 79 14 55", "seeds: 79 x", "seeds: 5 -1"],
)
def test_parse_seeds_rejects(line):
    with pytest.raises(MalformedInput):
        parse_seeds(line)


def test_parse_header_and_rule():
    assert parse_header("light-to-temperature map:") == ("light", "temperature")
    assert parse_rule("45 77 23") == RangeMap(src=Interval(77, 100), dst=Interval(45, 68))
    with pytest.raises(MalformedInput):
        parse_header("light-temperature map:")
    with pytest.raises(MalformedInput):
        parse_rule("45 77")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "seeds:\n\nseed-to-location map:\n1 2 3\n",
        "seeds: 1 2\n1 2 3\n",
        "seeds: 1 2\n\nseed-to-soil map:\n1 2 3\n\nseed-to-location map:\n4 5 6\n",
        "seeds: 1 2\n\nseed-to-soil map:\n1 2 -3\n",
    ],
)
def test_parse_puzzle_rejects(text):
    with pytest.raises(MalformedInput):
        parse_puzzle(text)


def test_malformed_input_reports_line():
    with pytest.raises(MalformedInput) as info:
        parse_puzzle("seeds: 1 2\n\nseed-to-soil map:\n1 2\n")
    assert info.value.line_no == 4
    assert str(info.value).startswith("line 4:")


def test_sample_lowest_location(sample_text):
    assert solve_text(sample_text, quiet()) == 46


def test_sample_values_mode(sample_text):
    assert solve_text(sample_text, quiet(seed_mode="values")) == 35


def test_lowest_location_from_file(sample_path):
    assert lowest_location(sample_path, quiet()) == 46


def test_parallel_matches_sequential(sample_text):
    puzzle = parse_puzzle(sample_text)
    assert solve_puzzle(puzzle, quiet(max_workers=2)) == solve_puzzle(puzzle, quiet())


def test_resolve_puzzle_conserves_seed_count(sample_text):
    puzzle = parse_puzzle(sample_text)
    out = resolve_puzzle(puzzle, quiet())
    assert sum(iv.length for iv in out) == 14 + 13


def test_verbose_prints_path(sample_text, capsys):
    solve_text(sample_text, SolverConfig())
    out = capsys.readouterr().out
    assert "seed -> soil -> fertilizer -> water -> light -> temperature -> humidity -> location" in out


def test_chain_errors_surface(sample_text):
    head, rest = sample_text.split("water-to-light map:")
    without_light = head + "light-to-temperature map:" + rest.split("light-to-temperature map:")[1]
    with pytest.raises(MissingCategory) as info:
        solve_text(without_light, quiet())
    assert info.value.category == "water"
    with pytest.raises(ChainIncomplete):
        solve_text(sample_text, quiet(end_category="nowhere"))


def test_validate_rules_opt_in():
    text = "seeds: 0 10\n\nseed-to-location map:\n100 0 5\n200 3 5\n"
    assert solve_text(text, quiet()) == 8
    with pytest.raises(OverlappingRules):
        solve_text(text, quiet(validate_rules=True))


def test_solver_config_normalises():
    assert SolverConfig(seed_mode="VALUES").seed_mode == "values"
    assert SolverConfig(max_workers=0).max_workers >= 1
    with pytest.raises(ValueError):
        SolverConfig(seed_mode="pairs")


def test_memory_roundtrip(tmp_path: Path):
    path = tmp_path / "memory.json"
    assert load_memory_db(path) == {"results": {}}
    key = hash_puzzle("seeds: 1 2", "ranges", "seed", "location")
    assert key != hash_puzzle("seeds: 1 2", "values", "seed", "location")
    save_memory_db({"results": {key: 3}}, path)
    assert load_memory_db(path)["results"][key] == 3
    path.write_text("[]")
    assert load_memory_db(path) == {"results": {}}


def _cli_args(tmp_path: Path, input_path: Path, *extra: str) -> list[str]:
    return [
        "--input_path",
        str(input_path),
        "--quiet",
        "--memory-db",
        str(tmp_path / "memory.json"),
        "--fail-log",
        str(tmp_path / "failures.jsonl"),
        *extra,
    ]


def test_cli_prints_answer(tmp_path: Path, sample_path, capsys):
    main(_cli_args(tmp_path, sample_path))
    assert capsys.readouterr().out.strip() == "46"
    main(_cli_args(tmp_path, sample_path, "--seed-mode", "values", "--no-memory"))
    assert capsys.readouterr().out.strip() == "35"
    assert len(load_memory_db(tmp_path / "memory.json")["results"]) == 1


def test_cli_uses_memory(tmp_path: Path, sample_path, sample_text, capsys):
    key = hash_puzzle(sample_text, "ranges", "seed", "location")
    save_memory_db({"results": {key: 12345}}, tmp_path / "memory.json")
    main(_cli_args(tmp_path, sample_path))
    assert capsys.readouterr().out.strip() == "12345"
    main(_cli_args(tmp_path, sample_path, "--no-memory"))
    assert capsys.readouterr().out.strip() == "46"


def test_cli_logs_failures(tmp_path: Path, capsys):
    broken = tmp_path / "broken.txt"
    broken.write_text("seeds: 1 2 3\n")
    with pytest.raises(SystemExit) as info:
        main(_cli_args(tmp_path, broken))
    assert info.value.code == 1
    assert "MalformedInput" in capsys.readouterr().err
    entries = [json.loads(line) for line in (tmp_path / "failures.jsonl").read_text().splitlines()]
    assert entries[0]["error"] == "MalformedInput"
    assert entries[0]["input_path"] == str(broken)


def test_load_puzzle_values_mode(sample_path):
    puzzle = load_puzzle(sample_path, seed_mode="values")
    assert puzzle.seeds[:2] == (Interval(79, 80), Interval(14, 15))
    assert puzzle.chain["humidity"].dest == "location"


def test_zero_length_seed_keeps_its_start():
    assert solve_text("seeds: 3 0\n\nseed-to-location map:\n100 0 5\n", quiet()) == 103


def test_cli_validate_rules_ignores_unvalidated_answer(tmp_path: Path, capsys):
    overlapping = tmp_path / "overlap.txt"
    overlapping.write_text("seeds: 0 10\n\nseed-to-location map:\n100 0 5\n200 3 5\n")
    main(_cli_args(tmp_path, overlapping))
    assert capsys.readouterr().out.strip() == "8"
    with pytest.raises(SystemExit) as info:
        main(_cli_args(tmp_path, overlapping, "--validate-rules"))
    assert info.value.code == 1
    assert "OverlappingRules" in capsys.readouterr().err


def test_corrupt_memory_is_treated_as_empty(tmp_path: Path, sample_path, capsys):
    (tmp_path / "memory.json").write_text("{not json")
    assert load_memory_db(tmp_path / "memory.json") == {"results": {}}
    main(_cli_args(tmp_path, sample_path))
    assert capsys.readouterr().out.strip() == "46"
    assert len(load_memory_db(tmp_path / "memory.json")["results"]) == 1


def test_failure_log_directory_is_created(tmp_path: Path):
    log_path = tmp_path / "logs" / "nested" / "failures.jsonl"
    log_failure("input.txt", MalformedInput("bad seeds", 1), log_path)
    entry = json.loads(log_path.read_text())
    assert entry == {"input_path": "input.txt", "error": "MalformedInput", "message": "line 1: bad seeds"}
