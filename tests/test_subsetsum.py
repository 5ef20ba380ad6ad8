import random
from collections import Counter

import pytest

from scratchpad.subsetsum import (
    ARRAY_LENGTH_RANGE,
    ELEMENT_RANGE,
    TARGET_RANGE,
    TEST_COUNT_RANGE,
    generate_input,
    generate_main,
    main,
    parse_cases,
    solve,
)


def _is_submultiset(subset, values):
    return not (Counter(subset) - Counter(values))


def test_solve_takes_first_mask_in_order():
    assert solve([1, 2, 3], 5) == [2, 3]


@pytest.mark.parametrize(
    "values, target",
    [([3, 34, 4, 12, 5, 2], 9), ([-5, 7, 10, -2], 3), ([8, 1, 6], 15)],
)
def test_solve_result_sums_to_target(values, target):
    result = solve(values, target)
    assert sum(result) == target
    assert _is_submultiset(result, values)


def test_solve_impossible_returns_none():
    assert solve([2, 4, 6], 7) is None


def test_solve_zero_target_is_empty_subset():
    assert solve([5, 9], 0) == []


def test_solve_empty_input():
    assert solve([], 4) is None


def test_parse_cases_reads_each_case():
    cases = parse_cases("2\n3\n1 2 3 \n5\n1\n-4 \n-4\n")
    assert cases == [([1, 2, 3], 5), ([-4], -4)]


def test_parse_cases_truncated_raises():
    with pytest.raises(ValueError):
        parse_cases("2\n1\n5\n5\n")


def test_parse_cases_non_integer_raises():
    with pytest.raises(ValueError):
        parse_cases("1\n2\n1 x\n3\n")


def test_parse_cases_negative_count_raises():
    with pytest.raises(ValueError):
        parse_cases("-1\n")


def test_generated_input_respects_limits():
    cases = parse_cases(generate_input(random.Random(7)))
    assert TEST_COUNT_RANGE[0] <= len(cases) <= TEST_COUNT_RANGE[1]
    for values, target in cases:
        assert ARRAY_LENGTH_RANGE[0] <= len(values) <= ARRAY_LENGTH_RANGE[1]
        assert all(ELEMENT_RANGE[0] <= v <= ELEMENT_RANGE[1] for v in values)
        assert TARGET_RANGE[0] <= target <= TARGET_RANGE[1]


def test_generate_input_is_deterministic_for_seed():
    text = generate_input(random.Random(3))
    cases = parse_cases(text)
    assert int(text.split()[0]) == len(cases)
    assert generate_input(random.Random(3)) == text


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "cases.txt"
    path.write_text("2\n3\n1 2 3\n7\n3\n1 2 3\n5\n", encoding="ascii")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Not possible", "[ 2 3 ]"]


def test_generate_main_output_parses(capsys):
    assert generate_main(["--seed", "11"]) == 0
    text = capsys.readouterr().out
    assert text == generate_input(random.Random(11))
    assert len(parse_cases(text)) >= TEST_COUNT_RANGE[0]