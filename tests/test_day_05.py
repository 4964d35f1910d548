from aoc2024.day_05 import Rule, Solution, compute_rules

SAMPLE = """\
47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


def test_part_one_sample():
    assert Solution.from_sample(SAMPLE).part_one() == 143


def test_part_two_sample():
    assert Solution.from_sample(SAMPLE).part_two() == 123


def test_compute_rules_is_transitive_and_restricted():
    rules = {
        1: Rule(must_be_before={2}),
        2: Rule(must_be_before={3}, must_be_after={1}),
        3: Rule(must_be_after={2}),
    }
    result = compute_rules(rules, [3, 2, 1])
    assert result[3].must_be_after == {1, 2}
    assert result[2].must_be_after == {1}
    assert result[1].must_be_after == set()


def test_compute_rules_ignores_pages_outside_update():
    rules = {
        1: Rule(must_be_before={2}),
        2: Rule(must_be_before={3}, must_be_after={1}),
        3: Rule(must_be_after={2}),
    }
    result = compute_rules(rules, [3, 1])
    assert set(result) == {3, 1}
    assert result[3].must_be_after == set()


def test_compute_rules_without_rules():
    result = compute_rules({}, [5, 6])
    assert result == {5: Rule(), 6: Rule()}