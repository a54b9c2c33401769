from envdiff.compare import are_identical, compare, compare_files, get_summary, sort_key
from envdiff.models import DiffStatus
from envdiff.parser import parse

FIRST = "A=1\nB=2\nSHARED=same\nchanged=old\nzeta=1\nAlpha=x\n"
SECOND = "B=2\nC=3\nSHARED=same\nchanged=new\nbeta=2\n"


def _keys(diffs):
    return [d.key for d in diffs]


def test_basic_scenario():
    r = compare(parse("A=1\nB=2\n", "one"), parse("B=2\nC=3\n", "two"))
    assert [(d.key, d.second_value) for d in r.missing_in_first] == [("C", "3")]
    assert [(d.key, d.first_value) for d in r.missing_in_second] == [("A", "1")]
    assert [(d.key, d.first_value, d.second_value) for d in r.identical] == [("B", "2", "2")]
    assert r.different == []
    assert r.first_file == "one"
    assert r.second_file == "two"
    assert (r.total_first, r.total_second) == (2, 2)


def test_fields_present_by_status():
    r = compare(parse("A=1\nB=x\n", "1"), parse("B=y\nC=3\n", "2"))
    (c,) = r.missing_in_first
    assert c.status is DiffStatus.MISSING_IN_FIRST
    assert c.first_value is None and c.first_line is None
    assert c.second_line == 2
    (a,) = r.missing_in_second
    assert a.second_value is None and a.first_line == 1
    (b,) = r.different
    assert (b.first_value, b.second_value, b.first_line, b.second_line) == ("x", "y", 2, 1)


def test_exact_string_equality():
    r = compare(parse("A=abc\nB=1", "1"), parse("A=ABC\nB=1.0", "2"))
    assert _keys(r.different) == ["A", "B"]


def test_empty_value_differs_from_missing():
    r = compare(parse("A=", "1"), parse("", "2"))
    assert _keys(r.missing_in_second) == ["A"]
    assert r.missing_in_second[0].first_value == ""


def test_both_empty():
    r = compare(parse("", "1"), parse("", "2"))
    assert r.all_diffs() == []
    assert are_identical(r)
    assert get_summary(r)["total"] == 0


def test_compare_with_itself():
    pf = parse(FIRST, "x")
    r = compare(pf, pf)
    assert r.missing_in_first == [] and r.missing_in_second == [] and r.different == []
    assert sorted(_keys(r.identical)) == sorted(pf.entries)
    assert are_identical(r)


def test_totality_and_disjointness():
    first, second = parse(FIRST, "1"), parse(SECOND, "2")
    r = compare(first, second)
    groups = [set(_keys(g)) for g in (r.missing_in_first, r.missing_in_second, r.different, r.identical)]
    union = set(first.entries) | set(second.entries)
    assert sum(len(g) for g in groups) == len(union)
    assert set().union(*groups) == union
    for i in range(len(groups)):
        for j in range(i + 1, len(groups)):
            assert not groups[i] & groups[j]


def test_symmetry():
    first, second = parse(FIRST, "1"), parse(SECOND, "2")
    forward, backward = compare(first, second), compare(second, first)
    assert _keys(forward.missing_in_first) == _keys(backward.missing_in_second)
    assert _keys(forward.missing_in_second) == _keys(backward.missing_in_first)
    assert _keys(forward.different) == _keys(backward.different)
    assert _keys(forward.identical) == _keys(backward.identical)
    for f, b in zip(forward.different, backward.different):
        assert (f.first_value, f.second_value) == (b.second_value, b.first_value)


def test_sequences_sorted():
    r = compare(parse(FIRST, "1"), parse(SECOND, "2"))
    for seq in (r.missing_in_first, r.missing_in_second, r.different, r.identical):
        keys = [sort_key(d) for d in seq]
        assert keys == sorted(keys)
    assert _keys(r.missing_in_second) == ["A", "Alpha", "zeta"]


def test_sort_is_case_insensitive_and_total():
    r = compare(parse("b=1\nB=1\na=1\nC=1", "1"), parse("", "2"))
    assert _keys(r.missing_in_second) == ["a", "b", "B", "C"]


def test_sort_follows_collation_order():
    r = compare(parse("DB1_HOST=1\nDB_HOST=1\nPATH=1\npath=1\nA2=1\nA-2=1\nAb=1", "1"), parse("", "2"))
    assert _keys(r.missing_in_second) == ["A-2", "A2", "Ab", "DB_HOST", "DB1_HOST", "path", "PATH"]


def test_summary():
    r = compare(parse(FIRST, "1"), parse(SECOND, "2"))
    assert get_summary(r) == {
        "total": 8,
        "identical": 2,
        "different": 1,
        "missingInFirst": 2,
        "missingInSecond": 3,
    }
    assert r.has_differences
    assert not are_identical(r)


def test_compare_files(env_file):
    a = env_file("a.env", "A=1\n")
    b = env_file("b.env", "A=2\n")
    r = compare_files(a, b)
    assert r.first_file == a
    assert _keys(r.different) == ["A"]


def test_to_dict_field_names():
    d = compare(parse("A=1\nB=2", "1"), parse("B=3", "2")).to_dict()
    assert d["firstFile"] == "1"
    assert d["missingInSecond"] == [{"key": "A", "status": "missing-in-second", "firstValue": "1", "firstLine": 1}]
    assert d["different"] == [{
        "key": "B", "status": "different",
        "firstValue": "2", "secondValue": "3", "firstLine": 2, "secondLine": 1,
    }]
    assert d["totalFirst"] == 2 and d["totalSecond"] == 1


def test_bom_file_matches_plain_file(env_file):
    bom = env_file("bom.env", "\ufeffA=1\nB=2\n")
    plain = env_file("plain.env", "A=1\nB=2\n")
    r = compare_files(bom, plain)
    assert not r.has_differences
    assert _keys(r.identical) == ["A", "B"]
