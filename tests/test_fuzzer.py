import pytest

from logicfuzz.builder import LogicBuilder
from logicfuzz.fuzzer import FuzzError, Fuzzer, main, seed_from_account
from logicfuzz.nodes import Constant, Gate, GateType, Variable


@pytest.fixture(autouse=True)
def _fresh_cache():
    LogicBuilder().clear_cache()
    yield
    LogicBuilder().clear_cache()


def test_seed_from_empty_account_is_zero():
    assert seed_from_account("") == 0


def test_seed_from_account_single_character_is_its_code():
    assert seed_from_account("A") == ord("A")


def test_seed_from_account_shifts_by_hex_digit():
    assert seed_from_account("ab") == seed_from_account("a") * 16 + seed_from_account("b")


def test_seed_from_long_account_fits_64_bits():
    assert 0 <= seed_from_account("z" * 100) < 2**64


def test_generate_model_has_one_entry_more_than_literals():
    fuzzer = Fuzzer(5, size=12)
    model = fuzzer.generate_model()
    assert len(model) == 13
    assert all(isinstance(v, bool) for v in model)


def test_generate_model_is_deterministic():
    first_fuzzer = Fuzzer(9, size=20)
    second_fuzzer = Fuzzer(9, size=20)
    first_models = [first_fuzzer.generate_model() for _ in range(5)]
    second_models = [second_fuzzer.generate_model() for _ in range(5)]
    assert len(first_models[0]) == 21
    assert first_models == second_models


def test_prepopulate_adds_ten_leaves_in_range():
    fuzzer = Fuzzer(3, size=8)
    fuzzer.prepopulate()
    assert len(fuzzer.cache) == 10
    for node in fuzzer.cache:
        assert isinstance(node, (Constant, Variable))
        if isinstance(node, Variable):
            assert 1 <= abs(node.literal) <= 8


def test_pick_children_takes_cached_nodes():
    fuzzer = Fuzzer(11, size=8)
    fuzzer.prepopulate()
    for _ in range(20):
        children = fuzzer.pick_children()
        assert 0 <= len(children) <= 6
        assert all(any(c is n for n in fuzzer.cache) for c in children)


def test_produce_new_node_grows_cache():
    fuzzer = Fuzzer(13, size=8)
    fuzzer.prepopulate()
    for expected in range(11, 21):
        fuzzer.produce_new_node()
        assert len(fuzzer.cache) == expected


def test_same_models_on_equal_formulas_finds_nothing():
    fuzzer = Fuzzer(17, size=4, fail_on_first_error=False)
    formula = Gate(GateType.AND, [Variable(1), Variable(-2)])
    fuzzer.check_same_models(formula, formula)
    assert fuzzer.found_errors == 0


def test_same_models_detects_difference(capsys):
    fuzzer = Fuzzer(19, size=4, fail_on_first_error=False)
    for _ in range(3):
        fuzzer.check_same_models(Constant(True), Constant(False))
    assert fuzzer.found_errors >= 1
    assert "the models are not the same" in capsys.readouterr().err


def test_same_models_raises_on_first_error():
    fuzzer = Fuzzer(23, size=4)
    with pytest.raises(FuzzError):
        for _ in range(3):
            fuzzer.check_same_models(Constant(True), Constant(False))


def test_check_normalize_rewrites_in_place():
    fuzzer = Fuzzer(29, size=4)
    gate = Gate(GateType.AND, [Variable(1), Constant(True), Variable(1)])
    fuzzer.cache = [gate]
    fuzzer.check_normalize()
    assert fuzzer.cache[-1] is gate
    assert gate.children == [Variable(1)]


def test_check_simplify_appends_clean_formula():
    fuzzer = Fuzzer(31, size=4)
    gate = Gate(GateType.OR, [Variable(2), Constant(False), Variable(2), Variable(3)])
    fuzzer.cache = [gate]
    fuzzer.check_simplify()
    result = fuzzer.cache[-1]
    assert len(fuzzer.cache) == 2
    assert fuzzer.found_errors == 0
    assert isinstance(result, Gate)
    assert not any(isinstance(c, Constant) for c in result.children)
    assert len(set(result.children)) == len(result.children)


def test_run_is_deterministic():
    first = Fuzzer(42, size=20, length=30)
    first.run()
    strings = [str(n) for n in first.cache]
    LogicBuilder().clear_cache()
    second = Fuzzer(42, size=20, length=30)
    second.run()
    assert [str(n) for n in second.cache] == strings


def test_run_reports_no_errors(capsys):
    fuzzer = Fuzzer(7, size=20, length=30, fail_on_first_error=False)
    assert fuzzer.run() == 0
    assert "errors: 0 from 30" in capsys.readouterr().out


def test_main_with_numeric_seed_and_one_test(capsys):
    assert main(["7", "1"]) == 0
    out = capsys.readouterr().out
    assert "using as seed 7" in out
    assert "testing 1 values" in out


def test_main_with_account_seed(capsys):
    assert main(["abc", "3"]) == 0
    out = capsys.readouterr().out
    assert f"using as seed {seed_from_account('abc')}" in out
    assert "testing 3 values" in out


def test_main_rejects_non_numeric_seed():
    with pytest.raises(ValueError):
        main(["notanumber"])