from logicfuzz.builder import LogicBuilder
from logicfuzz.demo import main


def test_demo_passes(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "All tests passed!" in out
    assert "Simplified formula: AND[x1, x2]" in out


def test_demo_reports_shared_result(capsys):
    LogicBuilder().clear_cache()
    assert main() == 0
    out = capsys.readouterr().out
    assert "Are pointers identical? Yes" in out
    assert "Simplified empty OR formula: False" in out