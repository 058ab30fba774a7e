import io
from argparse import Namespace
from typing import List, Tuple

from symkind.main import describe, describe_kind, run, sample
from symkind.kind import KBounded, KList, KString
from symkind.options import DEFAULT_OPTIONS


def call_sample(
    kind: str, count: int = 1, seed: int = 0
) -> Tuple[int, List[str], List[str]]:
    stdbuf: io.StringIO = io.StringIO()
    errbuf: io.StringIO = io.StringIO()
    args = Namespace(kind=kind, count=count, seed=seed)
    retcode = sample(args, DEFAULT_OPTIONS, stdbuf, errbuf)
    stdlines = [ls for ls in stdbuf.getvalue().split("\n") if ls]
    errlines = [ls for ls in errbuf.getvalue().split("\n") if ls]
    return retcode, stdlines, errlines


def test_describe_kind():
    assert describe_kind(KBounded(True, 8)) == "SInt8\t(_ BitVec 8)\tsigned\t8"
    assert describe_kind(KList(KString())) == "[SString]\t(Seq String)\tunsigned\t-"


def test_describe_via_main(capsys):
    assert run(["describe", "SWord16", "SReal"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "SWord16\t(_ BitVec 16)\tunsigned\t16",
        "SReal\tReal\tsigned\t-",
    ]


def test_describe_unknown_kind():
    stdbuf, errbuf = io.StringIO(), io.StringIO()
    retcode = describe(Namespace(kind=["SInt8", "SNope"]), stdbuf, errbuf)
    assert retcode == 2
    assert stdbuf.getvalue() == ""
    assert 'Unknown kind: "SNope"' in errbuf.getvalue()


def test_sample_is_reproducible():
    retcode, first, errlines = call_sample("SInt8", count=5, seed=11)
    assert retcode == 0
    assert errlines == []
    assert len(first) == 5
    assert all(-128 <= int(line) <= 127 for line in first)
    assert call_sample("SInt8", count=5, seed=11)[1] == first


def test_sample_unknown_kind():
    retcode, stdlines, errlines = call_sample("Widget")
    assert retcode == 2
    assert stdlines == []
    assert errlines == ['Unknown kind: "Widget"']


def test_random_via_main_respects_options(capsys):
    cmd = ["random", "[SWord8]", "--count", "4", "--seed", "3"]
    assert run(cmd + ["--max_sequence_length", "2"]) == 0
    for line in capsys.readouterr().out.splitlines():
        assert line.startswith("[") and line.endswith("]")
        assert len([e for e in line[1:-1].split(",") if e]) <= 2


def test_no_args_prints_usage(capsys):
    assert run([]) == 2
    assert "usage: symkind" in capsys.readouterr().err
