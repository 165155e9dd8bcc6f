import picoarg
from picoarg import const, demo


def test_demo_version_and_files(capsys):
    assert demo.run(["picoarg", "-v", "-fa.txt", "-fb.txt"]) == 0
    assert capsys.readouterr().out == (
        f"version {const.VERSION_STR}\n"
        "processing 'a.txt'\n"
        "processing 'b.txt'\n"
    )


def test_demo_nothing(capsys):
    assert demo.run(["picoarg"]) == 0
    assert capsys.readouterr().out == ""


def test_demo_help_stops(capsys):
    assert demo.run(["picoarg", "-v", "-h", "-fa.txt"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Usage: {const.ARGV0} [OPTION]\n")
    assert "process <file>" in out
    assert f"version {const.VERSION_STR}" not in out
    assert "processing" not in out


def test_demo_parse_failure(capsys):
    assert demo.run(["picoarg", "-f"]) == -1
    assert capsys.readouterr().out == "Option 'f' expects a value\n"


def test_demo_debug_sets_up_logging(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(demo.logger, "setup", lambda verbose: calls.append(verbose))
    assert demo.run(["picoarg", "-d", "-fa.txt"]) == 0
    assert calls == [True]
    assert capsys.readouterr().out == "processing 'a.txt'\n"


def test_demo_always_sets_up_logging(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(demo.logger, "setup", lambda verbose: calls.append(verbose))
    assert demo.run(["picoarg", "-fa.txt"]) == 0
    assert calls == [False]
    assert capsys.readouterr().out == "processing 'a.txt'\n"


def test_demo_parse_failure_skips_logging(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(demo.logger, "setup", lambda verbose: calls.append(verbose))
    assert demo.run(["picoarg", "-x"]) == -1
    assert calls == []


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["picoarg", "-v"])
    assert picoarg.main() == 0
    assert capsys.readouterr().out == f"version {const.VERSION_STR}\n"


def test_main_keyboard_interrupt(monkeypatch, capsys):
    def interrupted(argv=None):
        raise KeyboardInterrupt()

    monkeypatch.setattr(demo, "run", interrupted)
    assert picoarg.main() == 1
    assert capsys.readouterr().out == "\n"
