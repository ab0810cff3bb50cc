from meowcore.log import log


def test_plain_message(capsys):
    log("Engine", "Initializing Engine...")
    assert capsys.readouterr().out == "Engine: Initializing Engine...\n"


def test_numeric_message(capsys):
    log("Count", 5)
    assert capsys.readouterr().out == "Count: 5\n"


def test_message_with_error(capsys):
    log("App", "failed.", ValueError("boom"))
    out = capsys.readouterr().out
    assert out == "App: failed. Exception message was: boom\n"


def test_each_call_is_one_line(capsys):
    log("A", "one")
    log("B", "two")
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["A: one", "B: two"]