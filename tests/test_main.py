import pytest

from consolehelpers import main as demo
from consolehelpers.core.exceptions import TooManyInvalidAttemptsError


def test_run_demo_defaults(helper, channel):
    channel.answers = ["", "", "pw", "", "", "c", ""]
    assert demo.run_demo(helper) == {
        'name': "demo",
        'port': 8080,
        'password': "pw",
        'database': "sqlite",
        'features': ["cache", "auth"],
        'servers': ["localhost"],
        'confirmed': True,
    }


def test_run_demo_answers(helper, channel):
    channel.answers = ["shop", "9000", "pw", "postgresql", "mail", "a", "db1", "c", "n"]
    answers = demo.run_demo(helper, "Hosts")
    assert answers['port'] == 9000
    assert answers['database'] == "postgresql"
    assert answers['features'] == ["mail"]
    assert answers['servers'] == ["localhost", "db1"]
    assert answers['confirmed'] is False
    assert "Hosts" in channel.lines


def test_main_reports_too_many_invalid_answers(monkeypatch, tmp_path, capsys):
    class FailingHelper:
        def __init__(self):
            raise TooManyInvalidAttemptsError("Too many invalid answers", 10, "A response is required")

    monkeypatch.setattr(demo, "InteractiveCliHelper", FailingHelper)
    monkeypatch.setattr(demo, "setup_logging", lambda verbose: tmp_path / "demo.log")
    monkeypatch.setattr("sys.argv", ["consolehelpers-demo"])

    with pytest.raises(SystemExit) as info:
        demo.main()
    assert info.value.code == 1
    assert "A response is required" in capsys.readouterr().out
