import configure_logging


def run(monkeypatch, capsys, path, level="info"):
    monkeypatch.setenv("FILELOG_PATH", str(path))
    monkeypatch.setenv("FILELOG_LEVEL", level)
    code = configure_logging.main()
    return code, capsys.readouterr().out


def test_writable_target(tmp_path, monkeypatch, capsys):
    target = tmp_path / "app.log"
    code, out = run(monkeypatch, capsys, target)

    assert code == 0
    assert "[OK] Threshold: INFO" in out
    assert "[OK] Log file is writable." in out
    assert not target.exists()


def test_missing_directory(tmp_path, monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, tmp_path / "nope" / "app.log")

    assert code == 1
    assert "does not exist" in out


def test_unknown_level(tmp_path, monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, tmp_path / "app.log", level="loud")

    assert code == 1
    assert "[FAIL] Unknown log level: 'loud'" in out
    assert "trace, debug, info, warn, error" in out
