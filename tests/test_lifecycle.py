import pytest

import get_openjdk.lifecycle as lifecycle


@pytest.fixture(autouse=True)
def fixed_identity(monkeypatch):
    monkeypatch.setattr(lifecycle, "_current_user", lambda: "builder")
    monkeypatch.setattr(lifecycle.socket, "getfqdn", lambda: "ci.example.org")


def test_status_line_success():
    run = lifecycle.RunContext(program="get-openjdk", argv=("/tmp/x", "8"), exit_code=0)
    assert lifecycle.status_line(run) == (
        "INFO : builder @ ci.example.org: Exit with status code [0]: get-openjdk /tmp/x 8"
    )


def test_status_line_failure_quotes_arguments():
    run = lifecycle.RunContext(argv=("my dir",), exit_code=1)
    assert lifecycle.status_line(run) == (
        "ERROR: builder @ ci.example.org: Exit with status code [1]: get-openjdk 'my dir'"
    )


def test_status_line_unknown_exit_code_is_failure():
    run = lifecycle.RunContext()
    assert lifecycle.status_line(run).startswith("ERROR: ")
    assert "[1]" in lifecycle.status_line(run)


def test_run_lifecycle_success_removes_probe_file(tmp_path, capsys):
    probe = tmp_path / "get-openjdk.abc123"
    with lifecycle.run_lifecycle("get-openjdk", ("/tmp/x", "8")) as run:
        probe.write_text("HTTP/1.1 200 OK\r\n\r\n")
        run.probe_path = probe
        run.exit_code = 0

    assert not probe.exists()
    captured = capsys.readouterr()
    assert "INFO : builder @ ci.example.org: Exit with status code [0]" in captured.out
    assert captured.err == ""


def test_run_lifecycle_failure_code_goes_to_stderr(capsys):
    with lifecycle.run_lifecycle("get-openjdk", ()) as run:
        run.exit_code = 1
    captured = capsys.readouterr()
    assert "ERROR: builder @ ci.example.org: Exit with status code [1]: get-openjdk" in captured.err


def test_run_lifecycle_exception_still_cleans_up(tmp_path, capsys):
    probe = tmp_path / "get-openjdk.def456"
    with pytest.raises(RuntimeError):
        with lifecycle.run_lifecycle("get-openjdk", ("a", "b")) as run:
            probe.write_text("partial")
            run.probe_path = probe
            raise RuntimeError("boom")

    assert not probe.exists()
    assert run.exit_code == 1
    assert "Exit with status code [1]" in capsys.readouterr().err


def test_remove_probe_file_is_safe_to_repeat(tmp_path):
    probe = tmp_path / "get-openjdk.ghi789"
    probe.write_text("")
    run = lifecycle.RunContext(probe_path=probe)
    lifecycle.remove_probe_file(run)
    lifecycle.remove_probe_file(run)
    assert not probe.exists()


def test_remove_probe_file_without_probe():
    lifecycle.remove_probe_file(lifecycle.RunContext())
