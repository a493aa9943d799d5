from view_logs import analyze_logs, colorize_line, tail_file, Colors


ACCESS_LINES = [
    "2026-01-01 10:00:00 | ACCESS | method=GET | path=/ | status=200 | response_time=0.002s\n",
    "2026-01-01 10:00:01 | ACCESS | method=GET | path=/ | status=200 | response_time=0.004s\n",
    "2026-01-01 10:00:02 | ACCESS | method=GET | path=/api/v1/health | status=200 | response_time=0.003s\n",
    "2026-01-01 10:00:03 | ACCESS | method=GET | path=/missing | status=404 | response_time=0.001s\n",
    "2026-01-01 10:00:04 | ACCESS | method=GET | path=/boom | status=500 | response_time=0.010s | error=kaboom\n",
]

MAIN_LINES = [
    "2026-01-01 10:00:00 | app.config | INFO | Server started at 2026-01-01T10:00:00\n",
    "2026-01-01 10:00:04 | app.main | ERROR | GET /boom failed: kaboom (0.010s)\n",
    "2026-01-01 10:00:05 | uvicorn | WARNING | slow shutdown\n",
]


def write_logs(log_dir):
    (log_dir / "backend_access.log").write_text("".join(ACCESS_LINES), encoding="utf-8")
    (log_dir / "backend.log").write_text("".join(MAIN_LINES), encoding="utf-8")


def test_analyze_logs_counts_requests(tmp_path):
    write_logs(tmp_path)
    stats = analyze_logs(tmp_path)

    assert stats['total_requests'] == 5
    assert stats['greetings'] == 2
    assert stats['health_checks'] == 1
    assert stats['client_errors'] == 1
    assert stats['server_errors'] == 1
    assert stats['errors'] == 1
    assert stats['warnings'] == 1
    assert stats['response_times'] == [0.002, 0.004, 0.003, 0.001, 0.010]


def test_analyze_logs_empty_dir(tmp_path):
    stats = analyze_logs(tmp_path)
    assert stats['total_requests'] == 0
    assert stats['response_times'] == []


def test_tail_file_returns_last_lines(tmp_path):
    write_logs(tmp_path)
    lines = tail_file(tmp_path / "backend_access.log", lines=2)
    assert lines == ACCESS_LINES[-2:]


def test_tail_file_missing(tmp_path):
    lines = tail_file(tmp_path / "nope.log")
    assert lines[0].startswith("Log file not found")


def test_colorize_line():
    assert colorize_line(MAIN_LINES[1]).startswith(Colors.RED)
    assert colorize_line(MAIN_LINES[2]).startswith(Colors.YELLOW)
    assert colorize_line(MAIN_LINES[0]).startswith(Colors.GREEN)
    assert colorize_line("plain\n") == "plain"
