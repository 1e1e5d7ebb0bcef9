"""Tests for argument parsing and the receive loop."""

import pytest
import zmq

from zmq_json_validator.cli import main, parse_args, run
from zmq_json_validator.config import DEFAULT_ENDPOINT, ENDPOINT_ENV_VAR
from zmq_json_validator.logging import LogLevel
from zmq_json_validator.processor import MessageProcessor
from zmq_json_validator.transport import ZmqSubscriber


class TestParseArgs:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENDPOINT_ENV_VAR, raising=False)
        cfg = parse_args([])
        assert cfg.endpoint == DEFAULT_ENDPOINT
        assert cfg.strict_decoding is True
        assert cfg.strict_numeric_types is False
        assert cfg.log_level == LogLevel.INFO

    def test_env_overrides_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENDPOINT_ENV_VAR, "tcp://10.0.0.2:18084")
        assert parse_args([]).endpoint == "tcp://10.0.0.2:18084"

    def test_flag_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENDPOINT_ENV_VAR, "tcp://10.0.0.2:18084")
        cfg = parse_args(["--endpoint", "tcp://10.0.0.3:5555"])
        assert cfg.endpoint == "tcp://10.0.0.3:5555"

    def test_flags(self) -> None:
        cfg = parse_args(
            [
                "--subscribe",
                "json-full",
                "--rcv-hwm",
                "10",
                "--lax",
                "--strict-numbers",
                "--log-level",
                "DEBUG",
                "--log-file",
                "logs/run.txt",
            ]
        )
        assert cfg.subscribe_filter == "json-full"
        assert cfg.rcv_hwm == 10
        assert cfg.strict_decoding is False
        assert cfg.strict_numeric_types is True
        assert cfg.log_level == LogLevel.DEBUG
        assert cfg.log_file == "logs/run.txt"

    def test_invalid_endpoint_exits(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--endpoint", "not-an-endpoint"])

    def test_log_file_must_be_txt(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--log-file", "run.log"])
        assert exc_info.value.code == 2
        assert "'.txt'" in capsys.readouterr().err

    def test_main_rejects_log_file_before_connecting(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            main(["--log-file", "run.log"])
        assert "Connecting to" not in capsys.readouterr().out


class TestMain:
    def test_unavailable_transport_fails_fast(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--endpoint", "invalid://protocol"]) == 1
        out = capsys.readouterr().out
        assert "Connecting to invalid://protocol" in out
        assert "invalid://protocol" in out.splitlines()[-1]

    def test_unopenable_log_file_fails_fast(
        self, tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        log_dir = tmp_path / "taken.txt"
        log_dir.mkdir()
        assert main(["--log-file", str(log_dir)]) == 1

        captured = capsys.readouterr()
        assert "Cannot open log file" in captured.err
        assert "Connecting to" not in captured.out

    def test_log_file_receives_transport_error(self, tmp_path) -> None:
        path = tmp_path / "logs" / "run.txt"
        assert main(["--endpoint", "invalid://protocol", "--log-file", str(path)]) == 1
        assert "[ERROR]" in path.read_text()
        assert "invalid://protocol" in path.read_text()


class TestRun:
    def test_receives_and_processes(
        self, free_tcp_endpoint: str, wait_for, sample_bodies: dict[str, str]
    ) -> None:
        """End to end: a published message is split, displayed and validated."""
        context = zmq.Context()
        publisher = context.socket(zmq.PUB)
        publisher.bind(free_tcp_endpoint)

        lines: list[str] = []
        processor = MessageProcessor(output=lines.append)
        subscriber = ZmqSubscriber(path=free_tcp_endpoint, rcv_timeout_ms=2000)
        subscriber.start()
        message = f"json-full-miner_data:{sample_bodies['json-full-miner_data']}"
        try:
            # Slow joiner: keep publishing until the subscription is live.
            def _published() -> bool:
                publisher.send_string(message)
                return subscriber._socket.poll(50) != 0

            assert wait_for(_published, timeout_s=5.0)
            run(subscriber, processor, max_messages=1)
        finally:
            subscriber.stop()
            publisher.close(linger=0)
            context.term()

        assert lines[0] == "Received zmq message type: json-full-miner_data"
        assert processor.stats.validated == 1
        assert processor.stats.failed == 0
