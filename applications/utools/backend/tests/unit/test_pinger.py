import asyncio
import socket
import sys
import time

import pytest

from app.services.pinger import (
    PingError,
    Pinger,
    PingStatus,
    build_command,
    parse_reply,
    resolve_host,
    run_command,
)

LINUX_SUCCESS = """PING example.com (192.0.2.10) 56(84) bytes of data.
64 bytes from 192.0.2.10: icmp_seq=1 ttl=56 time=11.6 ms

--- example.com ping statistics ---
1 packets transmitted, 1 received, 0% packet loss, time 0ms
"""

WINDOWS_SUCCESS = """Pinging 192.0.2.10 with 32 bytes of data:
Reply from 192.0.2.10: bytes=32 time<1ms TTL=128
"""


def test_build_command_linux_uses_seconds() -> None:
    assert build_command("ping", "192.0.2.10", 5000, "linux") == [
        "ping", "-c", "1", "-W", "5", "192.0.2.10",
    ]
    assert build_command("ping", "192.0.2.10", 200, "linux")[4] == "1"


def test_build_command_windows_and_macos_use_milliseconds() -> None:
    assert build_command("ping", "h", 5000, "win32") == ["ping", "-n", "1", "-w", "5000", "h"]
    assert build_command("ping", "h", 5000, "darwin") == ["ping", "-c", "1", "-W", "5000", "h"]


def test_parse_success_reads_rtt() -> None:
    reply = parse_reply(0, LINUX_SUCCESS, "linux")
    assert reply.status is PingStatus.SUCCESS
    assert reply.rtt_ms == 12


def test_parse_windows_sub_millisecond() -> None:
    reply = parse_reply(0, WINDOWS_SUCCESS, "win32")
    assert reply.success
    assert reply.rtt_ms == 1


def test_parse_no_reply_is_timeout() -> None:
    assert parse_reply(1, "1 packets transmitted, 0 received", "linux").status is PingStatus.TIMED_OUT


def test_parse_unreachable() -> None:
    output = "From 192.0.2.1 icmp_seq=1 Destination Host Unreachable"
    reply = parse_reply(1, output, "linux")
    assert reply.status is PingStatus.DESTINATION_UNREACHABLE
    assert reply.rtt_ms == 0


def test_parse_posix_error_raises() -> None:
    with pytest.raises(PingError, match="Operation not permitted"):
        parse_reply(2, "ping: socket: Operation not permitted\n", "linux")


def _pinger(outcome, resolver=None) -> tuple[Pinger, list]:
    calls: list = []

    async def runner(argv, timeout_seconds):
        calls.append((argv, timeout_seconds))
        return outcome

    async def fixed_resolver(host):
        return "192.0.2.10"

    pinger = Pinger(
        timeout_ms=5000,
        runner=runner,
        resolver=resolver or fixed_resolver,
        platform="linux",
    )
    return pinger, calls


def test_send_issues_single_probe_to_resolved_address() -> None:
    pinger, calls = _pinger((0, LINUX_SUCCESS))
    reply = asyncio.run(pinger.send("example.com"))
    assert reply.success
    assert reply.rtt_ms == 12
    assert reply.address == "192.0.2.10"
    assert len(calls) == 1
    argv, timeout_seconds = calls[0]
    assert argv[-1] == "192.0.2.10"
    assert timeout_seconds > 5


def test_send_deadline_is_timeout() -> None:
    pinger, _ = _pinger(None)
    reply = asyncio.run(pinger.send("example.com"))
    assert reply.status is PingStatus.TIMED_OUT
    assert not reply.success


def test_send_propagates_resolution_error() -> None:
    async def failing_resolver(host):
        raise socket.gaierror(-2, "Name or service not known")

    pinger, calls = _pinger((0, LINUX_SUCCESS), resolver=failing_resolver)
    with pytest.raises(socket.gaierror):
        asyncio.run(pinger.send("no-such-host.invalid"))
    assert calls == []


def test_parse_macos_no_reply_is_timeout() -> None:
    output = """PING 10.255.255.1 (10.255.255.1): 56 data bytes

--- 10.255.255.1 ping statistics ---
1 packets transmitted, 0 packets received, 100.0% packet loss
"""
    reply = parse_reply(2, output, "darwin")
    assert reply.status is PingStatus.TIMED_OUT
    assert not reply.success


def test_parse_macos_other_error_raises() -> None:
    with pytest.raises(PingError, match="cannot resolve"):
        parse_reply(68, "ping: cannot resolve no-such-host: Unknown host\n", "darwin")


def test_run_command_returns_exit_code_and_output() -> None:
    argv = [sys.executable, "-c", "import sys; print('time=3.2 ms'); sys.exit(1)"]
    outcome = asyncio.run(run_command(argv, 10))
    assert outcome is not None
    returncode, output = outcome
    assert returncode == 1
    assert "time=3.2 ms" in output


def test_run_command_deadline_kills_process() -> None:
    argv = [sys.executable, "-c", "import time; time.sleep(5)"]
    started = time.monotonic()
    assert asyncio.run(run_command(argv, 0.3)) is None
    assert time.monotonic() - started < 4


def test_run_command_missing_binary_raises() -> None:
    with pytest.raises(FileNotFoundError):
        asyncio.run(run_command(["/nonexistent/ping", "-c", "1", "127.0.0.1"], 1))


def test_resolve_numeric_address() -> None:
    assert asyncio.run(resolve_host("127.0.0.1")) == "127.0.0.1"
