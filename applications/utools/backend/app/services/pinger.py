"""Single ICMP echo through the host's ``ping`` executable."""

import asyncio
import logging
import math
import re
import socket
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from app.core.config import settings

logger = logging.getLogger(__name__)

_RTT_PATTERN = re.compile(r"time[=<]\s*([\d.]+)\s*ms", re.IGNORECASE)
_UNREACHABLE_PATTERN = re.compile(r"unreachable", re.IGNORECASE)
_TRANSMITTED_PATTERN = re.compile(r"\d+ packets transmitted", re.IGNORECASE)

# Extra wall-clock allowance on top of the probe timeout for process startup.
_DEADLINE_GRACE_SECONDS = 1.0

CommandRunner = Callable[[list[str], float], Awaitable[Optional[tuple[int, str]]]]
Resolver = Callable[[str], Awaitable[str]]


class PingStatus(str, Enum):
    SUCCESS = "Success"
    TIMED_OUT = "TimedOut"
    DESTINATION_UNREACHABLE = "DestinationHostUnreachable"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class PingReply:
    status: PingStatus
    rtt_ms: int = 0
    address: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status is PingStatus.SUCCESS


class PingError(Exception):
    """The probe could not be issued at all."""


def build_command(binary: str, address: str, timeout_ms: int, platform: str = sys.platform) -> list[str]:
    """Build argv for one echo request with the given timeout."""
    if platform.startswith("win"):
        return [binary, "-n", "1", "-w", str(timeout_ms), address]
    if platform == "darwin":
        return [binary, "-c", "1", "-W", str(timeout_ms), address]
    # iputils takes whole seconds.
    seconds = max(1, math.ceil(timeout_ms / 1000))
    return [binary, "-c", "1", "-W", str(seconds), address]


def parse_reply(returncode: int, output: str, platform: str = sys.platform) -> PingReply:
    """Map the exit code and output of ``ping`` to a reply status."""
    if _UNREACHABLE_PATTERN.search(output):
        return PingReply(PingStatus.DESTINATION_UNREACHABLE)
    if returncode == 0:
        match = _RTT_PATTERN.search(output)
        if match is None:
            return PingReply(PingStatus.UNKNOWN)
        return PingReply(PingStatus.SUCCESS, rtt_ms=int(round(float(match.group(1)))))
    if returncode == 1:
        return PingReply(PingStatus.TIMED_OUT)
    # BSD ping exits 2 when the echo went out but no reply came back.
    if platform == "darwin" and returncode == 2 and _TRANSMITTED_PATTERN.search(output):
        return PingReply(PingStatus.TIMED_OUT)
    if not platform.startswith("win"):
        lines = [line for line in output.strip().splitlines() if line.strip()]
        raise PingError(lines[-1] if lines else f"ping exited with status {returncode}")
    return PingReply(PingStatus.UNKNOWN)


async def run_command(argv: list[str], timeout_seconds: float) -> Optional[tuple[int, str]]:
    """Run ``argv`` and return ``(returncode, output)``, or None on deadline."""
    process = await asyncio.create_subprocess_exec(
        *argv,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.STDOUT,
    )
    try:
        stdout, _ = await asyncio.wait_for(process.communicate(), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return None
    return process.returncode, stdout.decode(errors="replace")


async def resolve_host(host: str) -> str:
    """Resolve ``host`` to its first address; raises ``socket.gaierror``."""
    loop = asyncio.get_running_loop()
    infos = await loop.getaddrinfo(host, None, type=socket.SOCK_DGRAM)
    if not infos:
        raise PingError(f"No address found for {host}")
    return infos[0][4][0]


class Pinger:
    """Issues exactly one echo request per call."""

    def __init__(
        self,
        timeout_ms: int = 5000,
        binary: str = "ping",
        runner: CommandRunner | None = None,
        resolver: Resolver | None = None,
        platform: str = sys.platform,
    ) -> None:
        self.timeout_ms = timeout_ms
        self.binary = binary
        self.platform = platform
        self._runner = runner or run_command
        self._resolver = resolver or resolve_host

    async def send(self, host: str) -> PingReply:
        address = await self._resolver(host)
        argv = build_command(self.binary, address, self.timeout_ms, self.platform)
        logger.info("ping_start", extra={"host": host, "address": address})

        outcome = await self._runner(argv, self.timeout_ms / 1000 + _DEADLINE_GRACE_SECONDS)
        if outcome is None:
            reply = PingReply(PingStatus.TIMED_OUT, address=address)
        else:
            returncode, output = outcome
            parsed = parse_reply(returncode, output, self.platform)
            reply = PingReply(parsed.status, rtt_ms=parsed.rtt_ms, address=address)

        logger.info(
            "ping_complete",
            extra={"host": host, "status": reply.status.value, "rtt_ms": reply.rtt_ms},
        )
        return reply


def get_pinger() -> Pinger:
    """FastAPI dependency returning a pinger built from settings."""
    return Pinger(timeout_ms=settings.ping_timeout_ms, binary=settings.ping_binary)
