"""Local process execution with live output streaming.

Every ssh and rsync invocation goes through run_process(). It spawns the
argv directly (no local shell), feeds optional input, hands each decoded
chunk of stdout/stderr to a callback as it arrives, and enforces a
timeout over the whole run.
"""

import asyncio
import codecs
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from deploy_ssh.services.errors import ProcessFailedError, TransportTimeoutError
from deploy_ssh.utils.output import StreamKind

logger = logging.getLogger(__name__)

StreamCallback = Callable[[StreamKind, str], None]

CHUNK_SIZE = 65536


@dataclass(frozen=True)
class ProcessResult:
    """Result of a local process run."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


async def _pump(
    reader: asyncio.StreamReader,
    stream: StreamKind,
    chunks: list[str],
    callback: StreamCallback | None,
) -> None:
    """Read a pipe to EOF, collecting and forwarding decoded chunks."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        data = await reader.read(CHUNK_SIZE)
        text = decoder.decode(data, final=not data)
        if text:
            chunks.append(text)
            if callback is not None:
                callback(stream, text)
        if not data:
            break


async def _feed(writer: asyncio.StreamWriter, data: bytes) -> None:
    """Write input to the child and close its stdin."""
    try:
        writer.write(data)
        await writer.drain()
    except (BrokenPipeError, ConnectionResetError):
        # Child exited without reading all of its input
        logger.debug("stdin closed early by child process")
    finally:
        writer.close()


async def _kill(proc: asyncio.subprocess.Process) -> None:
    if proc.returncode is None:
        try:
            proc.kill()
        except ProcessLookupError:
            pass
    await proc.wait()


async def _run_attached(args: tuple[str, ...], timeout: float | None) -> ProcessResult:
    """Run with the caller's terminal attached; nothing is captured."""
    proc = await asyncio.create_subprocess_exec(*args)
    try:
        returncode = await asyncio.wait_for(proc.wait(), timeout=timeout)
    except TimeoutError:
        await _kill(proc)
        raise TransportTimeoutError(args, timeout or 0) from None
    return ProcessResult(args=args, returncode=returncode, stdout="", stderr="")


async def run_process(
    args: Sequence[str],
    *,
    input: str | None = None,
    timeout: float | None = None,
    callback: StreamCallback | None = None,
    check: bool = False,
    tty: bool = False,
) -> ProcessResult:
    """Run a local process to completion.

    Args:
        args: Program and arguments
        input: Text written to stdin, which is then closed
        timeout: Seconds before the process is killed, None for no limit
        callback: Called with (stream, chunk) for each piece of output
        check: Raise ProcessFailedError on non-zero exit
        tty: Inherit the caller's stdin/stdout/stderr instead of capturing

    Returns:
        ProcessResult with exit code and captured output.

    Raises:
        TransportTimeoutError: If the timeout expires.
        ProcessFailedError: If check is set and the exit code is non-zero.
        FileNotFoundError: If the program does not exist.
    """
    argv = tuple(args)
    logger.debug("Running %s (timeout=%s, tty=%s)", argv, timeout, tty)

    if tty:
        result = await _run_attached(argv, timeout)
    else:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE if input is not None else asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        assert proc.stdout is not None and proc.stderr is not None

        stdout_chunks: list[str] = []
        stderr_chunks: list[str] = []
        tasks = [
            _pump(proc.stdout, StreamKind.OUT, stdout_chunks, callback),
            _pump(proc.stderr, StreamKind.ERR, stderr_chunks, callback),
        ]
        if input is not None:
            assert proc.stdin is not None
            tasks.append(_feed(proc.stdin, input.encode("utf-8")))

        async def communicate() -> int:
            await asyncio.gather(*tasks)
            return await proc.wait()

        try:
            returncode = await asyncio.wait_for(communicate(), timeout=timeout)
        except TimeoutError:
            await _kill(proc)
            logger.warning("Process %s killed after %ss", argv[0], timeout)
            raise TransportTimeoutError(
                argv,
                timeout or 0,
                "".join(stdout_chunks),
                "".join(stderr_chunks),
            ) from None
        except BaseException:
            await _kill(proc)
            raise

        result = ProcessResult(
            args=argv,
            returncode=returncode,
            stdout="".join(stdout_chunks),
            stderr="".join(stderr_chunks),
        )

    logger.debug("Process %s exited with %d", argv[0], result.returncode)

    if check and not result.ok:
        raise ProcessFailedError(argv, result.returncode, result.stdout, result.stderr)
    return result
