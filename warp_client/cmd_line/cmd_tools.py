from __future__ import annotations
from typing import Iterator, Optional
import logging
import subprocess
import threading
import time

from warp_client.core.monitor import Monitor
from warp_client.core.types import ExecutionResult
from warp_client.core.exceptions import WarpProcessError

logger = logging.getLogger(__name__)

@Monitor
class CmdLineMonitor:
    """
    Collects the output of a running command.

    Output is kept per stream and in combined arrival order. Each stream has
    its own read pointer so callers can consume output incrementally.
    """
    def __init__(self):
        self._stdout : list[str] = []
        self._stderr : list[str] = []
        self._all : list[str] = []
        self._stdout_ptr : int = 0
        self._stderr_ptr : int = 0
        self._all_ptr : int = 0
        self._process_finished : bool = False
        self._process_code : Optional[int] = None

    def update_stdout(self, stdout: str):
        """
        Appends a chunk of stdout.

        Args:
            stdout (str): The chunk to append.
        """
        self._stdout.append(stdout)
        self._all.append(stdout)

    def update_stderr(self, stderr: str):
        """
        Appends a chunk of stderr.

        Args:
            stderr (str): The chunk to append.
        """
        self._stderr.append(stderr)
        self._all.append(stderr)

    def is_new_stdout(self) -> bool:
        return self._stdout_ptr != len(self._stdout)

    def is_new_stderr(self) -> bool:
        return self._stderr_ptr != len(self._stderr)

    def is_new_output(self) -> bool:
        return self._all_ptr != len(self._all)

    def get_stdout(self) -> str:
        """
        Returns stdout received since the previous call.

        Returns:
            str: The unread stdout.
        """
        result = "".join(self._stdout[self._stdout_ptr:])
        self._stdout_ptr = len(self._stdout)
        return result

    def get_stderr(self) -> str:
        """
        Returns stderr received since the previous call.

        Returns:
            str: The unread stderr.
        """
        result = "".join(self._stderr[self._stderr_ptr:])
        self._stderr_ptr = len(self._stderr)
        return result

    def get_all(self) -> str:
        """
        Returns combined stdout and stderr received since the previous call,
        in the order it arrived.

        Returns:
            str: The unread combined output.
        """
        result = "".join(self._all[self._all_ptr:])
        self._all_ptr = len(self._all)
        return result

    def full_stdout(self) -> str:
        return "".join(self._stdout)

    def full_stderr(self) -> str:
        return "".join(self._stderr)

    def is_finished(self) -> bool:
        return self._process_finished

    def set_finished(self, code: Optional[int]):
        """
        Marks the process as finished.

        Args:
            code (int): The exit code of the process.
        """
        self._process_finished = True
        self._process_code = code

    def get_process_code(self) -> Optional[int]:
        """
        Gets the exit code of the process.

        Returns:
            int: The exit code, or None while the process is running.
        """
        return self._process_code


class ProcessHandle:
    """
    Live handle to a command started by `CmdLineRunner.monitor_cmd`.
    """
    def __init__(self, process: subprocess.Popen, monitor: CmdLineMonitor, readers: list[threading.Thread], waiter: threading.Thread):
        self._process = process
        self._monitor = monitor
        self._readers = readers
        self._waiter = waiter

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def exit_code(self) -> Optional[int]:
        return self._monitor.get_process_code()

    def is_running(self) -> bool:
        return not self._monitor.is_finished()

    def is_new_stdout(self) -> bool:
        return self._monitor.is_new_stdout()

    def is_new_stderr(self) -> bool:
        return self._monitor.is_new_stderr()

    def read_stdout(self) -> str:
        return self._monitor.get_stdout()

    def read_stderr(self) -> str:
        return self._monitor.get_stderr()

    def read_all(self) -> str:
        return self._monitor.get_all()

    def write_stdin(self, stdin: str):
        """
        Writes to the stdin of the process.

        Args:
            stdin (str): The text to write.
        """
        self._process.stdin.write(stdin)
        self._process.stdin.flush()

    def terminate(self):
        if self._process.poll() is None:
            logger.info("Terminating process", extra={"pid": self._process.pid})
            self._process.terminate()

    def stream(self, poll_interval: float = 0.1) -> Iterator[str]:
        """
        Yields combined output chunks as they arrive until the process ends.

        Args:
            poll_interval (float, optional): Seconds between polls. Defaults to 0.1.
        """
        while True:
            finished = self._monitor.is_finished()
            chunk = self._monitor.get_all()
            if chunk:
                yield chunk
            elif finished:
                break
            else:
                time.sleep(poll_interval)

    def wait(self, timeout: Optional[float] = None) -> ExecutionResult:
        """
        Waits for the process and its output readers to finish.

        Args:
            timeout (float, optional): Seconds to wait. Defaults to None (indefinite).

        Returns:
            ExecutionResult: Everything the process wrote, and its exit code.

        Raises:
            subprocess.TimeoutExpired: If the process or its output readers are still running after `timeout`.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        self._process.wait(timeout=timeout)
        for thread in self._readers + [self._waiter]:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            thread.join(remaining)
            if thread.is_alive():
                # a descendant may still hold the pipe open
                raise subprocess.TimeoutExpired(self._process.args, timeout)
        return ExecutionResult(
            stdout=self._monitor.full_stdout(),
            stderr=self._monitor.full_stderr(),
            exit_code=self._monitor.get_process_code(),
        )


class CmdLineRunner:
    def execute_cmd(self, cmd: str, args: Optional[list[str]] = None, cwd: Optional[str] = None, log_args: Optional[list[str]] = None) -> ExecutionResult:
        """
        Runs a command and waits for it to finish. A non-zero exit code is not an error.

        Args:
            cmd (str): The command to run.
            args (list[str], optional): The arguments to pass to the command. Defaults to None.
            cwd (str, optional): Working directory of the process. Defaults to None.
            log_args (list[str], optional): Arguments as they should appear in logs. Defaults to `args`.

        Returns:
            ExecutionResult: The output of the command. `exit_code` is None when the
            command could not be started.
        """
        args = args or []
        logger.debug("Executing command", extra={"cmd": cmd, "argv": log_args if log_args is not None else args, "cwd": cwd})
        try:
            output = subprocess.run([cmd] + args, capture_output=True, encoding="utf-8", errors="replace", cwd=cwd, check=False)
        except OSError as e:
            logger.error(f"Failed to execute '{cmd}': {e}", extra={"cmd": cmd, "cwd": cwd})
            return ExecutionResult(stdout="", stderr=str(e), exit_code=None)
        logger.debug("Command finished", extra={"cmd": cmd, "exit_code": output.returncode})
        return ExecutionResult(output.stdout, output.stderr, output.returncode)

    def _read_str(self, stream, output_call):
        try:
            while True:
                line = stream.readline()
                if not line:
                    break
                output_call(line)
        finally:
            stream.close()

    def monitor_cmd(self, cmd: str, args: Optional[list[str]] = None, cwd: Optional[str] = None, bufsize : int = 1, log_args: Optional[list[str]] = None) -> ProcessHandle:
        """
        Starts a command and monitors its output.

        Args:
            cmd (str): The command to run.
            args (list[str], optional): The arguments to pass to the command. Defaults to None.
            cwd (str, optional): Working directory of the process. Defaults to None.
            bufsize (int, optional): The buffer size for reading the output. Defaults to 1.
            log_args (list[str], optional): Arguments as they should appear in logs. Defaults to `args`.

        Returns:
            ProcessHandle: Handle to the running process.

        Raises:
            WarpProcessError: If the process cannot be started.
        """
        args = args or []
        logger.debug("Starting command", extra={"cmd": cmd, "argv": log_args if log_args is not None else args, "cwd": cwd})
        try:
            process = subprocess.Popen(
                args = [cmd] + args,
                stdout = subprocess.PIPE,
                stderr = subprocess.PIPE,
                stdin = subprocess.PIPE,
                encoding = "utf-8",
                errors = "replace",
                bufsize = bufsize,
                cwd = cwd
            )
        except OSError as e:
            logger.error(f"Failed to start '{cmd}': {e}", extra={"cmd": cmd, "cwd": cwd})
            raise WarpProcessError(cmd, str(e)) from e
        monitor = CmdLineMonitor()

        t_out = threading.Thread(target = self._read_str, args = (process.stdout, monitor.update_stdout))
        t_err = threading.Thread(target = self._read_str, args = (process.stderr, monitor.update_stderr))

        def wait_for_process():
            process.wait()
            # readers drain the pipes before the exit code becomes visible
            t_out.join()
            t_err.join()
            monitor.set_finished(process.returncode)
            logger.debug("Command finished", extra={"cmd": cmd, "exit_code": process.returncode})

        t_wait = threading.Thread(target = wait_for_process)

        for thread in (t_out, t_err, t_wait):
            thread.daemon = True
            thread.start()

        return ProcessHandle(process, monitor, [t_out, t_err], t_wait)
