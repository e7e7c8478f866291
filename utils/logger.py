"""
Logger utility for the Object Pool Simulator.

Provides worker-by-worker logging with verbosity levels. Safe to call from
several worker threads at once.
"""

import threading
from typing import Optional
from datetime import datetime


class DemoLogger:
    """
    Logger for pool events and demo output.

    Format: "[worker-1] acquired conn-1 (created)"
    """

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger.

        Args:
            verbose: Enable verbose output
            log_file: Optional file path for logging
        """
        self.verbose = verbose
        self.log_file = log_file
        self.file_handle = None
        self._lock = threading.Lock()

        if self.log_file:
            self.file_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_header()

    def _write_header(self) -> None:
        """Write log file header."""
        if self.file_handle:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.file_handle.write(f"Pool Log - {timestamp}\n")
            self.file_handle.write("="*60 + "\n\n")

    def log(self, message: str, level: str = "info") -> None:
        """
        Log a message.

        Args:
            message: Message to log
            level: Log level (info, debug, warning, error)
        """
        if level == "debug" and not self.verbose:
            return

        formatted = self._format_message(message, level)

        # One line at a time across worker threads
        with self._lock:
            print(formatted)

            if self.file_handle:
                self.file_handle.write(formatted + "\n")
                self.file_handle.flush()

    def _format_message(self, message: str, level: str) -> str:
        """Format message with level prefix."""
        if level == "error":
            return f"[ERROR] {message}"
        elif level == "warning":
            return f"[WARNING] {message}"
        elif level == "debug":
            return f"[DEBUG] {message}"
        else:
            return message

    def log_worker(self, worker: str, message: str, level: str = "info") -> None:
        """Log a message on behalf of a worker thread."""
        self.log(f"[{worker}] {message}", level)

    def log_acquire(self, worker: str, handle_id: int, how: str) -> None:
        """
        Log a successful acquire.

        Args:
            worker: Worker thread name
            handle_id: Identifier of the handle handed out
            how: "created", "reused" or "after wait"
        """
        self.log_worker(worker, f"acquired conn-{handle_id} ({how})")

    def log_wait(self, worker: str, in_use: int, max_size: int) -> None:
        """Log that a worker is blocked on an exhausted pool."""
        self.log_worker(worker, f"pool exhausted ({in_use}/{max_size} in use) - waiting")

    def log_release(self, worker: str, handle_id: int, idle: int) -> None:
        """
        Log a release.

        Args:
            worker: Worker thread name
            handle_id: Identifier of the released handle
            idle: Idle handles after the release
        """
        self.log_worker(worker, f"released conn-{handle_id} (idle: {idle})")

    def log_pool_state(self, state_str: str) -> None:
        """
        Log pool state snapshot.

        Args:
            state_str: Formatted pool state
        """
        if self.verbose:
            self.log(f"Pool State:\n{state_str}")

    def close(self) -> None:
        """Close log file if open."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def __del__(self):
        """Cleanup on destruction."""
        self.close()
