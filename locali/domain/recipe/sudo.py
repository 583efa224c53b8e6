"""
Keep a sudo session alive while recipes run
"""
import subprocess
import threading
from typing import Optional

from ...core.constants import SUDO_REFRESH_INTERVAL
from ...core.exceptions import LocaliError
from ...core.logging import get_logger

logger = get_logger(__name__)


class SudoKeeper:
    """
    Refreshes the sudo timestamp periodically until stopped.

    Use as a context manager around the work that needs elevated rights:

        with SudoKeeper():
            runner.run(names)
    """

    def __init__(self, interval: float = SUDO_REFRESH_INTERVAL, sudo: str = "sudo"):
        self.interval = interval
        self.sudo = sudo
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """
        Ask for the password once, then refresh in the background.

        Raises:
            LocaliError: If authorization fails
        """
        try:
            code = subprocess.run([self.sudo, "-v"]).returncode
        except OSError as e:
            raise LocaliError(f"Cannot run {self.sudo}: {e}") from e
        if code != 0:
            raise LocaliError("sudo authorization failed")

        self._stop.clear()
        self._thread = threading.Thread(target=self._refresh_loop, name="sudo-keepalive", daemon=True)
        self._thread.start()

    def _refresh_loop(self) -> None:
        while not self._stop.wait(self.interval):
            result = subprocess.run(
                [self.sudo, "-n", "true"],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            if result.returncode != 0:
                logger.warning("sudo refresh failed")

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def __enter__(self) -> "SudoKeeper":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
