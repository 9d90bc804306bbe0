import logging
import os
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class UrlOpener(ABC):
    @abstractmethod
    def open(self, url: str) -> None:
        """Hands `url` to something that can show it. Must not block."""


def opener_command(platform: str = sys.platform) -> List[str]:
    """Returns the command line prefix of the platform's default URL handler."""
    if platform == "darwin":
        return ["open"]
    return ["xdg-open"]


class SystemOpener(UrlOpener):
    """
    Launches the platform URL handler as a detached child process.
    The child is never waited on and launch failures are ignored.

    Windows has no opener program taking the URL as a plain argument, so the
    URL goes to the shell association through os.startfile instead.
    """

    def __init__(self, platform: str = sys.platform):
        self.platform = platform

    def open(self, url: str) -> None:
        try:
            if self.platform == "win32":
                logger.debug(f"Starting {url} through the shell association")
                os.startfile(url)
                return
            args = [*opener_command(self.platform), url]
            logger.debug(f"Launching {args}")
            subprocess.Popen(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            logger.debug(f"Could not open {url}: {e}")


def get_opener() -> UrlOpener:
    return SystemOpener()
