from typing import List, Protocol
import logging
import subprocess

from .errors import PostError

log = logging.getLogger(__name__)


class StatusPoster(Protocol):
    def post_status(self, text: str) -> int: ...


class CommandPoster:
    """Posts through a command-line client, by default oysttyer
    (https://github.com/oysttyer/oysttyer) in non-interactive mode over SSL.
    """

    def __init__(self, command: str = "oysttyer"):
        self.command = command

    def argv(self, text: str) -> List[str]:
        # no shell in between, the message goes through as a single argument
        return [self.command, "-silent", f"-status={text}", "-ssl"]

    def post_status(self, text: str) -> int:
        try:
            proc = subprocess.run(self.argv(text), check=False)
        except FileNotFoundError as e:
            raise PostError(f"posting client not found: {self.command}", exit_code=127) from e
        except PermissionError as e:
            raise PostError(f"posting client not executable: {self.command}", exit_code=126) from e
        if proc.returncode != 0:
            log.error("%s exited with status %d", self.command, proc.returncode)
        else:
            log.info("status posted via %s", self.command)
        return proc.returncode
