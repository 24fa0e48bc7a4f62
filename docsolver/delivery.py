"""
Delivery destinations.

A destination accepts text messages (optionally size-limited) and document
uploads. Chat transports implement DeliveryDestination outside this
package; LocalDirectoryDestination serves the command line tool.
"""

import shutil
import sys
from pathlib import Path
from typing import Optional, Protocol, TextIO

from .errors import DeliveryFailedError


class DeliveryDestination(Protocol):
    """Where answers go"""

    # Largest message the channel accepts, None if unlimited
    max_message_chars: Optional[int]

    async def send_message(self, text: str) -> None:
        ...

    async def send_document(self, path: Path, filename: str, title: str, caption: str) -> None:
        """Upload a file; the pipeline deletes `path` once this returns or raises"""
        ...


class LocalDirectoryDestination:
    """Prints messages and copies documents into an output directory"""

    def __init__(
        self,
        output_dir: Path,
        stream: TextIO = sys.stdout,
        max_message_chars: Optional[int] = None,
    ):
        self.output_dir = Path(output_dir)
        self.stream = stream
        self.max_message_chars = max_message_chars
        self.saved = []

    async def send_message(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    async def send_document(self, path: Path, filename: str, title: str, caption: str) -> None:
        target = self.output_dir / Path(filename).name
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(path, target)
        except OSError as e:
            raise DeliveryFailedError("write_failed", f"{target}: {e}") from e

        self.saved.append(target)
        self.stream.write(f"{caption} {target}\n")
        self.stream.flush()
