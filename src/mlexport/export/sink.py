"""
Sink writer for export fragments.

Wraps the destination of an export: either a filesystem path, which the
sink opens and closes itself, or an already-open binary stream, which is
only flushed on release and stays with its owner.
"""

from pathlib import Path
from typing import BinaryIO, Optional, Union

from mlexport.logging import get_logger
from .errors import WriteFailedError

Destination = Union[str, Path, BinaryIO]


class SinkWriter:
    """Scoped writer that pushes fragments to the destination immediately"""

    def __init__(self, destination: Destination):
        self.destination = destination
        self.stream: Optional[BinaryIO] = None
        self.owns_stream = isinstance(destination, (str, Path))
        self.bytes_written = 0
        self.closed = False
        self.logger = get_logger("mlexport.export.sink")

    @property
    def name(self) -> str:
        if self.owns_stream:
            return str(self.destination)
        return getattr(self.destination, "name", "<stream>")

    def open(self) -> "SinkWriter":
        """Acquire the underlying stream"""
        if self.stream is not None:
            return self
        if self.owns_stream:
            path = Path(self.destination)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                self.stream = open(path, "wb")
            except OSError as e:
                raise WriteFailedError(
                    f"Cannot open {path} for writing: {str(e)}", original_error=e
                ) from e
        else:
            self.stream = self.destination
        self.logger.debug(f"Sink opened: {self.name}")
        return self

    def write(self, fragment: bytes) -> None:
        """
        Write one fragment.

        Args:
            fragment: Encoded bytes ready to write verbatim

        Raises:
            WriteFailedError: If the sink is closed or the write fails
        """
        if self.stream is None or self.closed:
            raise WriteFailedError(f"Sink {self.name} is not open")
        try:
            self.stream.write(fragment)
        except (OSError, ValueError) as e:
            raise WriteFailedError(
                f"Failed to write to {self.name}: {str(e)}", original_error=e
            ) from e
        self.bytes_written += len(fragment)

    def close(self) -> None:
        """Release the stream; later calls do nothing"""
        if self.closed or self.stream is None:
            self.closed = True
            return
        self.closed = True
        try:
            if self.owns_stream:
                self.stream.close()
            else:
                self.stream.flush()
        except (OSError, ValueError) as e:
            raise WriteFailedError(
                f"Failed to close {self.name}: {str(e)}", original_error=e
            ) from e
        finally:
            self.logger.debug(f"Sink closed: {self.name} ({self.bytes_written} bytes)")

    def __enter__(self) -> "SinkWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.close()
        except WriteFailedError as e:
            if exc_type is None:
                raise
            # Keep the error that ended the export
            self.logger.error(f"Sink close failed after error: {e.message}")
