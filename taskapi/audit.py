import logging
from pathlib import Path

from taskapi.models import isoformat, utcnow

logger = logging.getLogger(__name__)


class AuditLog:
    """Append-only request log: one line per handled request.

    Writing is best effort. I/O errors are reported through ``logging`` and
    never reach the caller.
    """

    def __init__(self, path):
        self.path = Path(path)

    def format_line(self, method, path, status_code, message, when=None):
        timestamp = isoformat(when or utcnow())
        return f"[{timestamp}] {method} {path} - {status_code} | {message}\n"

    def log(self, method, path, status_code, message):
        line = self.format_line(method, path, status_code, message)
        logger.debug(line.rstrip())
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(line)
        except OSError as exc:
            logger.error("Error al escribir en el log %s: %s", self.path, exc)
