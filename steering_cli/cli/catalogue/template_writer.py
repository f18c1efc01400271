"""Steering CLI Module"""

# standard library
import logging
from pathlib import Path

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])


class TemplateWriter:
    """Write template content into a project directory with preserved file modes."""

    def write(self, dest: Path, content: str) -> Path:
        """Write content to dest, keeping the mode of an existing file."""
        self.ensure_parent(dest)

        if dest.exists():
            mode = dest.stat().st_mode
            dest.write_text(content, encoding='utf-8')
            dest.chmod(mode)
        else:
            dest.write_text(content, encoding='utf-8')

        _logger.info(f'action=write-template, path={dest}, bytes={len(content.encode())}')
        return dest

    @staticmethod
    def ensure_parent(path: Path):
        """Ensure parent directory exists."""
        path.parent.mkdir(parents=True, exist_ok=True)
