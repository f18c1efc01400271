"""Steering CLI Module"""

# standard library
from pathlib import Path

# first-party
from steering_cli.catalogue.errors import LocalPathError
from steering_cli.catalogue.model.local_file_model import LocalFileModel
from steering_cli.catalogue.model.template_metadata_model import TEMPLATE_EXTENSION


class LocalFileEnumerator:
    """List the template files directly inside a local directory (non-recursive)."""

    def __init__(self, extension: str = TEMPLATE_EXTENSION):
        """Initialize instance properties."""
        self.extension = extension

    def list_files(self, root_path: str) -> list[LocalFileModel]:
        """Return the matching files in root_path sorted by name."""
        root = Path(root_path).expanduser()
        if not root.is_dir():
            raise LocalPathError(
                f'action=list-local-files, path={root}, directory not found',
                user_message=f'Templates path not found: {root}',
                details={'path': str(root)},
            )

        try:
            entries = sorted(root.iterdir())
        except OSError as ex:
            raise LocalPathError(
                f'action=list-local-files, path={root}, unreadable: {ex}',
                user_message=f'Error reading templates directory: {root}',
                details={'path': str(root)},
            ) from ex

        return [
            LocalFileModel(name=entry.name, absolute_path=str(entry.resolve()))
            for entry in entries
            if entry.is_file() and entry.name.endswith(self.extension)
        ]
