"""Steering CLI Module"""

# standard library
import logging
from collections.abc import Iterable

# first-party
from steering_cli.catalogue.model.template_metadata_model import TemplateMetadataModel
from steering_cli.catalogue.model.tree_node_model import DirectoryNode, LeafNode, TreeNode

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])


class _Directory:
    """Mutable directory used while assembling the tree."""

    def __init__(self, name: str, path: str):
        """Initialize instance properties."""
        self.name = name
        self.path = path
        self.directories: dict[str, _Directory] = {}
        self.leaves: dict[str, TemplateMetadataModel] = {}


class TreeAssembler:
    """Convert a flat list of templates into a sorted Directory/Leaf tree.

    Nodes are synthesized from path strings only, so the result can not
    contain cycles. Every level is sorted with directories first and then by
    name (case-sensitive), which makes the output independent of input order.

    Name collisions between a directory and a leaf on the same level are
    resolved in favour of the directory; duplicate leaf names keep the
    template with the smallest path.
    """

    def build(self, templates: Iterable[TemplateMetadataModel]) -> list[TreeNode]:
        """Return the root level nodes for the provided templates."""
        root = _Directory(name='', path='')

        for template in templates:
            segments = [s for s in template.path.split('/') if s]
            if not segments:
                _logger.warning(f'action=build-tree, empty-path, name={template.name}')
                continue

            parent = root
            for segment in segments[:-1]:
                directory = parent.directories.get(segment)
                if directory is None:
                    path = f'{parent.path}/{segment}' if parent.path else segment
                    directory = _Directory(name=segment, path=path)
                    parent.directories[segment] = directory
                parent = directory

            existing = parent.leaves.get(template.name)
            if existing is None or template.path < existing.path:
                parent.leaves[template.name] = template

        return self._freeze(root)

    def _freeze(self, directory: _Directory) -> list[TreeNode]:
        """Return sorted immutable nodes for the children of a directory."""
        nodes: list[TreeNode] = []
        for name in sorted(directory.directories):
            child = directory.directories[name]
            nodes.append(
                DirectoryNode(name=child.name, path=child.path, children=self._freeze(child))
            )

        for name in sorted(directory.leaves):
            if name in directory.directories:
                _logger.warning(
                    f'action=build-tree, name-collision={name}, parent={directory.path or "/"}, '
                    f'dropped-leaf={directory.leaves[name].path}'
                )
                continue
            nodes.append(LeafNode(name=name, template=directory.leaves[name]))
        return nodes


def flatten(nodes: Iterable[TreeNode]) -> list[TemplateMetadataModel]:
    """Return the templates of a tree in display order."""
    result: list[TemplateMetadataModel] = []
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        if isinstance(node, LeafNode):
            result.append(node.template)
        elif isinstance(node, DirectoryNode):
            stack.extend(reversed(node.children))
        else:
            ex_msg = f'Unsupported tree node type: {type(node).__name__}'
            raise TypeError(ex_msg)
    return result


def find(nodes: Iterable[TreeNode], path: str) -> TreeNode | None:
    """Return the node for a directory path or template path."""
    segments = [s for s in path.strip('/').split('/') if s]
    if not segments:
        return None

    level = list(nodes)
    node: TreeNode | None = None
    for index, segment in enumerate(segments):
        node = None
        last = index == len(segments) - 1
        for candidate in level:
            if isinstance(candidate, DirectoryNode):
                if candidate.name == segment:
                    node = candidate
                    break
            elif isinstance(candidate, LeafNode):
                if last and segment in (candidate.name, candidate.template.filename):
                    node = candidate
                    break
            else:
                ex_msg = f'Unsupported tree node type: {type(candidate).__name__}'
                raise TypeError(ex_msg)

        if node is None:
            return None
        if isinstance(node, DirectoryNode):
            level = node.children
        elif not last:
            return None
    return node


def filter_by_directory(
    templates: Iterable[TemplateMetadataModel], directory_path: str
) -> list[TemplateMetadataModel]:
    """Return the templates located under a directory path."""
    prefix = directory_path if directory_path.endswith('/') else f'{directory_path}/'
    return [t for t in templates if t.path.startswith(prefix) or t.path == directory_path]


def directory_paths(templates: Iterable[TemplateMetadataModel]) -> set[str]:
    """Return every directory path referenced by the templates."""
    directories: set[str] = set()
    for template in templates:
        segments = template.path.split('/')[:-1]
        for index in range(1, len(segments) + 1):
            directories.add('/'.join(segments[:index]))
    return directories
