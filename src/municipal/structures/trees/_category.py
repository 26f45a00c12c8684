"""
N-ary hierarchy of departments and sub-categories holding payloads.

Departments hang under a hidden root that is never matched by name. The tree is
single writer; every listing it returns is a fresh DynamicArray snapshot.
"""

from __future__ import annotations

from typing import Final, Generic, TypeVar

from .._definitions import CATEGORY_ROOT_NAME
from .._logging import null_logger
from .._utils import is_blank, normalize_label, require
from ..containers import DynamicArray
from ..exceptions import InvalidArgumentError, KeyNotFoundError
from ..types import Categorized

logger: Final = null_logger(__name__)

P = TypeVar("P", bound=Categorized)


class CategoryNode(Generic[P]):
    """A department or sub-category with the payloads filed directly under it."""

    __slots__ = ("name", "children", "requests")

    def __init__(self, name: str) -> None:
        self.name = name
        self.children: DynamicArray[CategoryNode[P]] = DynamicArray()
        self.requests: DynamicArray[P] = DynamicArray()

    def __repr__(self) -> str:
        return f"CategoryNode({self.name!r})"


def _require_name(value: str | None, name: str) -> str:
    if is_blank(value):
        raise InvalidArgumentError(f"'{name}' cannot be empty")
    return value.strip()  # type: ignore[union-attr]


class CategoryTree(Generic[P]):
    """Departments hang under a hidden root; names match case-insensitively."""

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root: CategoryNode[P] = CategoryNode(CATEGORY_ROOT_NAME)

    def add_department(self, department: str) -> None:
        """Add a top-level department; a name already used anywhere is ignored."""
        department = _require_name(department, "department")
        if self._lookup(department) is not None:
            return
        self._root.children.add(CategoryNode(department))

    def add_sub_category(self, parent: str, sub_category: str) -> None:
        """Add a child category below an existing department or category.

        Raises:
            KeyNotFoundError: If the parent does not exist.
        """
        parent = _require_name(parent, "parent")
        sub_category = _require_name(sub_category, "sub_category")

        parent_node = self._lookup(parent)
        if parent_node is None:
            raise KeyNotFoundError(f"Parent department '{parent}' does not exist")

        key = normalize_label(sub_category)
        if any(normalize_label(child.name) == key for child in parent_node.children):
            return
        parent_node.children.add(CategoryNode(sub_category))

    def add_request(self, category: str, request: P) -> None:
        """File a payload under a category.

        Raises:
            KeyNotFoundError: If the category has not been added first.
        """
        require(request, "request")
        category = _require_name(category, "category")

        node = self._lookup(category)
        if node is None:
            raise KeyNotFoundError(
                f"Category '{category}' does not exist. "
                "Please add it before assigning requests."
            )
        node.requests.add(request)

    def get_requests_by_department(self, department: str) -> DynamicArray[P]:
        """Payloads of a department and of all its sub-categories."""
        department = _require_name(department, "department")
        result: DynamicArray[P] = DynamicArray()

        node = self._lookup(department)
        if node is not None:
            self._collect(node, result)
        return result

    def get_departments(self) -> DynamicArray[str]:
        return DynamicArray(items=(child.name for child in self._root.children))

    def display_hierarchy(self) -> DynamicArray[str]:
        """Indented outline, two spaces per level, payloads listed under their node."""
        lines: DynamicArray[str] = DynamicArray()
        for department in self._root.children:
            self._display(department, lines, 0)
        return lines

    def clear(self) -> None:
        self._root = CategoryNode(CATEGORY_ROOT_NAME)

    def _display(
        self, node: CategoryNode[P], lines: DynamicArray[str], depth: int
    ) -> None:
        indent = " " * (depth * 2)
        lines.add(f"{indent}{node.name}")
        for request in node.requests:
            lines.add(
                f"{indent}  - {request.request_id}: {request.title} ({request.status})"
            )
        for child in node.children:
            self._display(child, lines, depth + 1)

    def _collect(self, node: CategoryNode[P], collector: DynamicArray[P]) -> None:
        collector.add_range(node.requests)
        for child in node.children:
            self._collect(child, collector)

    def _lookup(self, name: str) -> CategoryNode[P] | None:
        """Search the departments and their descendants, never the hidden root."""
        for department in self._root.children:
            found = self._find(department, name)
            if found is not None:
                return found
        return None

    def _find(self, node: CategoryNode[P], name: str) -> CategoryNode[P] | None:
        if normalize_label(node.name) == normalize_label(name):
            return node
        for child in node.children:
            found = self._find(child, name)
            if found is not None:
                return found
        return None
