# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Extract ``Message`` literals from Python source with the ``ast`` module."""

from __future__ import annotations

import ast
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from ..catalog.model import Catalog, Message
from ..constants import (
    CONFTEST_FILENAME,
    MESSAGE_CLASS_NAME,
    PACKAGE_IMPORT_NAMES,
    PLURAL_CATEGORIES,
    TEST_FILE_PREFIX,
    TEST_FILE_SUFFIX,
)

_ID_KEYWORD: Final[str] = "id"
_PYTHON_SUFFIX: Final[str] = ".py"
_SKIPPED_DIRECTORIES: Final[frozenset[str]] = frozenset(
    {".git", ".hg", ".svn", ".tox", ".nox", ".venv", "venv", "__pycache__", "node_modules", "build", "dist"},
)


@dataclass(slots=True)
class ExtractedMessage:
    """A message literal found in source code."""

    message: Message
    path: Path | None
    line: int


@dataclass(slots=True)
class SkippedCall:
    """A ``Message`` construction that could not be resolved statically."""

    path: Path | None
    line: int
    reason: str


@dataclass(slots=True)
class ExtractionResult:
    """Messages and unresolved constructions found in one module."""

    messages: list[ExtractedMessage] = field(default_factory=list)
    skipped: list[SkippedCall] = field(default_factory=list)


@dataclass(slots=True)
class ScanResult:
    """Outcome of scanning a set of paths for message literals.

    Attributes:
        catalog: Extracted messages keyed by identifier.
        files_scanned: Number of Python files parsed.
        file_errors: Files that could not be read or parsed, with the reason.
        skipped: Unresolvable ``Message`` constructions.
        duplicates: Identifiers defined more than once; the last definition wins.
    """

    catalog: Catalog = field(default_factory=Catalog)
    files_scanned: int = 0
    file_errors: list[tuple[Path, str]] = field(default_factory=list)
    skipped: list[SkippedCall] = field(default_factory=list)
    duplicates: list[str] = field(default_factory=list)


class _ModuleIndex:
    """Names bound to the ``Message`` class, module aliases and string constants."""

    def __init__(self, tree: ast.AST) -> None:
        self.message_names: set[str] = set()
        self.module_aliases: dict[str, str] = {}
        self._assignments: dict[str, list[ast.expr]] = defaultdict(list)
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                self._register_import(node)
            elif isinstance(node, ast.ImportFrom):
                self._register_import_from(node)
            elif isinstance(node, ast.Assign):
                if len(node.targets) == 1 and isinstance(node.targets[0], ast.Name):
                    self._assignments[node.targets[0].id].append(node.value)
            elif isinstance(node, ast.AnnAssign):
                if isinstance(node.target, ast.Name) and node.value is not None:
                    self._assignments[node.target.id].append(node.value)

    def _register_import(self, node: ast.Import) -> None:
        for alias in node.names:
            if alias.name not in PACKAGE_IMPORT_NAMES:
                continue
            if alias.asname is not None:
                self.module_aliases[alias.asname] = alias.name
            else:
                top_level = alias.name.split(".", 1)[0]
                self.module_aliases[top_level] = top_level

    def _register_import_from(self, node: ast.ImportFrom) -> None:
        if node.level or node.module is None:
            return
        for alias in node.names:
            bound = alias.asname or alias.name
            if node.module in PACKAGE_IMPORT_NAMES and alias.name == MESSAGE_CLASS_NAME:
                self.message_names.add(bound)
            elif f"{node.module}.{alias.name}" in PACKAGE_IMPORT_NAMES:
                self.module_aliases[bound] = f"{node.module}.{alias.name}"

    def assignment_for(self, name: str) -> ast.expr | None:
        """Return the single value bound to ``name``, or ``None`` when ambiguous."""

        values = self._assignments.get(name, [])
        if len(values) != 1:
            return None
        return values[0]

    def is_message_constructor(self, func: ast.expr) -> bool:
        """Return ``True`` when ``func`` refers to the ``Message`` class."""

        if isinstance(func, ast.Name):
            return func.id in self.message_names
        if isinstance(func, ast.Attribute) and func.attr == MESSAGE_CLASS_NAME:
            module = self._dotted_module(func.value)
            return module is not None and module in PACKAGE_IMPORT_NAMES
        return False

    def _dotted_module(self, node: ast.expr) -> str | None:
        if isinstance(node, ast.Name):
            return self.module_aliases.get(node.id)
        if isinstance(node, ast.Attribute):
            parent = self._dotted_module(node.value)
            return None if parent is None else f"{parent}.{node.attr}"
        return None


class MessageExtractor(ast.NodeVisitor):
    """Collect ``Message`` constructions from a parsed module.

    Every call is visited, so constructions nested in list, tuple, set or dict
    literals are found as well as standalone ones.
    """

    def __init__(self, tree: ast.AST, *, path: Path | None = None) -> None:
        self._tree = tree
        self._path = path
        self._index = _ModuleIndex(tree)
        self.result = ExtractionResult()

    def run(self) -> ExtractionResult:
        """Visit the module and return the collected messages."""

        self.visit(self._tree)
        return self.result

    def visit_Call(self, node: ast.Call) -> None:  # noqa: N802 - ast dispatch name
        if self._index.is_message_constructor(node.func):
            self._extract(node)
        self.generic_visit(node)

    def _extract(self, node: ast.Call) -> None:
        id_expr: ast.expr | None = node.args[0] if node.args else None
        forms: dict[str, str] = {}
        for keyword in node.keywords:
            if keyword.arg == _ID_KEYWORD:
                id_expr = keyword.value
            elif keyword.arg in PLURAL_CATEGORIES:
                text = resolve_string(keyword.value, self._index)
                if text is not None:
                    forms[keyword.arg] = text
        message_id = resolve_string(id_expr, self._index) if id_expr is not None else None
        if not message_id:
            self.result.skipped.append(
                SkippedCall(path=self._path, line=node.lineno, reason="message identifier is not a string constant"),
            )
            return
        self.result.messages.append(
            ExtractedMessage(message=Message(id=message_id, **forms), path=self._path, line=node.lineno),
        )


def resolve_string(node: ast.expr, index: _ModuleIndex, *, _seen: frozenset[str] = frozenset()) -> str | None:
    """Return the compile-time string value of ``node`` when it has one.

    Literals, ``+`` concatenation and names bound once in the module to such an
    expression are resolved; anything else yields ``None``.
    """

    if isinstance(node, ast.Constant):
        return node.value if isinstance(node.value, str) else None
    if isinstance(node, ast.BinOp) and isinstance(node.op, ast.Add):
        left = resolve_string(node.left, index, _seen=_seen)
        if left is None:
            return None
        right = resolve_string(node.right, index, _seen=_seen)
        return None if right is None else left + right
    if isinstance(node, ast.Name) and node.id not in _seen:
        value = index.assignment_for(node.id)
        if value is None:
            return None
        return resolve_string(value, index, _seen=_seen | {node.id})
    return None


def extract_messages(source: str, *, path: Path | None = None) -> ExtractionResult:
    """Extract message literals from Python ``source``.

    Args:
        source: Module source text.
        path: Optional file path recorded on each result.

    Returns:
        ExtractionResult: Messages in source order plus unresolved constructions.

    Raises:
        SyntaxError: If ``source`` cannot be parsed.
    """

    tree = ast.parse(source, filename=str(path) if path is not None else "<string>")
    return MessageExtractor(tree, path=path).run()


def is_test_file(path: Path) -> bool:
    """Return ``True`` for pytest-style test modules and ``conftest.py``."""

    name = path.name
    return name == CONFTEST_FILENAME or name.startswith(TEST_FILE_PREFIX) or name.endswith(TEST_FILE_SUFFIX)


def iter_python_files(paths: Iterable[Path], *, ignore_test_files: bool = True) -> Iterator[Path]:
    """Yield Python files beneath ``paths`` in a stable order.

    Args:
        paths: Files or directories to scan.
        ignore_test_files: Skip test modules when ``True``.

    Yields:
        Path: Python source files, each at most once.
    """

    seen: set[Path] = set()
    for root in paths:
        if root.is_file():
            candidates: Sequence[Path] = [root] if root.suffix == _PYTHON_SUFFIX else []
        else:
            candidates = sorted(
                candidate
                for candidate in root.rglob(f"*{_PYTHON_SUFFIX}")
                if candidate.is_file()
                and not any(part in _SKIPPED_DIRECTORIES for part in candidate.relative_to(root).parts[:-1])
            )
        for candidate in candidates:
            resolved = candidate.resolve()
            if resolved in seen:
                continue
            if ignore_test_files and is_test_file(resolved):
                continue
            seen.add(resolved)
            yield resolved


def scan_paths(paths: Sequence[Path], *, ignore_test_files: bool = True) -> ScanResult:
    """Scan ``paths`` and build the source catalog.

    Args:
        paths: Files or directories to scan.
        ignore_test_files: Skip test modules when ``True``.

    Returns:
        ScanResult: Catalog plus per-file diagnostics.
    """

    result = ScanResult()
    for path in iter_python_files(paths, ignore_test_files=ignore_test_files):
        try:
            source = path.read_text(encoding="utf-8")
            extraction = extract_messages(source, path=path)
        except (OSError, UnicodeDecodeError, SyntaxError, ValueError) as exc:
            result.file_errors.append((path, str(exc)))
            continue
        result.files_scanned += 1
        result.skipped.extend(extraction.skipped)
        for extracted in extraction.messages:
            message = extracted.message
            if message.id in result.catalog:
                result.duplicates.append(message.id)
            result.catalog[message.id] = message
    return result


__all__ = [
    "ExtractedMessage",
    "ExtractionResult",
    "MessageExtractor",
    "ScanResult",
    "SkippedCall",
    "extract_messages",
    "is_test_file",
    "iter_python_files",
    "resolve_string",
    "scan_paths",
]
