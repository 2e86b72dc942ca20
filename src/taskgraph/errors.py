"""Errors raised while turning a configuration file into tasks.

Everything derives from :class:`ParseError`, so callers can catch one type.
None of these are recoverable inside the package: a single bad entry
rejects the whole file.
"""

from __future__ import annotations


class ParseError(Exception):
    pass


class FileError(ParseError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        return f"{self.path}: {self.reason}" if self.reason else self.path


class FileNotFound(FileError):
    def _message(self) -> str:
        return f"File not found: {self.path}"


class FileReadError(FileError):
    def _message(self) -> str:
        return f"Failed to read {self.path}: {self.reason}"


class FileContentError(ParseError):
    pass


class IllegalYamlContent(FileContentError):
    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"Illegal yaml content in {source}: {detail}")


class EmptyFile(FileContentError):
    def __init__(self, source: str):
        self.source = source
        super().__init__(f"File is empty: {source}")


class EmptyDocument(FileContentError):
    def __init__(self, root_key: str):
        self.root_key = root_key
        super().__init__(f"No tasks declared under '{root_key}'")


class StartWordError(FileContentError):
    def __init__(self, root_key: str):
        self.root_key = root_key
        super().__init__(f"File must start with a '{root_key}' mapping")


class DuplicateKey(FileContentError):
    def __init__(self, key, line: int | None = None):
        self.key = key
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"Duplicate key '{key}'{where}")


class InvalidTaskId(FileContentError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"Task identifier must be a string, got {key!r}")


class YamlTaskError(ParseError):
    pass


class NoNameAttr(YamlTaskError):
    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Task '{document_id}' has no name")


class NoScriptAttr(YamlTaskError):
    def __init__(self, task_name: str):
        self.task_name = task_name
        super().__init__(f"Task '{task_name}' has no cmd and no action was supplied")


class InvalidPrecursorList(YamlTaskError):
    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Task '{document_id}': 'after' must be a list of task ids")


class NotFoundPrecursor(YamlTaskError):
    def __init__(self, task_name: str, precursor: str):
        self.task_name = task_name
        self.precursor = precursor
        super().__init__(f"Task '{task_name}' depends on unknown task '{precursor}'")
