"""YAML configuration parser.

A configuration file declares tasks under a single root key::

    dagrs:
      a:
        name: "Task 1"
        after: [b, c]
        cmd: echo a
      b:
        name: "Task 2"
        cmd: echo b
      c:
        name: "Task 3"
        cmd: echo c

Entries may reference each other in any order. Parsing happens in two
passes: every entry first becomes an :class:`UnresolvedTask` with a fresh
numeric id, then each textual ``after`` reference is translated to the
numeric id of the task it names. Any failure rejects the whole file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from .actions import Action, CommandAction
from .errors import (
    DuplicateKey,
    EmptyDocument,
    EmptyFile,
    IllegalYamlContent,
    InvalidPrecursorList,
    InvalidTaskId,
    NoNameAttr,
    NoScriptAttr,
    NotFoundPrecursor,
    StartWordError,
)
from .ids import IdAllocator, default_allocator
from .loader import load_file
from .logging import get_logger
from .task import Task, UnresolvedTask


DEFAULT_ROOT_KEY = "dagrs"

log = get_logger("taskgraph.parser")


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with repeated keys."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if key_node.tag == "tag:yaml.org,2002:merge":
                    continue
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    # Unhashable keys are reported by SafeLoader itself
                    continue
                if duplicate:
                    raise DuplicateKey(key, key_node.start_mark.line + 1)
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


class YamlParser:
    def __init__(
        self,
        root_key: str = DEFAULT_ROOT_KEY,
        allocator: IdAllocator | None = None,
    ):
        self.root_key = root_key
        self.allocator = allocator or default_allocator()

    def parse_tasks(
        self,
        file: str | Path,
        specific_actions: Mapping[str, Action] | None = None,
    ) -> list[Task]:
        """Load a YAML file and build its tasks."""
        content = load_file(file)
        return self.parse_str(content, specific_actions, source=str(file))

    def parse_str(
        self,
        content: str,
        specific_actions: Mapping[str, Action] | None = None,
        source: str = "<string>",
    ) -> list[Task]:
        try:
            # Only the first document of a multi-document stream is read
            document = next(iter(yaml.load_all(content, Loader=_UniqueKeyLoader)), None)
        except yaml.YAMLError as e:
            raise IllegalYamlContent(source, str(e)) from e
        return self.build(document, specific_actions, source=source)

    def build(
        self,
        document: Any,
        specific_actions: Mapping[str, Action] | None = None,
        source: str = "<document>",
    ) -> list[Task]:
        """Turn a deserialized configuration into resolved tasks.

        `specific_actions` maps task ids to actions that replace the entry's
        `cmd`. The mapping is copied; unused actions are ignored.
        """
        entries = self._entries(document, source)
        actions = dict(specific_actions or {})

        tasks: list[UnresolvedTask] = []
        ids: dict[str, int] = {}
        for document_id, item in entries.items():
            if not isinstance(document_id, str):
                raise InvalidTaskId(document_id)
            task = self.parse_one(document_id, item, actions.pop(document_id, None))
            ids[document_id] = task.id
            tasks.append(task)

        resolved: list[Task] = []
        for task in tasks:
            precursors = []
            for pre in task.str_precursors:
                if pre not in ids:
                    raise NotFoundPrecursor(task.name, pre)
                precursors.append(ids[pre])
            resolved.append(task.resolve(precursors))

        if actions:
            log.debug("Unused actions: %s", ", ".join(sorted(actions)))
        log.info("Built %d tasks from %s", len(resolved), source)
        return resolved

    def parse_one(
        self,
        document_id: str,
        item: Any,
        specific_action: Action | None = None,
    ) -> UnresolvedTask:
        """Parse one entry of the root mapping, e.g.::

            name: "Task 1"
            after: [b, c]
            cmd: echo a
        """
        if not isinstance(item, dict):
            raise NoNameAttr(document_id)
        name = item.get("name")
        if not isinstance(name, str):
            raise NoNameAttr(document_id)

        after = item.get("after")
        if after is None:
            after = []
        if not isinstance(after, list) or not all(isinstance(a, str) for a in after):
            raise InvalidPrecursorList(document_id)

        if specific_action is not None:
            action = specific_action
        else:
            cmd = item.get("cmd")
            if not isinstance(cmd, str):
                raise NoScriptAttr(name)
            action = CommandAction(cmd)

        task = UnresolvedTask(
            id=self.allocator.next(),
            document_id=document_id,
            name=name,
            str_precursors=tuple(after),
            action=action,
        )
        log.debug("Parsed %s -> %d (after: %s)", document_id, task.id, after)
        return task

    def _entries(self, document: Any, source: str) -> dict:
        if document is None or document == {}:
            raise EmptyFile(source)
        if not isinstance(document, dict) or self.root_key not in document:
            raise StartWordError(self.root_key)
        entries = document[self.root_key]
        if entries is None or entries == {}:
            raise EmptyDocument(self.root_key)
        if not isinstance(entries, dict):
            raise StartWordError(self.root_key)
        return entries


def load_tasks(
    file: str | Path,
    specific_actions: Mapping[str, Action] | None = None,
    root_key: str = DEFAULT_ROOT_KEY,
) -> list[Task]:
    """Parse `file` with a default :class:`YamlParser`."""
    return YamlParser(root_key=root_key).parse_tasks(file, specific_actions)
