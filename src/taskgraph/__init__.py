"""Declarative task-graph builder.

Reads a YAML file of named tasks and their dependencies and produces Task
objects with numeric ids and numeric precursors, ready for a DAG scheduler.
"""

from .actions import Action, CommandAction, EnvVar, FnAction, Output, RunningError
from .ids import IdAllocator, alloc_id
from .parser import YamlParser, load_tasks
from .task import Task, UnresolvedTask

__all__ = [
    "Action",
    "CommandAction",
    "EnvVar",
    "FnAction",
    "Output",
    "RunningError",
    "IdAllocator",
    "alloc_id",
    "YamlParser",
    "load_tasks",
    "Task",
    "UnresolvedTask",
]
