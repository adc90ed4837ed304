"""Platform services: process execution and file text surgery."""

from __future__ import annotations

from protoweld.system.mock import MockSystemManager
from protoweld.system.operations import (
    FileOperation,
    FindReplace,
    InsertText,
    RenameFile,
    RunCommand,
    SearchFile,
    SearchHit,
    SearchMiss,
    SearchOutcome,
    SystemOperation,
    WriteFile,
)
from protoweld.system.protocols import SystemManager
from protoweld.system.unix import UnixSystemManager, get_system_manager

__all__ = [
    "FileOperation",
    "FindReplace",
    "InsertText",
    "MockSystemManager",
    "RenameFile",
    "RunCommand",
    "SearchFile",
    "SearchHit",
    "SearchMiss",
    "SearchOutcome",
    "SystemManager",
    "SystemOperation",
    "UnixSystemManager",
    "WriteFile",
    "get_system_manager",
]
