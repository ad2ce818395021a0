# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

from collections import namedtuple
from enum import Enum


class PortKind(Enum):
    UNKNOWN = 0
    INPUT = 1
    OUTPUT = 2
    INOUT = 3  # INPUT | OUTPUT
    WIRE = 4
    REGISTER = 8


class ScopeKind(Enum):
    UNKNOWN = "unknown"
    MODULE = "module"
    TASK = "task"


Port = namedtuple(
    "Port",
    [
        "kind",  # PortKind
        "width",  # int
        "identifier",  # str
        "name",  # str
        "reference",  # str, raw bit range text such as [3:0]
    ],
)

ScopeNode = namedtuple(
    "ScopeNode",
    [
        "name",  # str
        "kind",  # ScopeKind
        "ports",  # Tuple[Port], always empty unless kind is MODULE
        "children",  # Tuple[ScopeNode]
    ],
)

Header = namedtuple(
    "Header",
    [
        "roots",  # Tuple[ScopeNode]
        "version",  # Optional[str]
        "date",  # Optional[str]
        "timescale",  # Optional[str]
    ],
)

Change = namedtuple(
    "Change",
    [
        "identifier",  # str
        "value",  # str, literal text, never interpreted
    ],
)

Timestamp = namedtuple(
    "Timestamp",
    [
        "time",  # int
        "changes",  # Tuple[Change], encounter order, repeats kept
    ],
)

Document = namedtuple(
    "Document",
    [
        "header",  # Header
        "initial_dump",  # Tuple[Change]
        "timestamps",  # Tuple[Timestamp]
    ],
)


def depth(node):
    """Number of scope levels from node down to its deepest descendant."""
    if len(node.children) == 0:
        return 1
    return 1 + max(depth(child) for child in node.children)
