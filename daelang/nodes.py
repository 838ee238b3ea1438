"""Syntax tree nodes for Dae programs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class ReturnKind(Enum):
    """Type of the literal carried by a return statement."""

    NUMBER = "number"
    STRING = "string"
    BOOL = "bool"


@dataclass
class FunctionParam:
    """A declared function parameter."""

    name: str
    type: str


@dataclass
class CallNode:
    """A call statement; ``args`` is ``None`` for an empty ``name()`` call."""

    function_name: str
    args: Optional[list[str]] = None


@dataclass
class ReturnNode:
    """A return statement with a literal value."""

    kind: ReturnKind
    value: Union[int, bool, str]


Statement = Union[CallNode, ReturnNode]


@dataclass
class FunctionNode:
    """A function definition."""

    name: str
    return_type: Optional[str] = None
    body: list[Statement] = field(default_factory=list)
    params: list[FunctionParam] = field(default_factory=list)