"""Tree-walking interpreter for parsed Dae programs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional

from .errors import InterpreterError
from .nodes import CallNode, FunctionNode, ReturnNode

NativeFunction = Callable[[Optional[list[str]]], Any]


class ResultKind(Enum):
    """How a statement finished."""

    FUNC = auto()
    RETURN = auto()


@dataclass(frozen=True)
class InterpreterResult:
    """Outcome of running a statement or function."""

    kind: ResultKind
    data: Any = None


class Interpreter:
    """Runs a program made of function definitions and native functions."""

    def __init__(
        self,
        functions: Iterable[FunctionNode],
        natives: Mapping[str, NativeFunction],
    ) -> None:
        self.functions: dict[str, FunctionNode] = {
            fn.name: fn for fn in functions if isinstance(fn, FunctionNode)
        }
        self.natives: dict[str, NativeFunction] = dict(natives)

    def run(self) -> InterpreterResult:
        """Run the program's ``main`` function."""
        main = self.functions.get("main")
        if main is None:
            raise InterpreterError("Your program needs a main function!")
        return self.run_function(main)

    def run_function(self, function: FunctionNode) -> InterpreterResult:
        """Run *function*'s body until a statement returns."""
        for statement in function.body:
            result = self.run_node(statement)
            if result.kind is ResultKind.RETURN:
                return result
        return InterpreterResult(ResultKind.RETURN, None)

    def run_node(self, node: object) -> InterpreterResult:
        """Run a single statement."""
        if isinstance(node, CallNode):
            called = self.functions.get(node.function_name)
            if called is not None:
                return self.run_function(called)
            native = self.natives.get(node.function_name)
            if native is not None:
                return InterpreterResult(ResultKind.FUNC, native(node.args))
            raise InterpreterError(f"Function not found: {node.function_name}")

        if isinstance(node, ReturnNode):
            return InterpreterResult(ResultKind.RETURN, node.value)

        raise InterpreterError(f"Unknown node type {type(node).__name__}")