"""Parsing of command line arguments against a list of definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

KEY_LIMIT = 8
RETURN_LIMIT = 8
RETURN_VALUES_LIMIT = 8

_SEPARATOR = "-" * 63


@dataclass(frozen=True)
class CmdLineArgDef:
    """Definition of one argument: its id and the keys that select it."""

    id: str
    description: str = ""
    expects_value: bool = False
    keys: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(self.keys))
        if len(self.keys) > KEY_LIMIT:
            raise ValueError(f"argument '{self.id}' has more than {KEY_LIMIT} keys")


@dataclass
class CmdLineArgKeyResult:
    """Values collected for one argument definition."""

    id: str
    values: list[str] = field(default_factory=list)


def parse(args: Sequence[str], arg_defs: Iterable[CmdLineArgDef]) -> list[CmdLineArgKeyResult]:
    """Match ``args`` against ``arg_defs`` and return results in order of first use.

    A key whose definition expects a value takes the argument that follows
    it; if the key is the last argument, no value is recorded. A key that
    appears in several definitions belongs to the last one.
    """
    key_to_def: dict[str, CmdLineArgDef] = {}
    for arg_def in arg_defs:
        for key in arg_def.keys:
            key_to_def[key] = arg_def

    results: dict[str, CmdLineArgKeyResult] = {}
    for index, arg in enumerate(args):
        arg_def = key_to_def.get(arg)
        if arg_def is None:
            continue
        result = results.get(arg_def.id)
        if result is None:
            if len(results) >= RETURN_LIMIT:
                raise OverflowError(f"more than {RETURN_LIMIT} distinct arguments given")
            result = results[arg_def.id] = CmdLineArgKeyResult(arg_def.id)
        if arg_def.expects_value and index + 1 < len(args):
            if len(result.values) >= RETURN_VALUES_LIMIT:
                raise OverflowError(
                    f"argument '{arg_def.id}' given more than {RETURN_VALUES_LIMIT} values"
                )
            result.values.append(args[index + 1])
    return list(results.values())


def format_results(results: Iterable[CmdLineArgKeyResult]) -> str:
    """Render parse results as a human readable report."""
    lines: list[str] = []
    for result in results:
        lines.append(_SEPARATOR)
        lines.append(f"Key Id: '{result.id}'")
        lines.extend(f"Value: '{value}'" for value in result.values)
        lines.append(_SEPARATOR)
    return "".join(f"{line}\n" for line in lines)


def print_results(results: Iterable[CmdLineArgKeyResult]) -> None:
    """Print the report produced by :func:`format_results`."""
    print(format_results(results), end="")