"""Function registry for the mathpad evaluator.

Functions are callable from expressions (e.g., `sqrt(16)`, `sine(pi/2)`).
Each function is registered once with metadata for documentation and a
list of alternate spellings that resolve to its canonical name.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping


class FunctionCategory(Enum):
    """Categories for organizing functions in documentation."""

    TRIGONOMETRIC = "trigonometric"
    HYPERBOLIC = "hyperbolic"
    EXPONENTIAL = "exponential"
    ROUNDING = "rounding"
    ARITHMETIC = "arithmetic"


@dataclass(frozen=True)
class FunctionDefinition:
    """Complete definition of an expression function.

    Attributes:
        name: Canonical (lowercase) function name as used in expressions
        description: Human-readable description
        category: Category for documentation organization
        implementation: Unary real-valued callable
        aliases: Alternate spellings resolving to this function
        examples: Example expressions using this function
    """

    name: str
    description: str
    category: FunctionCategory
    implementation: Callable[[float], float]
    aliases: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Export for API documentation endpoint."""
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "aliases": list(self.aliases),
            "examples": list(self.examples),
        }


class FunctionRegistry:
    """Read-only registry of expression functions.

    Built once from a sequence of definitions; lookups never mutate it.

    Example:
        registry = FunctionRegistry(BUILTIN_FUNCTIONS)
        registry.resolve("squareroot")   # "sqrt"
        registry.get("sqrt").implementation(16.0)  # 4.0
    """

    def __init__(self, definitions: Iterable[FunctionDefinition]):
        functions: dict[str, FunctionDefinition] = {}
        aliases: dict[str, str] = {}
        for func_def in definitions:
            if func_def.name in functions:
                raise ValueError(f"Duplicate function: {func_def.name}")
            functions[func_def.name] = func_def
            for alias in func_def.aliases:
                aliases[alias] = func_def.name

        self._functions: Mapping[str, FunctionDefinition] = MappingProxyType(functions)
        self._aliases: Mapping[str, str] = MappingProxyType(aliases)

    @property
    def aliases(self) -> Mapping[str, str]:
        """Alias -> canonical name mapping."""
        return self._aliases

    def resolve(self, identifier: str) -> str | None:
        """Resolve an identifier to a canonical function name.

        Matching is case-insensitive. Aliases are consulted first, then the
        canonical names themselves.

        Returns:
            The canonical name, or None if the identifier is not a function
        """
        lower = identifier.lower()
        canonical = self._aliases.get(lower, lower)
        if canonical in self._functions:
            return canonical
        return None

    def get(self, name: str) -> FunctionDefinition:
        """Get a function definition by canonical name.

        Raises:
            ValueError: If function is not registered
        """
        if name not in self._functions:
            raise ValueError(f"Unknown function: {name}")
        return self._functions[name]

    def is_registered(self, name: str) -> bool:
        """Check if a canonical name is registered."""
        return name in self._functions

    def list_all(self) -> list[FunctionDefinition]:
        """List all registered functions."""
        return list(self._functions.values())

    def list_by_category(self, category: FunctionCategory) -> list[FunctionDefinition]:
        """List functions in a specific category."""
        return [f for f in self._functions.values() if f.category == category]

    def export_documentation(self) -> dict[str, Any]:
        """Export full registry for documentation or API endpoint.

        Returns:
            Dict with all function definitions organized by category
        """
        by_category: dict[str, list[dict[str, Any]]] = {}
        for func_def in self._functions.values():
            category = func_def.category.value
            if category not in by_category:
                by_category[category] = []
            by_category[category].append(func_def.to_dict())

        return {
            "functions": {name: f.to_dict() for name, f in self._functions.items()},
            "byCategory": by_category,
            "aliases": dict(self._aliases),
        }
