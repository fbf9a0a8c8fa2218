"""
Per-command parameter type resolution.

A parameter can appear in several syntax variants, and each variant may
declare its own type string for it (or none). The help engine should show
the same type on every syntax line, so the first declared type seen while
scanning the variants in order is the one used everywhere. Later
declarations never overwrite an earlier one.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from cmdhelp.exceptions import TypeResolutionError
from cmdhelp.schemas import SyntaxItem

logger = logging.getLogger(__name__)


class TypeResolver:
    """Read-only mapping from parameter name to its resolved type."""

    def __init__(self, types: Mapping[str, str], command_name: Optional[str] = None):
        self._types = MappingProxyType(dict(types))
        self.command_name = command_name

    @classmethod
    def from_syntax(
        cls,
        syntax_items: Iterable[SyntaxItem],
        command_name: Optional[str] = None
    ) -> "TypeResolver":
        """
        Build the map in a single insert-if-absent pass.

        Syntax parameters without a declared type do not insert anything;
        they inherit whatever an earlier or later variant declares.

        Args:
            syntax_items: Syntax variants in declared order
            command_name: Used in error messages only

        Returns:
            TypeResolver
        """
        types: Dict[str, str] = {}
        for syntax in syntax_items:
            for syntax_param in syntax.syntax_parameters:
                if syntax_param.parameter_type is None:
                    continue
                if syntax_param.parameter_name not in types:
                    types[syntax_param.parameter_name] = syntax_param.parameter_type
                elif types[syntax_param.parameter_name] != syntax_param.parameter_type:
                    logger.debug(
                        f"{command_name or '?'}: keeping type {types[syntax_param.parameter_name]} "
                        f"for {syntax_param.parameter_name}, ignoring {syntax_param.parameter_type}"
                    )

        return cls(types, command_name)

    @property
    def types(self) -> Mapping[str, str]:
        return self._types

    def resolve(self, parameter_name: str) -> str:
        """
        Return the resolved type of a parameter.

        Raises:
            TypeResolutionError: if no syntax variant declared a type for it
        """
        try:
            return self._types[parameter_name]
        except KeyError:
            raise TypeResolutionError(parameter_name, self.command_name) from None

    def __contains__(self, parameter_name: object) -> bool:
        return parameter_name in self._types

    def __len__(self) -> int:
        return len(self._types)
