"""
Request parameter binding

``RecordParamHelper`` turns URL query parameters into a partial update. For
every recognised parameter it parses the raw string, stores the parsed value
on a target object and adds a matching SET clause to an
``UpdateExpressionBuilder``::

    helper = RecordParamHelper(parse_qs(query_string))
    helper.set_string_from_param(profile, "display_name")
    helper.set_int_from_param(profile, "age")
    if helper.changed:
        writer.update_with_builder(helper.builder)

Values that fail to parse are ignored: the target keeps its old value and no
clause is added.
"""

import logging
import math
import re
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from .expressions import UpdateExpressionBuilder

logger = logging.getLogger(__name__)

ParamValues = Mapping[str, Union[str, Sequence[str]]]

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1

_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')

_TRUE_VALUES = frozenset(['1', 't', 'T', 'TRUE', 'true', 'True'])
_FALSE_VALUES = frozenset(['0', 'f', 'F', 'FALSE', 'false', 'False'])


def parse_int(value: str, minimum: int = INT64_MIN, maximum: int = INT64_MAX) -> int:
    """Parse a base-10 integer within [minimum, maximum].

    Raises:
        ValueError: Not an integer or out of range
    """
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    parsed = int(value)
    if parsed < minimum or parsed > maximum:
        raise ValueError(f"integer out of range: {value!r}")
    return parsed


def parse_float(value: str) -> float:
    """Parse a finite decimal float.

    Raises:
        ValueError: Not a decimal number, or not finite
    """
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError(f"invalid float: {value!r}")
    parsed = float(value)
    if not math.isfinite(parsed):
        raise ValueError(f"float out of range: {value!r}")
    return parsed


def parse_bool(value: str) -> bool:
    """Parse the boolean spellings ``1 t T TRUE true True`` and ``0 f F FALSE false False``.

    Raises:
        ValueError: Any other spelling
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


class RecordParamHelper:
    """Binds request parameters to fields and to an update expression.

    Attributes:
        params: Parameter mapping; values may be strings or lists of strings
            (``urllib.parse.parse_qs`` output). Lists contribute their first value.
        builder: Accumulated SET clauses
        changed: True once at least one clause was added
    """

    def __init__(self, params: Optional[ParamValues] = None, builder: Optional[UpdateExpressionBuilder] = None):
        self.params = params
        self.builder = builder if builder is not None else UpdateExpressionBuilder()
        self.changed = False

    def _first_value(self, key: str) -> str:
        value = self.params[key]
        if isinstance(value, str):
            return value
        return value[0] if value else ""

    def _lookup(self, target: Any, field: str, key: Optional[str]) -> Optional[str]:
        key = key or field
        if target is None or not field or self.params is None:
            return None
        if key not in self.params:
            return None
        return self._first_value(key)

    def add_to_builder(self, key: str, value: Any) -> None:
        """Add ``SET key = value`` and mark the helper as changed."""
        self.builder.set(key, value)
        self.changed = True

    def _bind(self, target: Any, field: str, key: Optional[str], parse: Callable[[str], Any]) -> None:
        raw = self._lookup(target, field, key)
        if raw is None:
            return
        try:
            parsed = parse(raw)
        except ValueError:
            logger.debug(f"Ignoring malformed value for parameter '{key or field}': {raw!r}")
            return
        setattr(target, field, parsed)
        self.add_to_builder(key or field, parsed)

    def set_string_from_param(self, target: Any, field: str, key: Optional[str] = None) -> None:
        """Copy parameter ``key`` (default: ``field``) verbatim into ``target.field``."""
        self._bind(target, field, key, lambda raw: raw)

    def set_float_from_param(self, target: Any, field: str, key: Optional[str] = None) -> None:
        self._bind(target, field, key, parse_float)

    def set_int_from_param(self, target: Any, field: str, key: Optional[str] = None) -> None:
        """Bind a 32-bit integer parameter.

        An empty parameter value sets the attribute to ``""`` in the update
        expression and leaves ``target.field`` untouched.
        """
        raw = self._lookup(target, field, key)
        if raw == "":
            self.add_to_builder(key or field, raw)
            return
        self._bind(target, field, key, lambda value: parse_int(value, INT32_MIN, INT32_MAX))

    def set_int64_from_param(self, target: Any, field: str, key: Optional[str] = None) -> None:
        self._bind(target, field, key, parse_int)

    def set_bool_from_param(self, target: Any, field: str, key: Optional[str] = None) -> None:
        self._bind(target, field, key, parse_bool)

    def apply(self, writer, config=None):
        """Run the accumulated update against ``writer``'s item.

        Returns:
            Raw UpdateItem response, or None if no parameter changed anything
        """
        if not self.changed:
            return None
        return writer.update_with_builder(self.builder, config)
