from typing import Any, Union

from graphql import Undefined, UndefinedType


def is_not_null_or_undefined(value: Union[Any, None, UndefinedType]) -> bool:
    return value is not None and value is not Undefined


def is_boolean_or_null(value: Any) -> bool:
    return value is None or isinstance(value, bool)
