from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict, Union

JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


class JsonKind(Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class DecodedResponse(TypedDict):
    kind: JsonKind
    value: JsonValue
    status_code: int
    url: Optional[str]


def kind_of(value: Any) -> JsonKind:
    """
    Tag a decoded JSON value with its shape.
    bool is tested before int since bool is an int subclass.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def build_decoded_response(
    *,
    value: JsonValue,
    status_code: int,
    url: Optional[str] = None,
) -> DecodedResponse:
    return {
        "kind": kind_of(value),
        "value": value,
        "status_code": status_code,
        "url": url or None,
    }
