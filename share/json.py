# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

import base64
from typing import Any, AnyStr

import orjson

# Keys are sorted at every level so that identical payloads always render to identical bytes
_DOCUMENT_OPTIONS = orjson.OPT_SORT_KEYS | orjson.OPT_NON_STR_KEYS | orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC

# Characters escaped inside strings of a document, as other event-logging encoders do.
# None of them can appear outside a string in encoded JSON.
_DOCUMENT_ESCAPES: list[tuple[bytes, bytes]] = [
    (b"&", b"\\u0026"),
    (b"<", b"\\u003c"),
    (b">", b"\\u003e"),
    ("\u2028".encode("utf-8"), b"\\u2028"),
    ("\u2029".encode("utf-8"), b"\\u2029"),
]

_INT_MIN = -(2**63)
_INT_MAX = 2**64 - 1


def _default(json_object: Any) -> Any:
    if isinstance(json_object, (bytes, bytearray, memoryview)):
        return base64.b64encode(json_object).decode("ascii")

    raise TypeError(f"Type is not JSON serializable: {type(json_object).__name__}")


def _widen_integers(json_object: Any) -> Any:
    """
    Integers orjson cannot encode (beyond 64 bits) become floats.
    Only dicts, lists and tuples are walked
    """
    if isinstance(json_object, bool):
        return json_object

    if isinstance(json_object, int):
        if _INT_MIN <= json_object <= _INT_MAX:
            return json_object

        return float(json_object)

    if isinstance(json_object, dict):
        return {key: _widen_integers(value) for key, value in json_object.items()}

    if isinstance(json_object, (list, tuple)):
        return [_widen_integers(value) for value in json_object]

    return json_object


def json_dumper(json_object: Any) -> str:
    if isinstance(json_object, bytes):
        json_object = json_object.decode("utf-8")

    return orjson.dumps(json_object).decode("utf-8")


def json_parser(payload: AnyStr) -> Any:
    return orjson.loads(payload)


def json_normaliser(json_object: Any) -> Any:
    """
    Re-marshals a value to plain JSON types (dict, list, str, int, float, bool, None).
    Custom types are rendered the way they would be in the final document,
    integers out of the 64-bit range are widened to floats.
    Raises OverflowError for integers beyond the float range
    """

    return orjson.loads(orjson.dumps(_widen_integers(json_object), default=_default, option=_DOCUMENT_OPTIONS))


def json_document(json_object: Any) -> bytes:
    """
    Canonical compact encoding with sorted keys and a trailing newline.
    `&`, `<`, `>`, U+2028 and U+2029 are written as `\\u` escapes
    """

    encoded = orjson.dumps(json_object, default=_default, option=_DOCUMENT_OPTIONS | orjson.OPT_APPEND_NEWLINE)
    for character, escaped in _DOCUMENT_ESCAPES:
        encoded = encoded.replace(character, escaped)

    return encoded
