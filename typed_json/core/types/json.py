# typed_json/core/types/json.py

"""JSON type definitions for the plain Python data the parser produces."""

# JSON Type Usage Guide:
# - JSONDict: parser output for a JSON object (string keys)
# - JSONList: parser output for a JSON array
# - JSONType: any parser output, before it is wrapped into a JsonValue tree
# - Keep these for the boundary with the stdlib parser; everything past
#   load time works on JsonValue nodes instead

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
