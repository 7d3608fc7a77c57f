"""JSON and YAML serialization for adapted OpenSCAD ASTs.

Every node becomes a dictionary with a ``_type`` key holding its kind tag
(the class name), an optional ``_position`` key and one key per dataclass
field. Field order follows the dataclass, so dumps read like the source.

Example:
    from openscad_ast import getASTfromString, ast_to_json, ast_from_json

    ast = getASTfromString("cube(10);")
    json_str = ast_to_json(ast)
    ast_restored = ast_from_json(json_str)
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from .nodes import ASTNode, NODE_CLASSES
from .position import Position

_SCALARS = (str, int, float, bool)

# Every field of Position, in declaration order.
_POSITION_FIELDS = tuple(f.name for f in dataclasses.fields(Position))


def _encode(value: Any, include_position: bool) -> Any:
    if value is None or isinstance(value, _SCALARS):
        return value
    if isinstance(value, list):
        return [_encode(item, include_position) for item in value]
    if isinstance(value, ASTNode):
        data: dict[str, Any] = {"_type": value.type}
        if include_position:
            data["_position"] = dataclasses.asdict(value.position)
        for field in dataclasses.fields(value):
            if field.name != "position":
                data[field.name] = _encode(getattr(value, field.name), include_position)
        return data
    raise TypeError(f"Unsupported type for serialization: {type(value)}")


def _decode(value: Any) -> Any:
    if value is None or isinstance(value, _SCALARS):
        return value
    if isinstance(value, list):
        return [_decode(item) for item in value]
    if isinstance(value, dict) and "_type" in value:
        return _decode_node(value)
    raise TypeError(f"Unsupported type for deserialization: {type(value)}")


def _decode_node(data: Any) -> ASTNode:
    if not isinstance(data, dict) or "_type" not in data:
        raise ValueError("Missing '_type' field in node data")
    type_name = data["_type"]
    node_class = NODE_CLASSES.get(type_name)
    if node_class is None:
        raise ValueError(f"Unknown node type: {type_name}")

    raw_position = data.get("_position")
    if raw_position is None:
        position = Position(0, 0, 0, 0)
    else:
        position = Position(*(raw_position[name] for name in _POSITION_FIELDS))

    field_names = {f.name for f in dataclasses.fields(node_class)} - {"position"}
    kwargs = {key: _decode(value) for key, value in data.items() if key in field_names}
    try:
        return node_class(position=position, **kwargs)
    except TypeError as e:
        raise ValueError(f"Malformed {type_name} node: {e}") from e


def ast_to_dict(
    ast: ASTNode | list[ASTNode] | None,
    include_position: bool = True,
) -> dict[str, Any] | list[dict[str, Any]] | None:
    """Convert an AST to a Python dictionary (JSON-serializable).

    Args:
        ast: An AST node, list of AST nodes, or None.
        include_position: If True, include source positions (default: True).
    """
    return _encode(ast, include_position)


def ast_from_dict(data: dict[str, Any] | list[dict[str, Any]] | None) -> ASTNode | list[ASTNode] | None:
    """Rebuild an AST from the output of ``ast_to_dict``.

    Keys that are not fields of the node class are ignored. A missing
    ``_position`` becomes an all-zero position.

    Raises:
        ValueError: If the data contains an unknown node type or is malformed.
    """
    if data is None:
        return None
    if isinstance(data, list):
        return [_decode_node(item) for item in data]
    return _decode_node(data)


def ast_to_json(
    ast: ASTNode | list[ASTNode] | None,
    include_position: bool = True,
    indent: int | None = 2,
) -> str:
    """Serialize an AST to a JSON string; ``indent=None`` gives compact output."""
    return json.dumps(ast_to_dict(ast, include_position=include_position), indent=indent)


def ast_from_json(json_str: str) -> ASTNode | list[ASTNode] | None:
    """Deserialize an AST from a JSON string.

    Raises:
        ValueError: If the JSON contains an unknown node type or is malformed.
        json.JSONDecodeError: If the string is not valid JSON.
    """
    return ast_from_dict(json.loads(json_str))


def _require_yaml():
    try:
        import yaml
    except ImportError:
        raise ImportError(
            "PyYAML is required for YAML serialization. "
            "Install it with: pip install openscad-ast[yaml]"
        )
    return yaml


def ast_to_yaml(
    ast: ASTNode | list[ASTNode] | None,
    include_position: bool = True,
) -> str:
    """Serialize an AST to a YAML string.

    Requires PyYAML to be installed: pip install openscad-ast[yaml]
    """
    yaml = _require_yaml()
    data = ast_to_dict(ast, include_position=include_position)
    return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def ast_from_yaml(yaml_str: str) -> ASTNode | list[ASTNode] | None:
    """Deserialize an AST from a YAML string.

    Requires PyYAML to be installed: pip install openscad-ast[yaml]

    Raises:
        ValueError: If the YAML contains an unknown node type or is malformed.
    """
    yaml = _require_yaml()
    return ast_from_dict(yaml.safe_load(yaml_str))
