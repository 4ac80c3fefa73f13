"""JSON wire format for type expressions and rules.

Types use an externally tagged encoding::

    "Bool"  "Int"  {"Var": 3}  {"Function": [left, right]}  {"Tuple": [left, right]}

and rules are ``{"var": 0, "rhs": <type>}``. Input is validated with pydantic
before it is turned into engine values.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from typeunify.core.rules import RuleExpr, RuleSet
from typeunify.core.types import BOOL, INT, Bool, Function, Int, Tuple, TypeExpr, Var


class CodecError(ValueError):
    """Input is not a valid encoded type or rule."""


class FunctionModel(BaseModel):
    """Wire form of `Function`."""

    function: tuple[TypeModel, TypeModel] = Field(alias="Function")

    model_config = ConfigDict(extra="forbid")


class TupleModel(BaseModel):
    """Wire form of `Tuple`."""

    pair: tuple[TypeModel, TypeModel] = Field(alias="Tuple")

    model_config = ConfigDict(extra="forbid")


class VarModel(BaseModel):
    """Wire form of `Var`."""

    id: int = Field(alias="Var", ge=0, strict=True)

    model_config = ConfigDict(extra="forbid")


TypeModel = Union[Literal["Bool", "Int"], FunctionModel, TupleModel, VarModel]

FunctionModel.model_rebuild()
TupleModel.model_rebuild()


class RuleModel(BaseModel):
    """Wire form of `RuleExpr`."""

    var: int = Field(ge=0, strict=True)
    rhs: TypeModel

    model_config = ConfigDict(extra="forbid")


type_adapter: TypeAdapter[TypeModel] = TypeAdapter(TypeModel)
rules_adapter: TypeAdapter[list[RuleModel]] = TypeAdapter(list[RuleModel])


def _to_type(model: TypeModel) -> TypeExpr:
    match model:
        case "Bool":
            return BOOL
        case "Int":
            return INT
        case VarModel():
            return Var(model.id)
        case FunctionModel():
            return Function(_to_type(model.function[0]), _to_type(model.function[1]))
        case TupleModel():
            return Tuple(_to_type(model.pair[0]), _to_type(model.pair[1]))
        case _:
            raise CodecError(f"Unknown wire type: {model!r}")


def _to_rule(model: RuleModel) -> RuleExpr:
    return RuleExpr(model.var, _to_type(model.rhs))


def type_to_json(expr: TypeExpr) -> Any:
    """Encode a type expression as JSON-compatible data."""
    match expr:
        case Function(left, right):
            return {"Function": [type_to_json(left), type_to_json(right)]}
        case Tuple(left, right):
            return {"Tuple": [type_to_json(left), type_to_json(right)]}
        case Var(x):
            return {"Var": x}
        case Bool():
            return "Bool"
        case Int():
            return "Int"
        case _:
            raise TypeError(f"Unknown type: {expr!r}")


def type_from_json(data: Any) -> TypeExpr:
    """Decode JSON-compatible data into a type expression.

    Raises:
        CodecError: If the data is not a valid encoded type
    """
    try:
        return _to_type(type_adapter.validate_python(data))
    except ValidationError as e:
        raise CodecError(f"Invalid type expression: {e}") from e


def rule_to_json(r: RuleExpr) -> dict[str, Any]:
    return {"var": r.var, "rhs": type_to_json(r.rhs)}


def rule_from_json(data: Any) -> RuleExpr:
    try:
        return _to_rule(RuleModel.model_validate(data))
    except ValidationError as e:
        raise CodecError(f"Invalid rule: {e}") from e


def dumps_type(expr: TypeExpr) -> str:
    return json.dumps(type_to_json(expr))


def loads_type(text: str | bytes) -> TypeExpr:
    """Parse a JSON document holding one type expression."""
    try:
        return _to_type(type_adapter.validate_json(text))
    except ValidationError as e:
        raise CodecError(f"Invalid type expression: {e}") from e


def dumps_rules(rules: Iterable[RuleExpr]) -> str:
    return json.dumps([rule_to_json(r) for r in rules])


def loads_rules(text: str | bytes) -> RuleSet:
    """Parse a JSON array of rules, keeping their order."""
    try:
        return RuleSet(_to_rule(m) for m in rules_adapter.validate_json(text))
    except ValidationError as e:
        raise CodecError(f"Invalid rule list: {e}") from e
