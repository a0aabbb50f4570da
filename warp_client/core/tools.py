from __future__ import annotations
import inspect
import json
from dataclasses import dataclass, asdict
from typing import Any, Callable, Literal, Union, get_origin, get_args, get_type_hints
from jsonschema import validate

NoneType = type(None)

@dataclass(frozen=True)
class ToolMeta:
    name: str
    docs: str
    def __str__(self):
        return json.dumps(asdict(self))

def toolmethod(*, name: str):
    """Decorator to mark an *instance method* as a tool."""
    def deco(fn: Callable[..., str]) -> Callable[..., str]:
        if not inspect.isfunction(fn):
            raise TypeError("@toolmethod must decorate a normal instance method (def ...)")
        setattr(fn, "__toolmeta__", ToolMeta(name=name, docs=fn.__doc__))
        return fn
    return deco

class Tool:
    def __init__(self, meta: ToolMeta, binded_method):
        self.__name__ = meta.name
        self.__doc__ = meta.docs
        self.__signature__ = inspect.signature(binded_method)

        self.meta = meta
        self.binded_method = binded_method
        self._parameters = self._build_parameters()

    @property
    def arg_names(self) -> list[str]:
        return list(self._parameters["properties"].keys())

    @property
    def parameters(self) -> dict:
        return self._parameters

    def __call__(self, **kwargs) -> str:
        validate(instance=kwargs, schema=self._parameters)
        return self.binded_method(**kwargs)

    def __type_to_schema(self, py_type: Any) -> dict:
        """Convert Python typing annotation to JSON Schema dict."""
        if py_type is inspect.Parameter.empty or py_type is Any:
            return {"type": "string"}

        origin = get_origin(py_type)
        args = get_args(py_type)

        if origin is Union:
            non_none = [a for a in args if a is not NoneType]
            if len(non_none) != len(args) and len(non_none) == 1:
                return {"anyOf": [self.__type_to_schema(non_none[0]), {"type": "null"}]}
            return {"anyOf": [self.__type_to_schema(a) for a in args]}

        if origin is Literal:
            return {"enum": list(args)}

        if origin is list:
            item_schema = self.__type_to_schema(args[0]) if args else {"type": "string"}
            return {"type": "array", "items": item_schema}

        basic_map = {
            str: {"type": "string"},
            int: {"type": "integer"},
            float: {"type": "number"},
            bool: {"type": "boolean"},
            NoneType: {"type": "null"},
        }
        return dict(basic_map.get(py_type, {"type": "string"}))

    def _build_parameters(self) -> dict:
        # annotations are strings under `from __future__ import annotations`
        hints = get_type_hints(self.binded_method)
        properties = {}
        required = []

        for name, param in self.__signature__.parameters.items():
            if param.kind in (
                inspect.Parameter.VAR_POSITIONAL,
                inspect.Parameter.VAR_KEYWORD
            ):
                continue

            prop_schema = self.__type_to_schema(hints.get(name, inspect.Parameter.empty))
            if param.default is not inspect.Parameter.empty:
                prop_schema["default"] = param.default
            else:
                required.append(name)
            properties[name] = prop_schema

        return {
            "type": "object",
            "properties": properties,
            "required": required,
            "additionalProperties": False,
        }

    def schema(self) -> str:
        return json.dumps({
            "type": "function",
            "function": {
                "name": self.meta.name,
                "description": self.meta.docs or "",
                "parameters": self._parameters,
            }
        }, indent=2)


class ToolProvider:
    def get_tools(self) -> list[Tool]:
        tools: list[Tool] = []
        class_name = self.__class__.__name__

        # Only plain functions defined on the class => instance methods when bound.
        for method_name, func in inspect.getmembers(self.__class__, predicate=inspect.isfunction):
            meta: ToolMeta | None = getattr(func, "__toolmeta__", None)
            if meta is None:
                continue

            bound_method = getattr(self, method_name)  # bound => `self` is not in the tool signature
            prefixed_meta = ToolMeta(
                name=f"{class_name}.{meta.name}",
                docs=meta.docs
            )
            tools.append(Tool(meta=prefixed_meta, binded_method=bound_method))

        return tools

def throw_if_not_toolprovider(obj):
    if not isinstance(obj, ToolProvider):
        raise RuntimeError(f"Object of class {obj.__class__.__name__} is not a ToolProvider!")
