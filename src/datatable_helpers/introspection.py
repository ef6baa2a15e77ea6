"""Enumerate the public readable properties of a type or object.

Properties come out in declaration order, base classes first:

* pydantic model fields, then pydantic computed fields,
* dataclass fields,
* namedtuple fields,
* class-level annotations of plain classes (``ClassVar`` excluded),
* ``@property`` members that have a getter, and other data descriptors
  defined on the class (``__slots__`` members included).

For an instance, public attributes in its ``__dict__`` follow.

Names starting with an underscore are never reported.
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Callable, Mapping
from operator import attrgetter, itemgetter
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel

DISPLAY_NAME_ATTR = "__display_name__"


@dataclasses.dataclass(frozen=True)
class PropertyDescriptor:
    """A named, publicly readable attribute of a type."""

    name: str
    value_type: Any = None
    display_name: str | None = None
    getter: Callable[[Any], Any] | None = dataclasses.field(
        default=None, repr=False, compare=False,
    )

    @property
    def column_name(self) -> str:
        return self.display_name or self.name

    def get_value(self, obj: Any) -> Any:
        if self.getter is None:
            return getattr(obj, self.name)
        return self.getter(obj)


def display_name(name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Give a property getter a display name, used as its column header.

    Apply below ``@property``::

        @property
        @display_name("Full Name")
        def full_name(self) -> str: ...
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        setattr(func, DISPLAY_NAME_ATTR, name)
        return func

    return decorator


def unwrap_optional(tp: Any) -> Any:
    """Strip ``Annotated`` and reduce ``Optional[X]`` / ``X | None`` to ``X``."""
    if get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    if get_origin(tp) in (Union, types.UnionType):
        args = get_args(tp)
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1 and len(non_none) < len(args):
            return unwrap_optional(non_none[0])
    return tp


def _type_hints(obj: Any) -> dict[str, Any]:
    try:
        return get_type_hints(obj, include_extras=True)
    except (NameError, TypeError):
        # Unresolvable forward references: fall back to the raw annotations
        if not isinstance(obj, type):
            return dict(getattr(obj, "__annotations__", {}))
        hints: dict[str, Any] = {}
        for klass in reversed(obj.__mro__):
            hints.update(klass.__dict__.get("__annotations__", {}))
        return hints


def _is_classvar(hint: Any) -> bool:
    return hint is ClassVar or get_origin(hint) is ClassVar


def _is_pydantic_model(tp: type) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def _is_data_descriptor(member: Any) -> bool:
    kind = type(member)
    return hasattr(kind, "__get__") and (hasattr(kind, "__set__") or hasattr(kind, "__delete__"))


def _is_namedtuple(tp: type) -> bool:
    return isinstance(tp, type) and issubclass(tp, tuple) and hasattr(tp, "_fields")


def _class_descriptors(tp: type) -> dict[str, Any]:
    found: dict[str, Any] = {}
    for klass in reversed(tp.__mro__):
        if klass.__module__ == "builtins" or klass.__module__.split(".")[0] == "pydantic":
            continue
        for name, member in klass.__dict__.items():
            if isinstance(member, property):
                if member.fget is not None:
                    found[name] = member
            elif _is_data_descriptor(member):
                found[name] = member
    return found


def get_properties(tp: type) -> list[PropertyDescriptor]:
    """Return the public readable properties of *tp* in declaration order."""
    props: list[PropertyDescriptor] = []
    seen: set[str] = set()

    def _add(prop: PropertyDescriptor) -> None:
        if prop.name.startswith("_") or prop.name in seen:
            return
        seen.add(prop.name)
        props.append(prop)

    if _is_pydantic_model(tp):
        for name, info in tp.model_fields.items():
            _add(PropertyDescriptor(name, info.annotation, info.title, attrgetter(name)))
        for name, computed in tp.model_computed_fields.items():
            _add(PropertyDescriptor(name, computed.return_type, computed.title, attrgetter(name)))
    elif dataclasses.is_dataclass(tp):
        hints = _type_hints(tp)
        for f in dataclasses.fields(tp):
            _add(PropertyDescriptor(
                f.name,
                hints.get(f.name, f.type),
                f.metadata.get("display_name"),
                attrgetter(f.name),
            ))
    elif _is_namedtuple(tp):
        hints = _type_hints(tp)
        for name in tp._fields:
            _add(PropertyDescriptor(name, hints.get(name), None, attrgetter(name)))
    else:
        for name, hint in _type_hints(tp).items():
            if _is_classvar(hint):
                continue
            _add(PropertyDescriptor(name, hint, None, _getattr_or_none(name)))

    for name, member in _class_descriptors(tp).items():
        if isinstance(member, property):
            _add(PropertyDescriptor(
                name,
                _type_hints(member.fget).get("return"),
                getattr(member.fget, DISPLAY_NAME_ATTR, None),
                attrgetter(name),
            ))
        else:
            _add(PropertyDescriptor(name, None, None, attrgetter(name)))
    return props


def _getattr_or_none(name: str) -> Callable[[Any], Any]:
    # Annotated-only attributes may never have been assigned
    def getter(obj: Any) -> Any:
        return getattr(obj, name, None)

    return getter


def get_instance_properties(obj: Any) -> list[PropertyDescriptor]:
    """Properties of *obj*'s runtime type plus its public instance attributes.

    A mapping exposes its string keys instead.
    """
    if isinstance(obj, Mapping):
        return [
            PropertyDescriptor(key, type(value) if value is not None else None, None, itemgetter(key))
            for key, value in obj.items()
            if isinstance(key, str)
        ]
    props = get_properties(type(obj))
    seen = {p.name for p in props}
    for name, value in (getattr(obj, "__dict__", None) or {}).items():
        if not isinstance(name, str) or name.startswith("_") or name in seen:
            continue
        props.append(PropertyDescriptor(
            name,
            type(value) if value is not None else None,
            None,
            _getattr_or_none(name),
        ))
    return props
