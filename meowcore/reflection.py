"""Runtime reflection of component properties for editing in tools."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from meowcore.registry import Registry


class PropertyType(enum.Enum):
    NOT_DEFINED = 0
    PRIMITIVE = 1
    ARRAY = 2
    POINTER = 3
    ENUM = 4
    CLASS_OR_STRUCT = 5


_PRIMITIVES = (bool, int, float, complex)
_ARRAYS = (list, tuple, bytes, bytearray)


def property_type_of(value_type: Any) -> PropertyType:
    """Classify a value type the way the property editor groups it."""
    if not isinstance(value_type, type):
        return PropertyType.NOT_DEFINED
    if issubclass(value_type, enum.Enum):
        return PropertyType.NOT_DEFINED
    if issubclass(value_type, _PRIMITIVES):
        return PropertyType.PRIMITIVE
    if issubclass(value_type, _ARRAYS):
        return PropertyType.ARRAY
    return PropertyType.CLASS_OR_STRUCT


@dataclass(frozen=True)
class ReflectionProperty:
    """A named attribute of a class, with its value type."""

    name: str
    property_type: PropertyType
    value_type: type
    type_name: str

    def get(self, obj: Any) -> Any:
        return getattr(obj, self.name)

    def set(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)


@dataclass
class ReflectionPropertyChange:
    """An edit of one property of a component on one entity.

    ``class_properties`` lists the nested properties leading to the edited
    one, innermost first.
    """

    property_name: str
    data: Any
    entity_id: int | None = None
    component_type: Any = None
    class_properties: list[ReflectionProperty] = field(default_factory=list)


class EnttReflection:
    """Maps component identifiers to names and class names to properties."""

    def __init__(self) -> None:
        self._components: dict[Any, str] = {}
        self._properties: dict[str, list[ReflectionProperty]] = {}

    def has_component(self, component_id: Any) -> bool:
        return component_id in self._components

    def has_property(self, class_name: str) -> bool:
        return class_name in self._properties

    def get_component_name(self, component_id: Any) -> str:
        return self._components.get(component_id, "")

    def get_properties(self, class_name: str) -> list[ReflectionProperty]:
        return list(self._properties.get(class_name, ()))

    def register_component(self, component_id: Any, name: str) -> None:
        self._components.setdefault(component_id, name)

    def register_property(self, class_name: str, prop: ReflectionProperty) -> None:
        self._properties.setdefault(class_name, []).append(prop)

    def reflect(self, value_type: Any) -> None:
        """Let a class register its own properties through its ``reflect`` hook."""
        if property_type_of(value_type) is not PropertyType.CLASS_OR_STRUCT:
            return
        hook = getattr(value_type, "reflect", None)
        if callable(hook):
            hook()

    def apply_property_change(
        self, change: ReflectionPropertyChange, registry: Registry
    ) -> None:
        """Write ``change.data`` into the matching component held by ``registry``."""
        obj = registry.storage(change.component_type)[change.entity_id]
        if not change.class_properties:
            component_name = self.get_component_name(change.component_type)
            self.apply_property_change_data(component_name, change, obj)
            return
        for prop in reversed(change.class_properties):
            obj = prop.get(obj)
        self.apply_property_change_data(
            change.class_properties[0].type_name, change, obj
        )

    def apply_property_change_data(
        self, class_name: str, change: ReflectionPropertyChange, obj: Any
    ) -> None:
        for prop in self.get_properties(class_name):
            if prop.name == change.property_name:
                prop.set(obj, change.data)


REFLECTION = EnttReflection()


def make_property(class_name: str, name: str, value_type: type) -> ReflectionProperty:
    """Register property ``name`` of ``class_name`` on the shared reflection."""
    prop = ReflectionProperty(
        name=name,
        property_type=property_type_of(value_type),
        value_type=value_type,
        type_name=getattr(value_type, "__name__", str(value_type)),
    )
    REFLECTION.register_property(class_name, prop)
    REFLECTION.reflect(value_type)
    return prop