# core/components/plugin_loader.py
"""
Plugin loader for acsweep components.
Discovers built-in core.components modules and third-party plugins via entry points.
Supports dynamic registration for manual plugins.
"""
from typing import Dict, Type, Mapping, Sequence
from importlib.metadata import entry_points

from core.exceptions import ComponentError
from core.components.base import Component

ENTRY_POINT_GROUP = "acsweep.components"


class ComponentFactory:
    """
    Factory for creating component instances by type name.
    Auto-registers built-in core.components modules and discovers third-party plugins.
    """
    _registry: Dict[str, Type[Component]] = {}
    _loaded: bool = False

    @classmethod
    def load_plugins(cls) -> None:
        """
        Import every module under core.components (so built-ins register
        themselves), then load classes published under the
        'acsweep.components' entry-point group.
        """
        if cls._loaded:
            return
        cls._loaded = True

        import pkgutil, importlib
        import core.components as _builtin_pkg
        for _, module_name, _ in pkgutil.iter_modules(_builtin_pkg.__path__):
            if module_name in ("base", "plugin_loader"):
                continue
            importlib.import_module(f"core.components.{module_name}")

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            comp_cls = ep.load()
            cls.register(comp_cls)

    @classmethod
    def register(cls, comp_cls: Type[Component]) -> Type[Component]:
        """
        Manually register a component class.
        The class must define a unique `type_name` attribute.
        """
        if not isinstance(comp_cls, type) or not issubclass(comp_cls, Component):
            raise ComponentError(f"Cannot register non-Component class: {comp_cls}")
        type_name = getattr(comp_cls, 'type_name', None)
        if not isinstance(type_name, str) or type_name == "undefined":
            raise ComponentError(f"Component class {comp_cls} lacks a valid `type_name` attribute.")
        cls._registry[type_name.lower()] = comp_cls
        return comp_cls

    @classmethod
    def get(cls, type_name: str) -> Type[Component]:
        if not isinstance(type_name, str):
            raise ComponentError("Component type name must be a string.")
        cls.load_plugins()
        comp_cls = cls._registry.get(type_name.lower())
        if comp_cls is None:
            raise ComponentError(f"Unknown component type: '{type_name}'")
        return comp_cls

    @classmethod
    def types(cls) -> Sequence[str]:
        cls.load_plugins()
        return sorted(cls._registry)

    @classmethod
    def create(cls, type_name: str, name: str, nodes: Sequence[int],
               params: Mapping[str, float]) -> Component:
        """
        Instantiate a component by its type name (case-insensitive) from
        resolved numeric parameters.
        Raises ComponentError for unknown types or instantiation errors.
        """
        comp_cls = cls.get(type_name)
        try:
            return comp_cls.from_params(name, nodes, params)
        except ComponentError:
            raise
        except (TypeError, ValueError) as e:
            raise ComponentError(f"Error instantiating component '{name}' of type '{type_name}': {e}") from e
