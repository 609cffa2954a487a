import traceback
from typing import Any, Dict, Optional, Type

from sudoku_engine.utils.log import get_logger


class Registry(object):
    """A name -> class registry with lazily imported defaults."""

    def __init__(self, name: str, default_mapping: Optional[Dict[str, str]] = None):
        """
        Args:
            name (`str`): The name of the registry.
            default_mapping (`dict`): Default mapping from module names to dotted
                class paths, imported on first lookup.
        """
        self._name = name
        self._modules = {}
        self._default_mapping = dict(default_mapping or {})
        self.logger = get_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> dict:
        """Modules registered or imported so far."""
        return self._modules

    def names(self):
        """Every name the registry can resolve."""
        return sorted(set(self._modules) | set(self._default_mapping))

    def get(self, module_key: str) -> Any:
        """
        Get the class registered as `module_key`.

        Names missing from the registry are looked up in the default mapping,
        then treated as a dotted path (`package.module.ClassName`).

        Args:
            module_key (`str`): registered name or dotted class path

        Returns:
            `Any`: the class

        Raises:
            ValueError: `module_key` is neither registered nor a dotted path.
            ImportError: the class could not be imported.
        """
        module = self._modules.get(module_key, None)
        if module is not None:
            return module

        if module_key in self._default_mapping:
            module_path = self._default_mapping[module_key]
        elif isinstance(module_key, str) and "." in module_key:
            module_path = module_key
        else:
            raise ValueError(f"Invalid {self._name} key: {module_key}")

        module_path, class_name = module_path.rsplit(".", 1)
        try:
            module = self._dynamic_import(module_path, class_name)
        except Exception:
            self.logger.error(
                f"Failed to dynamically import {class_name} from {module_path}:\n"
                + traceback.format_exc()
            )
            raise ImportError(f"Cannot dynamically import {class_name} from {module_path}")
        self._register_module(module_name=module_key, module_cls=module, force=True)
        return module

    def _register_module(self, module_name=None, module_cls=None, force=False):
        if module_name is None:
            module_name = module_cls.__name__

        if module_name in self._modules and not force:
            self.logger.warning(
                f"{module_name} is already registered in {self._name}, "
                f"if you want to override it, please set force=True."
            )
            raise KeyError(f"{module_name} is already registered in {self._name}")

        self._modules[module_name] = module_cls
        module_cls._name = module_name

    def register_module(self, module_name: str, module_cls: Type = None, force=False):
        """
        Register a class under `module_name`, directly or as a decorator.

        Args:
            module_name (`str`): The name to register under.
            module_cls (`Type`): The class. If None, a decorator is returned.
            force (`bool`): Whether to override an existing class with
                    the same name. Default: False.

        Example:

            .. code-block:: python

                @HINT_STRATEGIES.register_module("x_wing")
                class XWing(HintStrategy):
                    ...
        """
        if not (module_name is None or isinstance(module_name, str)):
            raise TypeError(f"module_name must be either of None, str, got {type(module_name)}")
        if module_cls is not None:
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        def _register(module_cls):
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        return _register

    def _dynamic_import(self, module_path: str, class_name: str) -> Type:
        import importlib

        module = importlib.import_module(module_path)
        return getattr(module, class_name)
