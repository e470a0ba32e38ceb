# src/optionkit/plugins/discovery.py
"""Module loading by import path.

The CLI names the module to manage as ``package.module:ClassName``. The
class must subclass BaseModule and carry a non-empty ``name``.
"""

import importlib
import inspect

from optionkit.plugins.base import BaseModule


class ModuleLoadError(Exception):
    """Raised when a module class cannot be loaded from its import path."""

    pass


def load_module_class(import_path: str) -> type[BaseModule]:
    """Import a module class from ``package.module:ClassName``.

    Args:
        import_path: Dotted module path and class name separated by ':'

    Returns:
        The module class (not an instance)

    Raises:
        ModuleLoadError: If the path is malformed, the import fails, or the
            attribute is not a usable module class
    """
    module_path, sep, class_name = import_path.partition(":")
    if not sep or not module_path or not class_name:
        raise ModuleLoadError(
            f"Invalid module path '{import_path}'. Expected 'package.module:ClassName'."
        )

    try:
        python_module = importlib.import_module(module_path)
    except ImportError as e:
        raise ModuleLoadError(f"Cannot import '{module_path}': {e}") from e

    try:
        module_cls = getattr(python_module, class_name)
    except AttributeError:
        raise ModuleLoadError(
            f"'{module_path}' has no attribute '{class_name}'"
        ) from None

    if not inspect.isclass(module_cls) or not issubclass(module_cls, BaseModule):
        raise ModuleLoadError(f"'{import_path}' is not a BaseModule subclass")

    if inspect.isabstract(module_cls):
        raise ModuleLoadError(f"'{import_path}' is abstract")

    # NOTE: getattr at a trust boundary - the class comes from user configuration.
    module_name = getattr(module_cls, "name", None)
    if not module_name:
        raise ModuleLoadError(
            f"Module {module_cls.__name__} must define 'name' attribute. "
            f"Add: name = 'your_module_name' to the class."
        )

    return module_cls


def get_module_description(module_cls: type) -> str:
    """First non-empty docstring line, or a name-based fallback."""
    if module_cls.__doc__:
        for line in module_cls.__doc__.strip().split("\n"):
            cleaned = line.strip()
            if cleaned:
                return cleaned

    name = getattr(module_cls, "name", module_cls.__name__)
    return f"{name} module"
