"""
Loading API definitions from Python source.

Dynamically imports a Python file or package and returns one of its
attributes, e.g. an API definition, a builder or a pydantic model.
"""

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from api_contract_builder.errors import LoaderError

logger = logging.getLogger(__name__)


def load_object(
    source_path: Path,
    attribute: str,
    module_name: Optional[str] = None,
) -> Any:
    """
    Import a module from a file or package directory and get an attribute.

    The directory containing the file or package is put on ``sys.path``
    while importing, so the source can use sibling imports. ``sys.path`` is
    restored afterwards.

    Args:
        source_path: Path to a Python file or package directory.
        attribute: Name of the attribute to return.
        module_name: Optional module name. Derived from the path if omitted.

    Returns:
        The attribute value.

    Raises:
        LoaderError: If the module cannot be imported or lacks the attribute.
    """
    source_path = source_path.resolve()
    original_sys_path = sys.path.copy()

    import_dir = str(source_path.parent)
    if import_dir not in sys.path:
        sys.path.insert(0, import_dir)

    try:
        if source_path.is_file():
            name = module_name or source_path.stem
            spec = importlib.util.spec_from_file_location(name, source_path)
            if spec is None or spec.loader is None:
                raise LoaderError(f"Could not create module spec for {source_path}")

            module = importlib.util.module_from_spec(spec)
            sys.modules[name] = module
            spec.loader.exec_module(module)
        else:
            name = module_name or source_path.name
            importlib.invalidate_caches()
            module = importlib.import_module(name)

        logger.debug("Loaded module %s from %s", name, source_path)

        if not hasattr(module, attribute):
            available = sorted(a for a in dir(module) if not a.startswith("_"))
            raise LoaderError(
                f"Module '{name}' does not have '{attribute}' attribute. "
                f"Available attributes: {', '.join(available)}"
            )
        return getattr(module, attribute)

    except LoaderError:
        raise
    except Exception as e:
        raise LoaderError(f"Failed to load {source_path}: {e}") from e
    finally:
        sys.path = original_sys_path
