"""
Command unit loading: directory scanning, dynamic import and registration.

A command unit is a module or package placed in a command directory that exposes
a ``register(registry)`` function. Units are imported in name order and each one
registers zero or more commands on the registry it is given.
"""

import hashlib
import importlib
import importlib.util
import os
import pkgutil
import sys
from pathlib import Path
from types import ModuleType
from typing import Iterable, List

from loguru import logger

from pcli.core.cli import CommandRegistry, is_command_module
from pcli.core.exceptions import MalformedCommandModuleError

BASE_COMMANDS_PATH = os.path.abspath(os.path.join(__file__, "..", "..", "base_commands"))
BASE_COMMANDS_PACKAGE = "pcli.base_commands"
UNIT_MODULE_PREFIX = "_pcli_unit_"


def iter_command_units(path: str | Path) -> List[str]:
    """
    Return the names of the importable units found in a command directory.

    Names are returned in sorted order; private names (leading underscore) are
    skipped. A missing directory yields an empty list.
    """
    base_path = Path(path).resolve()

    if not base_path.is_dir():
        logger.warning(f"Commands directory not found in: {base_path}")
        return []

    return sorted(
        module_info.name
        for module_info in pkgutil.iter_modules([str(base_path)])
        if not module_info.name.startswith("_")
    )


def unit_module_name(path: str | Path, name: str) -> str:
    """Module name a unit is imported under, unique per directory."""
    digest = hashlib.sha1(str(Path(path).resolve()).encode("utf-8")).hexdigest()[:12]
    return f"{UNIT_MODULE_PREFIX}{digest}_{name}"


def import_command_unit(path: str | Path, name: str) -> ModuleType:
    """
    Dynamically import a command unit from its file location.

    Each unit is imported under a name derived from its directory, so units with
    the same file name in different directories, or named like an installed
    module, stay distinct. The bundled directory is imported as its package.
    """
    base_path = Path(path).resolve()

    if base_path == Path(BASE_COMMANDS_PATH).resolve():
        return importlib.import_module(f"{BASE_COMMANDS_PACKAGE}.{name}")

    module_name = unit_module_name(base_path, name)
    if module_name in sys.modules:
        return sys.modules[module_name]

    importer = pkgutil.get_importer(str(base_path))
    found = importer.find_spec(name) if importer is not None else None
    if found is None or found.origin is None:
        raise ImportError(f"Error loading command unit '{name}': not found in {base_path}")

    spec = importlib.util.spec_from_file_location(
        module_name,
        found.origin,
        submodule_search_locations=found.submodule_search_locations,
    )
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise ImportError(f"Error loading command unit '{name}': {e}") from e

    return module


def load_command_unit(registry: CommandRegistry, path: str | Path, name: str) -> ModuleType:
    """
    Import a command unit and let it register its commands.

    Raises:
        ImportError: If the unit cannot be imported.
        MalformedCommandModuleError: If the unit has no ``register`` function.
    """
    module = import_command_unit(path, name)

    if not is_command_module(module):
        raise MalformedCommandModuleError(name, Path(path) / name)

    before = len(registry)
    module.register(registry)
    logger.debug(f"    • {name}: {len(registry) - before} command(s)")
    return module


def load_directory(registry: CommandRegistry, path: str | Path) -> List[ModuleType]:
    """
    Load every command unit found in a directory, in name order.

    Loading stops at the first unit that fails to import or register.
    """
    logger.info(f"Loading commands from: {path}")
    modules = [
        load_command_unit(registry, path, name) for name in iter_command_units(path)
    ]
    logger.info(f"  → Loaded {len(modules)} command units")
    return modules


def create_registry(paths: Iterable[str | Path]) -> CommandRegistry:
    """
    Build a registry populated from the given command directories.

    Directories are loaded in order, so a later directory can take over keywords
    registered by an earlier one.
    """
    registry: CommandRegistry = CommandRegistry()

    for path in paths:
        load_directory(registry, path)

    return registry
