import importlib
import inspect
import pkgutil

from fastapi import APIRouter, FastAPI
from loguru import logger


def discover_routers(package_name: str = "questboard.api") -> list[APIRouter]:
    """
    Collect every ``APIRouter`` defined in the modules of a package.

    Args:
        package_name: The package to scan, subpackages included.

    Returns:
        The routers in module order.
    """
    routers: list[APIRouter] = []

    package = importlib.import_module(package_name)
    package_path = getattr(package, "__path__", None)
    if not package_path:
        logger.warning(f"Cannot scan {package_name} for routers as it's not a package")
        return routers

    for _, module_name, is_pkg in sorted(pkgutil.iter_modules(package_path), key=lambda m: m.name):
        full_module_name = f"{package_name}.{module_name}"
        if is_pkg:
            routers.extend(discover_routers(full_module_name))
            continue

        try:
            module = importlib.import_module(full_module_name)
        except ImportError as e:
            logger.error(f"Error importing module {full_module_name}: {e}")
            continue

        for _, obj in inspect.getmembers(module):
            if isinstance(obj, APIRouter):
                routers.append(obj)
                logger.debug(f"Discovered router in {full_module_name}")

    return routers


def register_routers(app: FastAPI, prefix: str = "/api") -> None:
    """Include every router found in ``questboard.api`` under ``prefix``."""
    for router in discover_routers():
        app.include_router(router, prefix=prefix)
