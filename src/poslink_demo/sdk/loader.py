"""Vendor POSLink SDK module loader."""

from __future__ import annotations

import importlib
import os
from types import ModuleType

from poslink_demo.exceptions import SdkLoadError
from poslink_demo.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SDK_MODULE = "poslink"
SDK_MODULE_ENV = "POSLINK_SDK_MODULE"

_sdk_instance: ModuleType | None = None


def sdk_module_name(name: str | None = None) -> str:
    """Resolve the SDK module name: argument, then env var, then default."""
    return name or os.environ.get(SDK_MODULE_ENV) or DEFAULT_SDK_MODULE


def load_sdk(name: str | None = None) -> ModuleType:
    """Import the vendor POSLink SDK module.

    Args:
        name: Dotted module name. If None, ``POSLINK_SDK_MODULE`` or
              ``poslink`` is used.

    Returns:
        The imported module (cached after the first successful load).

    Raises:
        SdkLoadError: If the module cannot be imported.
    """
    global _sdk_instance

    if _sdk_instance is not None and name is None:
        return _sdk_instance

    module_name = sdk_module_name(name)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SdkLoadError(
            f"POSLink SDK module {module_name!r} not importable. Install the vendor "
            f"SDK or set {SDK_MODULE_ENV}. ({exc})"
        ) from exc

    logger.info("poslink_sdk_loaded", module=module_name)
    _sdk_instance = module
    return module


def reset_sdk() -> None:
    """Reset the cached SDK module. Used for testing."""
    global _sdk_instance
    _sdk_instance = None
