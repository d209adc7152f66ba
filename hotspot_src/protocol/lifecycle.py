"""Server Lifecycle Management.

Handles process startup before the transports run:
- Logger configuration
- Registry construction from a built-in catalog (startup-fatal on failure)
"""

from pathlib import Path
from typing import Union

from hotspot_src.core.catalog import get_catalog
from hotspot_src.core.registry import WidgetRegistry, load_registry
from hotspot_src.widget_utils.logging_config import configure_root_logger, get_logger

logger = get_logger(__name__)


def setup_process(log_level: Union[int, str] = "INFO") -> None:
    """Configure process-wide logging.

    Args:
        log_level: Root log level.
    """
    configure_root_logger(level=log_level)
    logger.debug("Logging configured")


def build_registry(catalog: str, assets_dir: Path, data_dir: Path) -> WidgetRegistry:
    """Build the registry for a built-in catalog.

    Args:
        catalog: Catalog name ("hotspot" or "post").
        assets_dir: Directory holding the built widget HTML.
        data_dir: Base directory of the canned datasets.

    Returns:
        The complete registry.

    Raises:
        ValueError: Unknown catalog name.
        AssetNotFound: A widget's markup is missing.
        RegistryError: The catalog has duplicate ids or URIs.
    """
    server_name, widget_specs = get_catalog(catalog)
    logger.info(f"Loading catalog '{catalog}' from {assets_dir}")
    return load_registry(widget_specs, assets_dir, data_dir, server_name=server_name)
