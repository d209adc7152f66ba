"""
Widget Registry.

Builds the immutable widget catalog at startup. The build is all-or-nothing:
one unresolvable widget aborts it, so an incomplete catalog is never served.
"""

from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from hotspot_src.core.errors import AssetNotFound, RegistryError
from hotspot_src.core.validation import build_argument_model
from hotspot_src.models.widgets import WidgetDescriptor, WidgetSpec
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)


def resolve_markup(assets_dir: Path, component_name: str) -> str:
    """Read the built HTML for a widget component.

    Looks for `<component>.html` first, then falls back to the
    lexicographically last `<component>-*.html` (hashed build output).

    Args:
        assets_dir: Directory produced by the front-end build.
        component_name: Asset filename family, e.g. "hotspot".

    Returns:
        The markup, guaranteed non-empty.

    Raises:
        AssetNotFound: If the directory is missing, nothing matches, or the
            matched file is empty.
    """
    assets_dir = Path(assets_dir)
    if not assets_dir.is_dir():
        raise AssetNotFound(
            f"Widget assets not found. Expected directory {assets_dir}. "
            "Build the widgets before starting the server."
        )

    direct_path = assets_dir / f"{component_name}.html"
    if direct_path.is_file():
        path: Optional[Path] = direct_path
    else:
        candidates = sorted(
            p.name
            for p in assets_dir.iterdir()
            if p.is_file()
            and p.name.startswith(f"{component_name}-")
            and p.name.endswith(".html")
        )
        path = assets_dir / candidates[-1] if candidates else None

    markup = path.read_text(encoding="utf-8") if path is not None else ""
    if not markup:
        raise AssetNotFound(
            f'Widget HTML for "{component_name}" not found in {assets_dir}. '
            "Build the widgets to generate the assets."
        )

    logger.debug(f"Resolved markup for {component_name}: {path.name}")
    return markup


class WidgetRegistry:
    """
    Read-only catalog of widget descriptors with O(1) lookup by id and URI.

    The published catalog views (tools, resources, resource templates) are
    computed once here since descriptors never change after the build.
    """

    def __init__(self, widgets: Iterable[WidgetDescriptor], server_name: str = "hotspot-node"):
        self.server_name = server_name
        self._by_id: dict[str, WidgetDescriptor] = {}
        self._by_uri: dict[str, WidgetDescriptor] = {}

        for widget in widgets:
            if widget.id in self._by_id:
                raise RegistryError(f"Duplicate widget id: {widget.id}")
            if widget.template_uri in self._by_uri:
                raise RegistryError(f"Duplicate widget template URI: {widget.template_uri}")
            self._by_id[widget.id] = widget
            self._by_uri[widget.template_uri] = widget

        self._tools = [w.to_tool() for w in self._by_id.values()]
        self._resources = [w.to_resource() for w in self._by_id.values()]
        self._resource_templates = [w.to_resource_template() for w in self._by_id.values()]

    def by_id(self, widget_id: str) -> Optional[WidgetDescriptor]:
        return self._by_id.get(widget_id)

    def by_uri(self, uri: str) -> Optional[WidgetDescriptor]:
        return self._by_uri.get(uri)

    def ids(self) -> list[str]:
        return list(self._by_id)

    def tools(self) -> list[dict[str, Any]]:
        return self._tools

    def resources(self) -> list[dict[str, Any]]:
        return self._resources

    def resource_templates(self) -> list[dict[str, Any]]:
        return self._resource_templates

    def __iter__(self) -> Iterator[WidgetDescriptor]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._by_id


def build_descriptor(spec: WidgetSpec, assets_dir: Path, data_dir: Path) -> WidgetDescriptor:
    return WidgetDescriptor(
        id=spec.id,
        title=spec.title,
        template_uri=spec.template_uri,
        invoking=spec.invoking,
        invoked=spec.invoked,
        markup=resolve_markup(assets_dir, spec.component_name),
        response_text=spec.response_text,
        input_schema=spec.input_schema,
        dataset_path=Path(data_dir) / spec.dataset,
        argument_model=build_argument_model(spec.id, spec.input_schema),
    )


def load_registry(
    widget_specs: Iterable[WidgetSpec],
    assets_dir: Path,
    data_dir: Path,
    server_name: str = "hotspot-node",
) -> WidgetRegistry:
    """Build the registry from catalog entries.

    Args:
        widget_specs: Catalog entries, in publication order.
        assets_dir: Directory holding the built widget HTML.
        data_dir: Base directory for the canned datasets.
        server_name: Name reported to clients in the initialize handshake.

    Returns:
        The complete registry.

    Raises:
        AssetNotFound: If any widget's markup cannot be resolved.
        RegistryError: If two widgets share an id or template URI.
    """
    descriptors = [build_descriptor(spec, assets_dir, data_dir) for spec in widget_specs]
    registry = WidgetRegistry(descriptors, server_name=server_name)
    logger.info(f"Widget registry built: {len(registry)} widgets ({', '.join(registry.ids())})")
    return registry
