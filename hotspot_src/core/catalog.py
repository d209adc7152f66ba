"""
Built-in widget catalogs.

Two catalogs ship with the server: "hotspot" (topic hotspots, scraping,
markdown rendering, post drafts) and "post" (social posts). Dataset paths are
relative to config.DATA_DIR.
"""

from hotspot_src.models.widgets import FieldSpec, InputSchema, WidgetSpec

_TOPIC_SCHEMA = InputSchema(
    properties={"Topic": FieldSpec(type="string", description="Topic to search for.")},
    required=["Topic"],
)

HOTSPOT_WIDGETS: list[WidgetSpec] = [
    WidgetSpec(
        id="hotspot",
        title="Show Hotspot",
        template_uri="ui://widget/hotspot.html",
        invoking="Creating a hotspot",
        invoked="Hotspot created",
        response_text="Rendered a hotspot!",
        input_schema=_TOPIC_SCHEMA,
        dataset="hotspot/mock-data.json",
    ),
    WidgetSpec(
        id="hotspot-scraping",
        title="Web Scraping",
        template_uri="ui://widget/hotspot-scraping.html",
        invoking="Scraping webpage",
        invoked="Webpage scraped",
        response_text="Scraped webpage content!",
        input_schema=_TOPIC_SCHEMA,
        dataset="hotspot-scraping/mock-data.json",
    ),
    WidgetSpec(
        id="markdown-render",
        title="Markdown Render",
        template_uri="ui://widget/markdown-render.html",
        invoking="Rendering markdown",
        invoked="Markdown rendered",
        response_text="Rendered markdown content!",
        input_schema=InputSchema(
            properties={
                "markdown": FieldSpec(
                    type="string", description="Markdown content to render."
                )
            },
            required=["markdown"],
        ),
        dataset="markdown-render/mock-data.json",
    ),
    WidgetSpec(
        id="post-draft",
        title="Post Draft",
        template_uri="ui://widget/post-draft.html",
        invoking="Creating a post draft",
        invoked="Post draft created",
        response_text="Rendered post draft!",
        input_schema=InputSchema(
            properties={
                "title": FieldSpec(type="string", description="Title of the post draft."),
                "content": FieldSpec(
                    type="string", description="Content/body text of the post draft."
                ),
                "image_list": FieldSpec(
                    type="array",
                    items=FieldSpec(type="string"),
                    description="List of image URLs for the post draft.",
                ),
            },
            required=[],
        ),
        dataset="post-draft/mock-data.json",
    ),
]

POST_WIDGETS: list[WidgetSpec] = [
    WidgetSpec(
        id="post",
        title="Show Post",
        template_uri="ui://widget/post.html",
        invoking="Creating a post",
        invoked="Post created",
        response_text="Rendered a post!",
        input_schema=_TOPIC_SCHEMA,
        dataset="post/mock-data.json",
    ),
    WidgetSpec(
        id="post-scraping",
        title="Web Scraping",
        template_uri="ui://widget/post-scraping.html",
        invoking="Scraping webpage",
        invoked="Webpage scraped",
        response_text="Scraped webpage content!",
        input_schema=_TOPIC_SCHEMA,
        dataset="post-scraping/mock-data.json",
    ),
]

# catalog name -> (server name, widgets)
CATALOGS: dict[str, tuple[str, list[WidgetSpec]]] = {
    "hotspot": ("hotspot-node", HOTSPOT_WIDGETS),
    "post": ("post-node", POST_WIDGETS),
}


def get_catalog(name: str) -> tuple[str, list[WidgetSpec]]:
    """Look up a built-in catalog by name.

    Raises:
        ValueError: If no catalog has that name.
    """
    try:
        return CATALOGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown catalog '{name}'. Available: {', '.join(sorted(CATALOGS))}"
        ) from None
