"""Async rendering -- awaitable children and async components.

Async components resolve concurrently; the output keeps document order.
A Provider's value stays visible to async components while they await.

Run:
    python app.py
"""

import asyncio

from jinx import create_context, jsx, use_context

# -- Simulated async data sources ----------------------------------------

FEATURES = {
    1: ("Ordered async output", 0.03),
    2: ("Render hooks", 0.01),
    3: ("Task-local context", 0.02),
}

locale = create_context("en", name="locale")


async def fetch_feature(feature_id: int) -> str:
    """Simulate an API call with varying latency."""
    title, delay = FEATURES[feature_id]
    await asyncio.sleep(delay)
    return title


async def fetch_count() -> int:
    await asyncio.sleep(0)
    return len(FEATURES)


# -- Components -----------------------------------------------------------


async def Feature(id, children=None):
    title = await fetch_feature(id)
    return jsx("li", {"lang": use_context(locale)}, f"#{id}: ", title)


def Page(children=None):
    return jsx(
        "article",
        None,
        jsx("h1", None, "jinx features"),
        jsx("p", None, "Total: ", fetch_count(), " features"),
        jsx(
            locale.Provider,
            {"value": "fr"},
            jsx("ul", None, [jsx(Feature, {"id": feature_id}) for feature_id in FEATURES]),
        ),
    )


async def render() -> str:
    """Render the page, awaiting every async component."""
    return await jsx(Page, None).render_async()


output = asyncio.run(render())


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
