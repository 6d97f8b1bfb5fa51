"""
Show resolvers for GraphQL API
"""

import asyncio

import strawberry

from ...logging import get_logger
from ...transform import transform_show_data
from ...upstream.client import TVMazeClient
from ..types.show import Show

logger = get_logger(__name__)


def get_upstream_client(info: strawberry.Info) -> TVMazeClient:
    """Get the shared upstream client from the GraphQL context."""
    return info.context["upstream"]


async def resolve_schedule(info: strawberry.Info) -> list[Show]:
    """Get the shows airing on the configured schedule date.

    Shows are returned in upstream order. Any upstream failure fails the
    whole list.
    """
    client = get_upstream_client(info)
    schedule_date = info.context["settings"].schedule_date

    schedule = await client.fetch_schedule(schedule_date)
    logger.debug("Fetched schedule", date=schedule_date, count=len(schedule))

    return [transform_show_data(entry) for entry in schedule]


async def resolve_show(info: strawberry.Info, show_id: int | None) -> Show | None:
    """Get a show and its cast by TVmaze ID.

    Show details and cast are fetched concurrently; both must succeed before
    the show is built.

    Args:
        info: GraphQL info context
        show_id: TVmaze show ID; None resolves to null without fetching

    Returns:
        The show, or None when no ID was given
    """
    if show_id is None:
        return None

    client = get_upstream_client(info)

    show_data, cast_data = await asyncio.gather(
        client.fetch_show(show_id),
        client.fetch_cast(show_id),
    )
    logger.debug("Fetched show", show_id=show_id)

    return transform_show_data(show_data, cast_data)
