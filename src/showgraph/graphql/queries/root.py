"""
Root GraphQL query definitions
"""

import strawberry

from ..types.show import Show


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def schedule(self, info: strawberry.Info) -> list[Show | None] | None:
        """Get the day's web schedule."""
        from ..resolvers.show import resolve_schedule

        return await resolve_schedule(info)

    @strawberry.field
    async def show(
        self, info: strawberry.Info, id: int | None = strawberry.UNSET
    ) -> Show | None:
        """Get a show and its cast by ID."""
        from ..resolvers.show import resolve_show

        # UNSET keeps the argument free of a default value in the SDL
        return await resolve_show(info, None if id is strawberry.UNSET else id)
