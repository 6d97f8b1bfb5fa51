"""
Show GraphQL type definitions
"""

import strawberry


@strawberry.type
class CastMember:
    """A performer in a show's cast and the character they play."""

    name: str | None = None
    character_name: str | None = None
    character_image: str | None = None


@strawberry.type
class Show:
    """Show type for GraphQL API."""

    id: int | None = None
    name: str | None = None
    rating: float | None = None
    image: str | None = None
    summary: str | None = None
    network: str | None = None
    air_day: str | None = None
    status: str | None = None
    genres: list[str | None] | None = None
    cast: list[CastMember | None] | None = strawberry.field(default_factory=list)
