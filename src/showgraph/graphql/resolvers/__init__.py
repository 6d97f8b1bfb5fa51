"""Resolver package for GraphQL schema.

Resolvers are plain async functions called from the root query type. They
fetch from the upstream API held in the GraphQL context and hand the payloads
to ``showgraph.transform``.
"""

# Intentionally empty; functions are defined in sibling modules.
