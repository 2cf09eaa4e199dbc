"""Resolver functions referenced by the GraphQL types, queries and mutations.

Resolvers are grouped by the entities they serve; each opens its own
database session.
"""
