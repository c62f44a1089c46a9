"""Resolver package for GraphQL schema.

Resolvers adapt the GraphQL calling convention to the operation handlers in
``orderdesk.handlers``: they pull the store out of the request context,
convert between GraphQL and domain types, and turn domain errors into
GraphQL errors.
"""
