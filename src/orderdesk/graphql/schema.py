"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLSchema, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from ..errors import SchemaRegistryError
from ..handlers import OPERATIONS
from ..logging import get_logger
from ..store import OrderStore
from .mutations.root import Mutation
from .queries.root import Query
from .types.scalars import SCALAR_MAP

logger = get_logger(__name__)

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(scalar_map=SCALAR_MAP),
)


def root_field_names(graphql_schema: GraphQLSchema) -> set[str]:
    """Return the names of every root query and mutation field."""
    names: set[str] = set()
    for root in (graphql_schema.query_type, graphql_schema.mutation_type):
        if root is not None:
            names.update(root.fields)
    return names


def validate_operations(
    graphql_schema: GraphQLSchema, operations: dict[str, Any] | None = None
) -> None:
    """Check that every root field has an operation handler and vice versa.

    Raises:
        SchemaRegistryError: If the schema and the handler registry disagree.
    """
    registered = set(OPERATIONS if operations is None else operations)
    fields = root_field_names(graphql_schema)

    problems = []
    missing = sorted(fields - registered)
    if missing:
        problems.append(f"no handler for: {', '.join(missing)}")
    unknown = sorted(registered - fields)
    if unknown:
        problems.append(f"handler without schema field: {', '.join(unknown)}")

    if problems:
        raise SchemaRegistryError(f"Operation registry mismatch ({'; '.join(problems)})")


def validate_schema(operations: dict[str, Any] | None = None) -> None:
    """Validate the GraphQL schema at startup.

    Fails fast on structural schema errors, on a broken introspection query,
    and on any root field that has no operation handler.

    Raises:
        SchemaRegistryError: If the schema is invalid or incomplete
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaRegistryError(
                f"GraphQL schema validation failed: {'; '.join(error_messages)}"
            )

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaRegistryError(
                f"GraphQL introspection failed: {'; '.join(error_messages)}"
            )

        validate_operations(graphql_schema, operations)

        logger.info(
            "GraphQL schema validation successful",
            operations=sorted(root_field_names(graphql_schema)),
        )

    except SchemaRegistryError as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    store: OrderStore, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI bound to the given store."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": store,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
