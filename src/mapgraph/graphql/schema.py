"""
Main GraphQL schema definition using Strawberry
"""

from datetime import datetime
from typing import Any

import strawberry
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..broadcast import Broadcast
from ..config import settings
from ..errors import MapgraphError
from ..logging import get_logger
from .context import LoadersExtension, build_context
from .mutations.root import Mutation
from .queries.root import Query
from .scalars import DateTime
from .subscriptions.root import SubscriptionRoot

logger = get_logger(__name__)


class MapgraphSchema(strawberry.Schema):
    """Schema that logs resolver errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, MapgraphError):
                # Expected failures: missing ids, store constraints, bad scalars
                logger.info(
                    "GraphQL operation rejected",
                    error_type=type(original).__name__,
                    error=str(original),
                    path=error.path,
                )
            elif original is not None:
                logger.error(
                    "GraphQL resolver failed",
                    error_type=type(original).__name__,
                    error=str(original),
                    path=error.path,
                    exc_info=original,
                )
            else:
                logger.info("GraphQL request invalid", error=error.message)


# Create the GraphQL schema
schema = MapgraphSchema(
    query=Query,
    mutation=Mutation,
    subscription=SubscriptionRoot,
    scalar_overrides={datetime: DateTime},
    extensions=[LoadersExtension],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    This ensures that all type references can be resolved and catches
    circular reference errors early, causing the server to fail fast
    rather than at the first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        introspection_query = get_introspection_query()
        result = graphql_sync(graphql_schema, introspection_query)

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


# Create the GraphQL router for FastAPI integration
def create_graphql_router(broadcast: Broadcast) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Serves queries and mutations over HTTP and subscriptions over both
    WebSocket protocols strawberry supports.
    """

    async def get_context() -> dict[str, Any]:
        """Get the context for GraphQL resolvers.

        Strawberry merges this with its own request/websocket context.
        """
        return build_context(broadcast)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=settings.graphiql,
        context_getter=get_context,
    )
