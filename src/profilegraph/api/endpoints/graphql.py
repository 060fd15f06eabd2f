"""GraphQL endpoint."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from graphql import GraphQLError
from pydantic import BaseModel, Field, ValidationError

from ...graphql.engine import ExecutionResult, execute
from ...logging import get_logger
from ..deps import GraphQLService, get_graphql_service

logger = get_logger(__name__)


router = APIRouter()


class GraphQLRequest(BaseModel):
    query: str
    variables: str | dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


def _error_response(message: str) -> JSONResponse:
    # Transport-level success; the failure is reported in the payload
    return JSONResponse(ExecutionResult(errors=[GraphQLError(message)]).formatted)


@router.post("/")
async def graphql_endpoint(
    request: Request,
    service: GraphQLService = Depends(get_graphql_service),
) -> JSONResponse:
    """Execute a GraphQL query or mutation.

    Always answers 200; request and field errors are carried in ``errors``.
    """
    try:
        payload = json.loads(await request.body())
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.info("Rejected non-JSON GraphQL request body")
        return _error_response("Request body must be a JSON object.")

    if not isinstance(payload, dict):
        return _error_response("Request body must be a JSON object.")

    try:
        body = GraphQLRequest.model_validate(payload)
    except ValidationError as e:
        logger.info("Rejected malformed GraphQL request", errors=e.errors(include_url=False))
        return _error_response("Request body must contain a 'query' string.")

    result = await execute(
        service.schema,
        body.query,
        body.variables,
        service.resolvers,
        context=service.resolver_context(),
        operation_name=body.operation_name,
    )
    return JSONResponse(result.formatted)
