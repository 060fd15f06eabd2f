"""
Execution engine: parse, validate and run one GraphQL request against the
schema, dispatching root fields to the registered resolvers.

Nothing raised by a resolver escapes :func:`execute`; every failure ends up
as an entry in the result envelope.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from inspect import isawaitable
from typing import Any

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLResolveInfo,
    GraphQLSchema,
    OperationDefinitionNode,
    OperationType,
    default_field_resolver,
    get_operation_ast,
    parse,
    validate,
)
from graphql import execute as gql_execute
from graphql.execution.values import get_variable_values
from pydantic import BaseModel

from ..logging import get_logger
from .errors import FieldResolutionError, QuerySyntaxError, QueryValidationError, RequestError
from .resolvers import ResolverContext, ResolverSet
from .types import Profile

logger = get_logger(__name__)


@dataclass
class ExecutionResult:
    """Result envelope for one request.

    ``data`` is reported only once execution has started; ``errors`` only
    when at least one error occurred.
    """

    data: dict[str, Any] | None = None
    errors: list[GraphQLError] | None = None
    executed: bool = False

    @property
    def formatted(self) -> dict[str, Any]:
        envelope: dict[str, Any] = {}
        if self.executed:
            envelope["data"] = self.data
        if self.errors:
            envelope["errors"] = [error.formatted for error in self.errors]
        return envelope


def decode_variables(variables: str | dict[str, Any] | None) -> dict[str, Any]:
    """Accept variables as an object or as a JSON-encoded object string."""
    if variables is None or variables == "":
        return {}
    if isinstance(variables, str):
        try:
            variables = json.loads(variables)
        except json.JSONDecodeError as e:
            raise RequestError([GraphQLError(f"Variables are invalid JSON: {e.msg}.")]) from e
        if variables is None:
            return {}
    if not isinstance(variables, dict):
        raise RequestError([GraphQLError("Variables must be provided as an object.")])
    return variables


MAX_QUERY_TOKENS = 10_000
MAX_QUERY_DEPTH = 20

TOO_DEEP_MESSAGE = "Query is too deeply nested."


def parse_query(query: str) -> DocumentNode:
    try:
        return parse(query, max_tokens=MAX_QUERY_TOKENS)
    except GraphQLError as e:
        raise QuerySyntaxError([e]) from e
    except RecursionError:
        raise QuerySyntaxError([GraphQLError(TOO_DEEP_MESSAGE)]) from None


def check_query_depth(document: DocumentNode, max_depth: int = MAX_QUERY_DEPTH) -> None:
    """Reject documents whose selection sets nest deeper than ``max_depth``."""
    pending = [(definition, 0) for definition in document.definitions]
    while pending:
        node, depth = pending.pop()
        selection_set = getattr(node, "selection_set", None)
        if selection_set is None:
            continue
        if depth >= max_depth:
            raise QueryValidationError([GraphQLError(TOO_DEEP_MESSAGE, node)])
        pending.extend((selection, depth + 1) for selection in selection_set.selections)


def validate_query(schema: GraphQLSchema, document: DocumentNode) -> None:
    try:
        errors = validate(schema, document)
    except RecursionError:
        raise QueryValidationError([GraphQLError(TOO_DEEP_MESSAGE)]) from None
    if errors:
        raise QueryValidationError(list(errors))


def select_operation(
    schema: GraphQLSchema, document: DocumentNode, operation_name: str | None = None
) -> OperationDefinitionNode:
    """Pick the single operation to run.

    Raises:
        QueryValidationError: If the name is unknown, the choice is ambiguous,
            or the operation type is not served by the schema
    """
    operation = get_operation_ast(document, operation_name)
    if operation is None:
        if operation_name:
            message = f"Unknown operation named '{operation_name}'."
        elif any(isinstance(d, OperationDefinitionNode) for d in document.definitions):
            message = "Must provide operation name if query contains multiple operations."
        else:
            message = "Must provide an operation."
        raise QueryValidationError([GraphQLError(message)])

    if operation.operation == OperationType.SUBSCRIPTION:
        raise QueryValidationError(
            [GraphQLError("Subscriptions are not supported.", operation)]
        )
    if operation.operation == OperationType.MUTATION and schema.mutation_type is None:
        raise QueryValidationError(
            [GraphQLError("Schema is not configured for mutations.", operation)]
        )
    return operation


def coerce_variables(
    schema: GraphQLSchema, operation: OperationDefinitionNode, variables: dict[str, Any]
) -> dict[str, Any]:
    coerced = get_variable_values(schema, operation.variable_definitions or (), variables)
    if isinstance(coerced, list):
        raise QueryValidationError(coerced)
    return coerced


def serialize_value(value: Any) -> Any:
    """Turn resolver return values into plain data for field projection."""
    if isinstance(value, Profile):
        return value.to_output()
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def _is_root_type(info: GraphQLResolveInfo) -> bool:
    schema = info.schema
    return info.parent_type is schema.query_type or info.parent_type is schema.mutation_type


def make_field_resolver(resolvers: ResolverSet):
    """Field resolver dispatching root fields to ``resolvers`` by name.

    Non-root fields read from the serialized parent value, so only the
    requested sub-selection reaches the response.
    """

    async def resolve_root_field(info: GraphQLResolveInfo, raw_args: dict[str, Any]) -> Any:
        root_field = resolvers.get(info.field_name)
        if root_field is None:
            raise FieldResolutionError(f"No resolver registered for field '{info.field_name}'")

        args = root_field.parse_args(raw_args)
        try:
            value = await root_field.resolve(info.context, args)
        except FieldResolutionError:
            raise
        except Exception:
            logger.exception(
                "Resolver failed",
                field=info.field_name,
                path=info.path.as_list(),
            )
            raise
        return serialize_value(value)

    def field_resolver(source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        if _is_root_type(info):
            return resolve_root_field(info, args)
        return default_field_resolver(source, info, **args)

    return field_resolver


async def execute(
    schema: GraphQLSchema,
    query: str,
    variables: str | dict[str, Any] | None,
    resolvers: ResolverSet,
    *,
    context: ResolverContext,
    operation_name: str | None = None,
) -> ExecutionResult:
    """Run one GraphQL request and return its result envelope.

    Query root fields resolve concurrently; mutation root fields run in
    request order. Response field order always follows the selection.
    """
    try:
        document = parse_query(query)
        check_query_depth(document)
        variable_inputs = decode_variables(variables)
        validate_query(schema, document)
        operation = select_operation(schema, document, operation_name)
        coerce_variables(schema, operation, variable_inputs)
    except RequestError as e:
        logger.info(
            "GraphQL request rejected",
            reason=type(e).__name__,
            errors=[error.message for error in e.errors],
        )
        return ExecutionResult(errors=e.errors)

    result = gql_execute(
        schema,
        document,
        context_value=context,
        variable_values=variable_inputs,
        operation_name=operation.name.value if operation.name else None,
        field_resolver=make_field_resolver(resolvers),
    )
    if isawaitable(result):
        result = await result

    if result.errors:
        logger.info(
            "GraphQL execution completed with errors",
            operation=operation.operation.value,
            error_count=len(result.errors),
        )

    return ExecutionResult(data=result.data, errors=result.errors, executed=True)
