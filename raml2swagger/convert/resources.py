"""Resource tree walking.

This module visits the RAML resource tree depth-first and produces one
Swagger path entry per resource, carrying the URI parameters declared on
the resource and on every ancestor.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from raml2swagger.convert.parameters import ParameterMapper
from raml2swagger.convert.responses import ResponseMapper
from raml2swagger.raml.model import Action, Resource, UriParameter
from raml2swagger.swagger.models import Operation, ParameterLocation, PathItem

logger = logging.getLogger(__name__)

__all__ = ['ParameterScope', 'ResourceTreeWalker']


class ParameterScope(Mapping[str, UriParameter]):
    """Immutable mapping of the path parameters visible to a resource.

    `extend` returns a new scope and never touches the receiver, so the
    parameters of one branch of the tree cannot leak into its siblings.

    Example:
        >>> root = ParameterScope({'x': UriParameter()})
        >>> child = root.extend({'y': UriParameter()})
        >>> sorted(child), sorted(root)
        (['x', 'y'], ['x'])
    """

    __slots__ = ('_parameters',)

    def __init__(self, parameters: Mapping[str, UriParameter] | None = None):
        self._parameters = MappingProxyType(dict(parameters or {}))

    def __getitem__(self, name: str) -> UriParameter:
        return self._parameters[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        return f'ParameterScope({list(self._parameters)})'

    def extend(self, overrides: Mapping[str, UriParameter]) -> 'ParameterScope':
        """Return a scope where `overrides` replace same-named parameters."""
        if not overrides:
            return self
        merged = dict(self._parameters)
        merged.update(overrides)
        return ParameterScope(merged)


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


class ResourceTreeWalker:
    """Builds the `paths` section from the resource tree.

    Every resource yields exactly one path entry, keyed by the hoisted
    base URI prefix followed by the resource's full URI, even when it
    declares no methods.

    Example:
        >>> walker = ResourceTreeWalker(parameter_mapper, response_mapper)
        >>> paths = walker.walk(raml.resources)
    """

    def __init__(
        self,
        parameters: ParameterMapper,
        responses: ResponseMapper,
        hoisted_prefix: str = '',
        root_parameters: Mapping[str, UriParameter] | None = None,
    ):
        """Initialize the walker.

        Args:
            parameters: Mapper for parameters and request bodies.
            responses: Mapper for responses.
            hoisted_prefix: Templated base URI tail prepended to every path.
            root_parameters: Parameters visible to every resource, i.e.
                             the base URI parameters of a hoisted prefix.
        """
        self.parameters = parameters
        self.responses = responses
        self.hoisted_prefix = hoisted_prefix
        self.root_parameters = ParameterScope(root_parameters)

    def walk(self, resources: Mapping[str, Resource]) -> dict[str, PathItem]:
        """Walk the whole tree and return the path entries in pre-order."""
        paths: dict[str, PathItem] = {}
        self._visit(resources, '', self.root_parameters, paths)
        return paths

    def _visit(
        self,
        resources: Mapping[str, Resource],
        parent_uri: str,
        scope: ParameterScope,
        paths: dict[str, PathItem],
    ) -> None:
        for relative_uri, resource in resources.items():
            uri = parent_uri + relative_uri
            resource_scope = scope.extend(resource.uri_parameters)

            key = self.hoisted_prefix + uri
            if key in paths:
                logger.warning(f"Path '{key}' is declared more than once, keeping the last")
            paths[key] = self.build_path_item(resource, resource_scope)

            self._visit(resource.resources, uri, resource_scope, paths)

    def build_path_item(self, resource: Resource, scope: ParameterScope) -> PathItem:
        """Build the operations of one resource."""
        return {
            method.lower(): self.build_operation(action, scope)
            for method, action in resource.actions.items()
        }

    def build_operation(self, action: Action, scope: ParameterScope) -> Operation:
        """Build one operation from an action and the visible path parameters.

        Raises:
            ConversionError: If a parameter or schema is malformed.
        """
        parameters = [
            *self.parameters.map_parameters(action.headers, ParameterLocation.HEADER),
            *self.parameters.map_parameters(
                action.query_parameters, ParameterLocation.QUERY
            ),
        ]
        body = self.parameters.map_body(action.body)
        if body is not None:
            parameters.append(body)
        parameters.extend(self.parameters.map_parameters(scope, ParameterLocation.PATH))

        consumes = _unique(action.body)
        produces = _unique(
            media_type
            for response in action.responses.values()
            for media_type in response.body
        )

        return Operation(
            description=action.description,
            consumes=consumes or None,
            produces=produces or None,
            parameters=parameters or None,
            responses=self.responses.map_responses(action.responses),
        )
