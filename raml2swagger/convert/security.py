"""Security scheme mapping.

This module expands RAML security scheme declarations into Swagger 2.0
security definitions. Swagger describes one OAuth2 flow per definition,
so an OAuth 2.0 scheme listing several authorization grants yields one
definition per grant.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from raml2swagger.exceptions import SecuritySchemeError
from raml2swagger.raml.model import SecurityScheme
from raml2swagger.swagger.models import (
    BasicSecurityDefinition,
    OAuth2Flow,
    OAuth2SecurityDefinition,
    SecurityDefinition,
)
from raml2swagger.utils import trim_quotes

logger = logging.getLogger(__name__)

__all__ = ['GRANT_FLOWS', 'GrantFlow', 'SecuritySchemeMapper']

BASIC_AUTHENTICATION = 'Basic Authentication'
OAUTH2 = 'OAuth 2.0'

AUTHORIZATION_URI = 'authorizationUri'
ACCESS_TOKEN_URI = 'accessTokenUri'
AUTHORIZATION_GRANTS = 'authorizationGrants'
SCOPES = 'scopes'


@dataclass(frozen=True)
class GrantFlow:
    """Swagger flow of a RAML authorization grant and the URIs it needs."""

    flow: OAuth2Flow
    needs_authorization_uri: bool
    needs_token_uri: bool


GRANT_FLOWS: dict[str, GrantFlow] = {
    'code': GrantFlow(OAuth2Flow.ACCESS_CODE, True, True),
    'token': GrantFlow(OAuth2Flow.IMPLICIT, True, False),
    'owner': GrantFlow(OAuth2Flow.PASSWORD, False, True),
    'credentials': GrantFlow(OAuth2Flow.APPLICATION, False, True),
}


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _unique_grants(name: str, grants: list) -> list[str]:
    """Drop repeated grants (compared case-insensitively), keeping the first."""
    unique: dict[str, str] = {}
    for grant in grants:
        key = str(grant).lower()
        if key in unique:
            logger.warning(
                f"Ignoring repeated authorization grant '{grant}' "
                f"of security scheme '{name}'"
            )
            continue
        unique[key] = str(grant)
    return list(unique.values())


class SecuritySchemeMapper:
    """Builds the `securityDefinitions` section.

    Only "Basic Authentication" and "OAuth 2.0" schemes are emitted, other
    scheme types are skipped.

    Example:
        >>> mapper = SecuritySchemeMapper()
        >>> definitions = mapper.map_all(raml.security_schemes)
    """

    def map_all(
        self, schemes: list[Mapping[str, SecurityScheme]]
    ) -> dict[str, SecurityDefinition]:
        """Map every declared scheme, in declaration order."""
        definitions: dict[str, SecurityDefinition] = {}
        for entry in schemes:
            for name, scheme in entry.items():
                definitions.update(self.map_scheme(name, scheme))
        return definitions

    def map_scheme(
        self, name: str, scheme: SecurityScheme
    ) -> dict[str, SecurityDefinition]:
        """Map one scheme to zero or more named security definitions.

        Raises:
            SecuritySchemeError: If an OAuth 2.0 scheme lacks the settings
                its grants need.
        """
        if scheme.type == BASIC_AUTHENTICATION:
            return {name: BasicSecurityDefinition(description=scheme.description)}

        if scheme.type == OAUTH2:
            return self._map_oauth2(name, scheme)

        logger.debug(f"Skipping security scheme '{name}' of type {scheme.type!r}")
        return {}

    def _map_oauth2(
        self, name: str, scheme: SecurityScheme
    ) -> dict[str, SecurityDefinition]:
        settings = scheme.settings
        grants = _as_list(settings.get(AUTHORIZATION_GRANTS))
        if not grants:
            raise SecuritySchemeError(name, f"'{AUTHORIZATION_GRANTS}' must not be empty")
        grants = _unique_grants(name, grants)

        scopes = {str(scope): '' for scope in _as_list(settings.get(SCOPES))}

        definitions: dict[str, SecurityDefinition] = {}
        for grant in grants:
            grant_flow = GRANT_FLOWS.get(str(grant).lower())
            if grant_flow is None:
                logger.warning(
                    f"Skipping unknown authorization grant '{grant}' "
                    f"of security scheme '{name}'"
                )
                continue

            definition = OAuth2SecurityDefinition(
                description=scheme.description,
                flow=grant_flow.flow,
                authorization_url=self._setting(name, settings, AUTHORIZATION_URI)
                if grant_flow.needs_authorization_uri
                else None,
                token_url=self._setting(name, settings, ACCESS_TOKEN_URI)
                if grant_flow.needs_token_uri
                else None,
                scopes=scopes,
            )

            # A single grant keeps the scheme name, several need unique keys
            key = name if len(grants) == 1 else f'{name}_{grant_flow.flow.value}'
            definitions[key] = definition

        return definitions

    def _setting(self, name: str, settings: Mapping[str, Any], key: str) -> str:
        value = settings.get(key)
        if value is None:
            raise SecuritySchemeError(name, f"missing '{key}' setting")
        return trim_quotes(value)
