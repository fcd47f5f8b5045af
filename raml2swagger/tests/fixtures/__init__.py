"""Test fixtures for raml2swagger tests.

This module provides sample RAML 0.8 documents, both as text and in their
parsed (mapping) form, used across the test modules.
"""

# Smallest document the loader accepts
MINIMAL_RAML = """#%RAML 0.8
title: Minimal API
"""

# Templated base URI, nested URI parameters and a resource without methods
NESTED_RAML = """#%RAML 0.8
title: Nested API
version: v1
baseUri: https://api.example.com/{version}/svc
/a/{x}:
  uriParameters:
    x:
      type: integer
      description: The x id
  /b/{y}:
    uriParameters:
      y:
        type: string
    get:
      description: Get a b
  /c/{z}:
    uriParameters:
      z:
        type: string
    get:
      description: Get a c
/empty:
"""

WIDGET_SCHEMA = """{
  "$schema": "http://json-schema.org/draft-03/schema",
  "type": "object",
  "required": true,
  "properties": {
    "id": {"type": "integer", "required": "true"},
    "name": {"type": "string", "required": "false"},
    "owner": {
      "type": "object",
      "properties": {
        "email": {"type": "string", "required": "true"}
      }
    }
  }
}"""

# Parsed document exercising schemas, security schemes, bodies and responses
WIDGET_RAML_DATA = {
    'title': 'Widget API',
    'version': 'v2',
    'baseUri': 'http://widgets.example.com/api',
    'protocols': ['HTTP', 'HTTPS'],
    'mediaType': 'application/json',
    'documentation': [
        {'title': 'Overview', 'content': 'Manage widgets'},
        {'title': 'Auth', 'content': 'Use OAuth'},
    ],
    'schemas': [{'Widget': WIDGET_SCHEMA}],
    'securitySchemes': [
        {
            'basic': {
                'type': 'Basic Authentication',
                'description': 'Username and password',
            }
        },
        {
            'oauth': {
                'type': 'OAuth 2.0',
                'description': 'OAuth 2.0 access',
                'settings': {
                    'authorizationUri': '"https://auth.example.com/authorize"',
                    'accessTokenUri': 'https://auth.example.com/token',
                    'authorizationGrants': ['code', 'token'],
                    'scopes': ['read', 'write'],
                },
            }
        },
    ],
    '/widgets': {
        'get': {
            'description': 'List widgets',
            'headers': {'X-Trace': {'description': 'Trace id'}},
            'queryParameters': {
                'page': {'type': 'integer', 'minimum': 1, 'default': 1},
                'tag': {'type': 'string', 'repeat': True},
            },
            'responses': {
                200: {'body': {'application/json': {'schema': 'Widget'}}},
            },
        },
        'post': {
            'body': {'application/json': {'schema': 'Widget'}},
            'responses': {
                201: {'body': {'application/json': {'schema': 'Widget'}}},
                422: {},
            },
        },
        '/{widgetId}': {
            'uriParameters': {'widgetId': {'type': 'integer'}},
            'get': {},
            'delete': {'responses': {404: None}},
        },
    },
}

# Document pulling its schema and a resource body from included files
INCLUDE_RAML = """#%RAML 0.8
title: Include API
schemas:
  - Widget: !include widget.json
/widgets: !include widgets.raml
"""

INCLUDED_RESOURCE = """get:
  responses:
    200:
      body:
        application/json:
          schema: Widget
"""

UNSUPPORTED_VERSION_RAML = """#%RAML 1.0
title: Newer API
"""
