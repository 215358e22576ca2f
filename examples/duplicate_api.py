"""
Example API definition declaring the same endpoint twice.
"""

from api_contract_builder import Builder

api = Builder([
    {"method": "get", "path": "/status", "alias": "getStatus", "response": str},
    {"method": "post", "path": "/status", "alias": "getStatus", "response": str},
    {"method": "get", "path": "/status", "alias": "readStatus", "response": str},
])

aliased = Builder([
    {"method": "get", "path": "/status", "alias": "status", "response": str},
    {"method": "post", "path": "/status", "alias": "status", "response": str},
])
