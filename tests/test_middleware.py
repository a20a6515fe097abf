"""
Tests for GraphQL operation name extraction used in request logging
"""

import pytest

from projectdesk.middleware import operation_name_from_document


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        ("query GetProject($id: ID!) { project(id: $id) { id } }", "GetProject"),
        ("mutation AddClient { addClient(name: \"a\") { id } }", "mutation:AddClient"),
        ("{ projects { id } }", "unnamed_operation"),
        ("mutation { deleteProject(id: \"1\") { id } }", "mutation:unnamed"),
        ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        ("", None),
        (None, None),
    ],
)
def test_operation_name_from_document(document, expected):
    assert operation_name_from_document(document) == expected
