"""
Tests for the composed GraphQL schema
"""

from projectdesk.graphql.schema import schema, validate_schema


def _arg_types(type_name: str, field_name: str) -> dict[str, str]:
    graphql_type = schema._schema.get_type(type_name)
    field = graphql_type.fields[field_name]
    return {name: str(arg.type) for name, arg in field.args.items()}


def test_validate_schema_passes():
    validate_schema()


def test_project_status_enum_codes():
    status_enum = schema._schema.get_type("ProjectStatus")

    assert set(status_enum.values) == {"new", "process", "completed"}


def test_query_fields():
    query_type = schema._schema.query_type

    assert set(query_type.fields) == {"projects", "project", "clients", "client"}
    assert _arg_types("Query", "project") == {"id": "ID!"}
    assert _arg_types("Query", "client") == {"id": "ID!"}


def test_mutation_arguments():
    assert _arg_types("Mutation", "addClient") == {
        "name": "String!",
        "email": "String!",
        "phone": "String!",
    }
    assert _arg_types("Mutation", "deleteClient") == {"id": "ID!"}
    assert _arg_types("Mutation", "addProject") == {
        "name": "String!",
        "description": "String!",
        "clientId": "ID!",
        "status": "ProjectStatus!",
    }
    assert _arg_types("Mutation", "deleteProject") == {"id": "ID!"}
    assert _arg_types("Mutation", "updateProject") == {
        "id": "ID!",
        "name": "String",
        "description": "String",
        "status": "ProjectStatus",
    }


def test_add_project_status_defaults_to_new():
    assert "status: ProjectStatus! = new" in schema.as_str()


def test_project_exposes_derived_client():
    project_type = schema._schema.get_type("Project")

    assert str(project_type.fields["clientId"].type) == "ID!"
    assert str(project_type.fields["client"].type) == "Client"
    assert str(project_type.fields["status"].type) == "String!"
