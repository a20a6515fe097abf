"""GraphQL schema, types and resolvers for projectdesk."""
