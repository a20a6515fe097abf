"""Resolver functions referenced by the GraphQL types, queries and mutations.

Each resolver opens its own session from the Database handle found in the
GraphQL context and converts ORM rows into GraphQL types before returning.
"""
