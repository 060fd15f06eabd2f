"""
GraphQL layer: schema registry, resolvers and execution engine
"""
