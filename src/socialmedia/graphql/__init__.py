"""GraphQL schema, types and resolvers for the SocialMedia API."""
