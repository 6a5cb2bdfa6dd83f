"""Resolver package for the GraphQL schema.

Each entity module provides its query and mutation resolvers and the field
resolvers referenced by the matching Strawberry type: ``User.posts`` is
served by ``resolvers.user.resolve_user_posts``, ``Post.author`` by
``resolvers.post.resolve_post_author`` and so on.
"""
