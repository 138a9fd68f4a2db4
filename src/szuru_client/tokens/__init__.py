"""Tokens – typed search, sort and special query tokens."""
from szuru_client.tokens.catalogs import (
    Catalog,
    CatalogToken,
    CommentNamedToken,
    CommentSortToken,
    NamedToken,
    PoolNamedToken,
    PoolSortToken,
    PostNamedToken,
    PostSortToken,
    PostSpecialToken,
    Resource,
    SnapshotNamedToken,
    SortableToken,
    SpecialToken,
    TagNamedToken,
    TagSortToken,
    UserNamedToken,
    UserSortToken,
)
from szuru_client.tokens.query import QueryToken, escape, to_query_string
from szuru_client.tokens.values import PostSafety, PostType

__all__ = [
    "Catalog",
    "CatalogToken",
    "CommentNamedToken",
    "CommentSortToken",
    "NamedToken",
    "PoolNamedToken",
    "PoolSortToken",
    "PostNamedToken",
    "PostSafety",
    "PostSortToken",
    "PostSpecialToken",
    "PostType",
    "QueryToken",
    "Resource",
    "SnapshotNamedToken",
    "SortableToken",
    "SpecialToken",
    "TagNamedToken",
    "TagSortToken",
    "UserNamedToken",
    "UserSortToken",
    "escape",
    "to_query_string",
]
