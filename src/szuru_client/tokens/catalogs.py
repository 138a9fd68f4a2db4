"""Tokens – per-resource catalogs of named, sort and special identifiers.

Every member's value is its wire spelling. Aliases accepted by the server are
separate members with their own spelling; nothing here folds them together.
The catalogs only narrow what a call site can pass; they say nothing about
whether a given endpoint accepts the token.
"""
from __future__ import annotations

import dataclasses
from enum import Enum


class CatalogToken(str, Enum):
    """Base for catalog identifiers. ``str(member)`` is the wire spelling."""

    def __str__(self) -> str:
        return self.value


class NamedToken(CatalogToken):
    """Filterable field, used as the key of ``key:value``."""


class SortableToken(CatalogToken):
    """Ordering criterion, used as the value of ``sort:value``."""


class SpecialToken(CatalogToken):
    """Predefined filter set rendered as a bare key, e.g. ``liked``."""


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


class PostNamedToken(NamedToken):
    """Named tokens for post searches."""

    ID = "id"
    TAG = "tag"
    SCORE = "score"
    UPLOADER = "uploader"
    UPLOAD = "upload"  # alias of uploader
    SUBMIT = "submit"  # alias of uploader
    COMMENT = "comment"
    FAV = "fav"
    POOL = "pool"
    TAG_COUNT = "tag-count"
    COMMENT_COUNT = "comment-count"
    FAV_COUNT = "fav-count"
    NOTE_COUNT = "note-count"
    NOTE_TEXT = "note-text"
    RELATION_COUNT = "relation-count"
    FEATURE_COUNT = "feature-count"
    TYPE = "type"  # see tokens.values.PostType
    CONTENT_CHECKSUM = "content-checksum"
    FILE_SIZE = "file-size"
    IMAGE_WIDTH = "image-width"
    IMAGE_HEIGHT = "image-height"
    IMAGE_AREA = "image-area"
    IMAGE_ASPECT_RATIO = "image-aspect-ratio"
    IMAGE_AR = "image-ar"
    WIDTH = "width"
    HEIGHT = "height"
    AR = "ar"
    ASPECT_RATIO = "aspect-ratio"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    DATE = "date"
    TIME = "time"
    LAST_EDIT_DATE = "last-edit-date"
    LAST_EDIT_TIME = "last-edit-time"
    EDIT_DATE = "edit-date"
    EDIT_TIME = "edit-time"
    COMMENT_DATE = "comment-date"
    COMMENT_TIME = "comment-time"
    FAV_DATE = "fav-date"
    FAV_TIME = "fav-time"
    FEATURE_DATE = "feature-date"
    FEATURE_TIME = "feature-time"
    SAFETY = "safety"  # see tokens.values.PostSafety
    RATING = "rating"


class PostSortToken(SortableToken):
    """Sort tokens for post searches."""

    RANDOM = "random"
    ID = "id"
    SCORE = "score"
    TAG_COUNT = "tag-count"
    COMMENT_COUNT = "comment-count"
    FAV_COUNT = "fav-count"
    NOTE_COUNT = "note-count"
    RELATION_COUNT = "relation-count"
    FEATURE_COUNT = "feature-count"
    FILE_SIZE = "file-size"
    IMAGE_WIDTH = "image-width"
    IMAGE_HEIGHT = "image-height"
    IMAGE_AREA = "image-area"
    WIDTH = "width"
    HEIGHT = "height"
    AREA = "area"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    DATE = "date"
    TIME = "time"
    LAST_EDIT_DATE = "last-edit-date"
    LAST_EDIT_TIME = "last-edit-time"
    EDIT_DATE = "edit-date"
    EDIT_TIME = "edit-time"
    COMMENT_DATE = "comment-date"
    COMMENT_TIME = "comment-time"
    FAV_DATE = "fav-date"
    FAV_TIME = "fav-time"
    FEATURE_DATE = "feature-date"
    FEATURE_TIME = "feature-time"


class PostSpecialToken(SpecialToken):
    """Special tokens for post searches.

    ``liked``, ``disliked`` and ``fav`` are relative to the authenticated
    user; ``tumbleweed`` matches posts with score 0, no comments and no
    favorites.
    """

    LIKED = "liked"
    DISLIKED = "disliked"
    FAV = "fav"
    TUMBLEWEED = "tumbleweed"


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


class TagNamedToken(NamedToken):
    NAME = "name"
    CATEGORY = "category"
    CREATION_DATE = "creation-date"
    LAST_EDIT_DATE = "last-edit-date"
    LAST_EDIT_TIME = "last-edit-time"
    EDIT_DATE = "edit-date"
    EDIT_TIME = "edit-time"
    USAGES = "usages"
    USAGE_COUNT = "usage-count"
    POST_COUNT = "post-count"
    SUGGESTION_COUNT = "suggestion-count"
    IMPLICATION_COUNT = "implication-count"


class TagSortToken(SortableToken):
    RANDOM = "random"
    NAME = "name"
    CATEGORY = "category"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    LAST_EDIT_DATE = "last-edit-date"
    LAST_EDIT_TIME = "last-edit-time"
    EDIT_DATE = "edit-date"
    EDIT_TIME = "edit-time"
    USAGES = "usages"
    USAGE_COUNT = "usage-count"
    POST_COUNT = "post-count"
    SUGGESTION_COUNT = "suggestion-count"
    IMPLICATION_COUNT = "implication-count"


# ---------------------------------------------------------------------------
# Pools
# ---------------------------------------------------------------------------


class PoolNamedToken(NamedToken):
    NAME = "name"
    CATEGORY = "category"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    LAST_EDIT_DATE = "last-edit-date"
    LAST_EDIT_TIME = "last-edit-time"
    EDIT_DATE = "edit-date"
    EDIT_TIME = "edit-time"
    POST_COUNT = "post-count"


class PoolSortToken(SortableToken):
    RANDOM = "random"
    NAME = "name"
    CATEGORY = "category"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    LAST_EDIT_DATE = "last-edit-date"
    LAST_EDIT_TIME = "last-edit-time"
    EDIT_DATE = "edit-date"
    EDIT_TIME = "edit-time"
    POST_COUNT = "post-count"


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class CommentNamedToken(NamedToken):
    ID = "id"
    POST = "post"
    USER = "user"
    AUTHOR = "author"  # alias of user
    TEXT = "text"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    LAST_EDIT_DATE = "last-edit-date"
    LAST_EDIT_TIME = "last-edit-time"
    EDIT_DATE = "edit-date"
    EDIT_TIME = "edit-time"


class CommentSortToken(SortableToken):
    RANDOM = "random"
    USER = "user"
    AUTHOR = "author"  # alias of user
    POST = "post"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    LAST_EDIT_DATE = "last-edit-date"
    LAST_EDIT_TIME = "last-edit-time"
    EDIT_DATE = "edit-date"
    EDIT_TIME = "edit-time"


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class UserNamedToken(NamedToken):
    NAME = "name"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    LAST_LOGIN_DATE = "last-login-date"
    LAST_LOGIN_TIME = "last-login-time"
    LOGIN_DATE = "login-date"
    LOGIN_TIME = "login-time"


class UserSortToken(SortableToken):
    RANDOM = "random"
    NAME = "name"
    CREATION_DATE = "creation-date"
    CREATION_TIME = "creation-time"
    LAST_LOGIN_DATE = "last-login-date"
    LAST_LOGIN_TIME = "last-login-time"
    LOGIN_DATE = "login-date"
    LOGIN_TIME = "login-time"


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------


class SnapshotNamedToken(NamedToken):
    TYPE = "type"
    ID = "id"
    DATE = "date"
    TIME = "time"  # alias of date
    OPERATION = "operation"
    USER = "user"


# ---------------------------------------------------------------------------
# Resource lookup
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True, slots=True)
class Catalog:
    """The identifier sets available for one resource."""

    named: type[NamedToken]
    sort: type[SortableToken] | None = None
    special: type[SpecialToken] | None = None


class Resource(str, Enum):
    """Searchable resources, valued by their list endpoint path segment."""

    POSTS = "posts"
    TAGS = "tags"
    POOLS = "pools"
    COMMENTS = "comments"
    USERS = "users"
    SNAPSHOTS = "snapshots"

    def __str__(self) -> str:
        return self.value

    @property
    def catalog(self) -> Catalog:
        return _CATALOGS[self]


_CATALOGS: dict[Resource, Catalog] = {
    Resource.POSTS: Catalog(PostNamedToken, PostSortToken, PostSpecialToken),
    Resource.TAGS: Catalog(TagNamedToken, TagSortToken),
    Resource.POOLS: Catalog(PoolNamedToken, PoolSortToken),
    Resource.COMMENTS: Catalog(CommentNamedToken, CommentSortToken),
    Resource.USERS: Catalog(UserNamedToken, UserSortToken),
    Resource.SNAPSHOTS: Catalog(SnapshotNamedToken),
}


__all__ = [
    "Catalog",
    "CatalogToken",
    "CommentNamedToken",
    "CommentSortToken",
    "NamedToken",
    "PoolNamedToken",
    "PoolSortToken",
    "PostNamedToken",
    "PostSortToken",
    "PostSpecialToken",
    "Resource",
    "SnapshotNamedToken",
    "SortableToken",
    "SpecialToken",
    "TagNamedToken",
    "TagSortToken",
    "UserNamedToken",
    "UserSortToken",
]
