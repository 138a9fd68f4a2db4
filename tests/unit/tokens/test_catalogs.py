"""Unit tests for the resource token catalogs."""

from __future__ import annotations

import re

import pytest

from szuru_client.testing.strategies import ALL_CATALOGS
from szuru_client.tokens import (
    CatalogToken,
    CommentSortToken,
    NamedToken,
    PostNamedToken,
    PostSortToken,
    PostSpecialToken,
    Resource,
    SnapshotNamedToken,
    SortableToken,
    SpecialToken,
    TagNamedToken,
    UserNamedToken,
    UserSortToken,
)

_SPELLING = re.compile(r"^[a-z]+(?:-[a-z]+)*$")


class TestSpellings:
    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.__name__)
    def test_lowercase_hyphenated(self, catalog: type[CatalogToken]) -> None:
        for member in catalog:
            assert _SPELLING.match(str(member)), member

    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.__name__)
    def test_aliases_are_distinct_members(self, catalog: type[CatalogToken]) -> None:
        # Enum folds members with equal values; every declared name must survive.
        assert len(catalog.__members__) == len(list(catalog))

    def test_str_is_stable(self) -> None:
        assert str(PostNamedToken.COMMENT_COUNT) == "comment-count"
        assert str(PostNamedToken.COMMENT_COUNT) == str(PostNamedToken.COMMENT_COUNT)

    def test_format_uses_spelling(self) -> None:
        assert f"{PostSortToken.LAST_EDIT_DATE}" == "last-edit-date"

    def test_last_edit_aliases_render_independently(self) -> None:
        spellings = {
            str(PostNamedToken.LAST_EDIT_DATE),
            str(PostNamedToken.LAST_EDIT_TIME),
            str(PostNamedToken.EDIT_DATE),
            str(PostNamedToken.EDIT_TIME),
        }
        assert spellings == {"last-edit-date", "last-edit-time", "edit-date", "edit-time"}

    @pytest.mark.parametrize(
        ("member", "spelling"),
        [
            (PostNamedToken.IMAGE_AR, "image-ar"),
            (PostNamedToken.CONTENT_CHECKSUM, "content-checksum"),
            (PostSortToken.AREA, "area"),
            (PostSpecialToken.TUMBLEWEED, "tumbleweed"),
            (TagNamedToken.IMPLICATION_COUNT, "implication-count"),
            (CommentSortToken.AUTHOR, "author"),
            (UserNamedToken.LAST_LOGIN_TIME, "last-login-time"),
            (SnapshotNamedToken.OPERATION, "operation"),
        ],
    )
    def test_known_spellings(self, member: CatalogToken, spelling: str) -> None:
        assert str(member) == spelling


class TestCapabilityPartition:
    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.__name__)
    def test_exactly_one_capability(self, catalog: type[CatalogToken]) -> None:
        classes = (NamedToken, SortableToken, SpecialToken)
        assert sum(issubclass(catalog, c) for c in classes) == 1

    def test_user_sort_is_sortable(self) -> None:
        assert issubclass(UserSortToken, SortableToken)
        assert not issubclass(UserNamedToken, SortableToken)

    def test_members_are_strings(self) -> None:
        assert isinstance(PostSpecialToken.LIKED, str)
        assert PostSpecialToken.LIKED == "liked"


class TestResource:
    def test_posts_catalog(self) -> None:
        catalog = Resource.POSTS.catalog
        assert catalog.named is PostNamedToken
        assert catalog.sort is PostSortToken
        assert catalog.special is PostSpecialToken

    def test_snapshots_have_only_named(self) -> None:
        catalog = Resource.SNAPSHOTS.catalog
        assert catalog.named is SnapshotNamedToken
        assert catalog.sort is None
        assert catalog.special is None

    def test_only_posts_have_special(self) -> None:
        with_special = [r for r in Resource if r.catalog.special is not None]
        assert with_special == [Resource.POSTS]

    def test_every_catalog_reachable(self) -> None:
        reachable = set()
        for resource in Resource:
            c = resource.catalog
            reachable.update(x for x in (c.named, c.sort, c.special) if x is not None)
        assert reachable == set(ALL_CATALOGS)

    def test_str(self) -> None:
        assert str(Resource.COMMENTS) == "comments"
