"""Tests for _resources.py - resource tag derivation."""

from __future__ import annotations

from authority._resources import ResourceTagger, resource_tag
from tests.conftest import Comment, Post


class BasePage:
    pass


class LandingPage(BasePage):
    pass


class TestResourceTag:
    def test_string_is_returned_unchanged(self):
        assert resource_tag("Post") == "Post"
        assert resource_tag("*") == "*"

    def test_instance_uses_class_name(self):
        assert resource_tag(Post(id=1, title="t", author_id=1)) == "Post"

    def test_class_uses_own_name(self):
        assert resource_tag(Comment) == "Comment"

    def test_builtin_values(self):
        assert resource_tag(42) == "int"
        assert resource_tag({"a": 1}) == "dict"

    def test_subclass_gets_its_own_name(self):
        assert resource_tag(LandingPage()) == "LandingPage"


class TestResourceTagger:
    def test_registered_tag(self):
        tagger = ResourceTagger()
        tagger.register(Post, "Article")
        assert tagger.tag_for(Post) == "Article"
        assert tagger.tag_for(Post(id=1, title="t", author_id=1)) == "Article"

    def test_registered_tag_covers_subclasses(self):
        tagger = ResourceTagger({BasePage: "Page"})
        assert tagger.tag_for(LandingPage()) == "Page"

    def test_subclass_registration_wins(self):
        tagger = ResourceTagger({BasePage: "Page"})
        tagger.register(LandingPage, "Landing")
        assert tagger.tag_for(LandingPage) == "Landing"
        assert tagger.tag_for(BasePage()) == "Page"

    def test_strings_bypass_registry(self):
        tagger = ResourceTagger({str: "Text"})
        assert tagger.tag_for("Post") == "Post"

    def test_constructor_copies_mapping(self):
        tags: dict[type, str] = {Post: "Article"}
        tagger = ResourceTagger(tags)
        tags.clear()
        assert tagger.tag_for(Post) == "Article"
