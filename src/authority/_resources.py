"""Resource tags - map resources (strings, classes, instances) to tag strings."""

from __future__ import annotations

from typing import Any

__all__ = ["ResourceTagger", "resource_tag"]


class ResourceTagger:
    """Derives the resource tag used for rule matching.

    - A ``str`` is already a tag and is returned unchanged.
    - A class maps to its registered tag, else its ``__name__``.
    - Any other value maps through its class the same way.

    Registered tags are looked up along the MRO, so a tag registered for
    a base class also covers its subclasses unless a subclass has its
    own entry.

    Example::

        tagger = ResourceTagger()
        tagger.register(BlogPost, "Post")
        assert tagger.tag_for(BlogPost(...)) == "Post"
        assert tagger.tag_for(Comment) == "Comment"
    """

    def __init__(self, tags: dict[type, str] | None = None) -> None:
        self._tags: dict[type, str] = dict(tags) if tags is not None else {}

    def register(self, cls: type, tag: str) -> None:
        """Use *tag* for *cls* and its subclasses."""
        self._tags[cls] = tag

    def tag_for(self, resource: Any) -> str:
        if isinstance(resource, str):
            return resource
        cls = resource if isinstance(resource, type) else type(resource)
        for klass in cls.__mro__:
            tag = self._tags.get(klass)
            if tag is not None:
                return tag
        return cls.__name__


_default_tagger = ResourceTagger()


def resource_tag(resource: Any) -> str:
    """Return the default tag for *resource* (its class name unless a string).

    Example::

        assert resource_tag("Post") == "Post"
        assert resource_tag(Post(id=1)) == "Post"
        assert resource_tag(Post) == "Post"
    """
    return _default_tagger.tag_for(resource)
