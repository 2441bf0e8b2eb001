"""Tests for the transform cache."""

from svgsprite.engine.cache import TransformCache
from svgsprite.engine.context import TransformResult


def test_get_put():
    cache = TransformCache()
    assert cache.get("/a.svg") is None
    result = TransformResult(code="x")
    cache.put("/a.svg", result)
    assert cache.get("/a.svg") is result
    assert "/a.svg" in cache
    assert len(cache) == 1


def test_put_overwrites_and_clear():
    cache = TransformCache()
    cache.put("/a.svg", TransformResult(code="1"))
    cache.put("/a.svg", TransformResult(code="2"))
    assert cache.get("/a.svg").code == "2"
    cache.clear()
    assert len(cache) == 0
