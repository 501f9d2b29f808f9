"""
Module: test_tag.py
Description: Unit tests for the TagEvent model.
"""

import json

from coralogix_ci.models.tag import TagEvent


class TestTagEvent:
    """Test cases for TagEvent serialization."""

    def test_to_json_aliases(self):
        """Applications and subsystems go out as 'application'/'subsystem'."""
        tag = TagEvent(
            timestamp=1700000000000,
            name="release-1",
            applications=["app1"],
            subsystems=["sub1", "sub2"],
            icon_url=""
        )

        data = json.loads(tag.to_json())

        assert data == {
            "timestamp": 1700000000000,
            "name": "release-1",
            "application": ["app1"],
            "subsystem": ["sub1", "sub2"],
            "iconUrl": "",
        }

    def test_missing_icon_is_omitted(self):
        tag = TagEvent(name="v2", applications=["a"], subsystems=["s"])
        assert "iconUrl" not in json.loads(tag.to_json())

    def test_icon_url_not_escaped(self):
        """The icon URL is passed through as given."""
        icon = "https://cdn.example.com/icons/rocket.png?size=32&theme=dark"
        tag = TagEvent(name="v2", icon_url=icon)
        assert json.loads(tag.to_json())["iconUrl"] == icon

    def test_query_params(self):
        """Legacy query parameters join multiple names with commas."""
        tag = TagEvent(name="v3", applications=["a", "b"], subsystems=["s"], icon_url="i")

        assert tag.to_query_params("k") == {
            "key": "k",
            "application": "a,b",
            "subsystem": "s",
            "name": "v3",
            "iconUrl": "i",
        }
