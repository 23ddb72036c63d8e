from config.schema import ALL_TAGS
from config.schema import assign_group_tag
from config.schema import group_tags


def test_assign_group_tag():
    assert assign_group_tag("/api/auth/request-otp") == "Auth"
    assert assign_group_tag("/api/notify/parent") == "Settings"
    assert assign_group_tag("/api/exercise/summary/week") == "Exercise"
    assert assign_group_tag("/health/") is None


def test_group_tags_rewrites_operations_and_declares_tags():
    result = {
        "paths": {
            "/api/contacts": {"get": {"tags": ["api"]}, "parameters": []},
            "/other": {"get": {"tags": ["keep"]}},
        },
    }

    group_tags(result)

    assert result["paths"]["/api/contacts"]["get"]["tags"] == ["Contacts"]
    assert result["paths"]["/other"]["get"]["tags"] == ["keep"]
    assert [t["name"] for t in result["tags"]] == ALL_TAGS
