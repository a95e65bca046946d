from gitlab_tasks.core.entities import IssueCreateSpec, IssueSearchSpec, MergeRequestSpec
from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)

builder = GitLabPayloadBuilderService()


def test_merge_request_payload_has_exactly_required_keys_without_description():
    spec = MergeRequestSpec(title="Minimal MR", source_branch="feature", target_branch="main")

    assert builder.build_merge_request_payload(spec) == {
        "title": "Minimal MR",
        "source_branch": "feature",
        "target_branch": "main",
    }


def test_merge_request_payload_includes_description_when_provided():
    spec = MergeRequestSpec(
        title="Test merge request",
        source_branch="feature/test-branch",
        target_branch="main",
        description="This is a test merge request",
    )

    payload = builder.build_merge_request_payload(spec)

    assert set(payload) == {"title", "source_branch", "target_branch", "description"}
    assert payload["description"] == "This is a test merge request"


def test_issue_payload_with_description_only():
    spec = IssueCreateSpec(title="Test issue", description="This is a test issue")

    assert builder.build_issue_payload(spec) == {
        "title": "Test issue",
        "description": "This is a test issue",
    }


def test_issue_payload_keeps_label_order():
    spec = IssueCreateSpec(title="Bug report", labels=["critical", "bug", "backend"])

    assert builder.build_issue_payload(spec)["labels"] == ["critical", "bug", "backend"]


def test_search_query_defaults_state_to_opened():
    assert builder.build_issue_search_query(IssueSearchSpec()) == "?state=opened"


def test_search_query_empty_state_defaults_to_opened():
    assert builder.build_issue_search_query(IssueSearchSpec(state="")) == "?state=opened"


def test_search_query_encodes_search_term():
    query = builder.build_issue_search_query(IssueSearchSpec(search="Test issue"))

    assert query == "?search=Test+issue&state=opened"


def test_search_query_comma_joins_labels_before_encoding():
    query = builder.build_issue_search_query(
        IssueSearchSpec(search="bug", state="closed", labels=["bug", "critical"])
    )

    assert query == "?search=bug&state=closed&labels=bug%2Ccritical"


def test_search_query_skips_empty_labels():
    assert builder.build_issue_search_query(IssueSearchSpec(labels=[])) == "?state=opened"
