import json

import httpx
import respx

from gitlab_tasks.__main__ import main

FLOW = """
tasks:
  - id: report_bug
    type: gitlab.issues.Create
    url: http://mock
    token: glpat-cli-token-123
    projectId: 12345
    title: Test issue
  - id: find_bugs
    type: gitlab.issues.Search
    url: http://mock
    token: glpat-cli-token-123
    projectId: 12345
    search: Test
"""


@respx.mock
def test_run_prints_outputs_keyed_by_task_id(tmp_path, capsys, restore_package_logger, issue_response_body):
    respx.post("http://mock/api/v4/projects/12345/issues").mock(
        return_value=httpx.Response(201, json=issue_response_body)
    )
    respx.get("http://mock/api/v4/projects/12345/issues").mock(
        return_value=httpx.Response(200, json=[issue_response_body])
    )
    flow = tmp_path / "flow.yaml"
    flow.write_text(FLOW, encoding="utf-8")

    exit_code = main(["run", str(flow), "--log-format", "json"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out) == {
        "report_bug": {
            "statusCode": 201,
            "issueId": "1",
            "webUrl": "https://gitlab.example.com/test-group/test-project/issues/1",
        },
        "find_bugs": {"statusCode": 200, "issues": [issue_response_body], "count": 1},
    }
    assert "Creating issue 'Test issue'" in captured.err


@respx.mock
def test_run_reports_api_failure(tmp_path, capsys, restore_package_logger):
    respx.post("http://mock/api/v4/projects/12345/issues").mock(return_value=httpx.Response(404, text="Not Found"))
    flow = tmp_path / "flow.yaml"
    flow.write_text(FLOW, encoding="utf-8")

    exit_code = main(["run", str(flow)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "404" in captured.err


def test_run_reports_missing_flow_file(tmp_path, capsys, restore_package_logger):
    exit_code = main(["run", str(tmp_path / "missing.yaml")])

    assert exit_code == 1
    assert "Error reading flow" in capsys.readouterr().err
