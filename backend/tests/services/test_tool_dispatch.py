"""Tool Dispatch — tests for routing, argument validation, and the normalize/enrich pipeline.

Tests cover:
    - Missing/None/empty required arguments → error payload, gateway never called
    - Unknown tools → "Unknown tool" error payload
    - Gateway failures (domain and unexpected) → error payload, never raised
    - History/replies/search payloads: ISO timestamps + resolved user names
    - Argument defaults and caps forwarded to the gateway
    - Result is always a single text item holding JSON
"""

import json

import pytest

from slackgate.core.errors import UpstreamFailureError


def _payload(result: dict):
    assert len(result["content"]) == 1
    item = result["content"][0]
    assert item["type"] == "text"
    return json.loads(item["text"])


@pytest.mark.asyncio
async def test_list_tools_returns_catalog(dispatch):
    names = [t["name"] for t in dispatch.list_tools()]
    assert len(names) == 9
    assert names[0] == "slack_list_channels"
    assert names[-1] == "slack_search_messages"


@pytest.mark.asyncio
async def test_missing_required_argument_returns_error(dispatch, fake_slack):
    result = await dispatch.execute("slack_post_message", {"text": "hi"})
    body = _payload(result)
    assert body == {"error": "Missing required arguments: channel_id and text"}
    assert fake_slack.calls == []


@pytest.mark.asyncio
async def test_all_required_arguments_named(dispatch):
    body = _payload(await dispatch.execute("slack_reply_to_thread", {"channel_id": "C1"}))
    assert body == {
        "error": "Missing required arguments: channel_id, thread_ts, and text",
    }
    body = _payload(await dispatch.execute("slack_add_reaction", {}))
    assert body == {
        "error": "Missing required arguments: channel_id, timestamp, and reaction",
    }


@pytest.mark.asyncio
async def test_empty_string_counts_as_missing(dispatch):
    body = _payload(await dispatch.execute("slack_search_messages", {"query": ""}))
    assert body == {"error": "Missing required argument: query"}


@pytest.mark.asyncio
async def test_none_arguments_rejected(dispatch):
    body = _payload(await dispatch.execute("slack_list_channels", None))
    assert body == {"error": "No arguments provided"}


@pytest.mark.asyncio
async def test_unknown_tool_returns_error(dispatch):
    body = _payload(await dispatch.execute("slack_delete_channel", {}))
    assert body == {"error": "Unknown tool: slack_delete_channel"}


@pytest.mark.asyncio
async def test_gateway_failure_becomes_error_payload(dispatch, fake_slack):
    fake_slack.responses["post_message"] = UpstreamFailureError("timed out", "chat.postMessage")
    body = _payload(await dispatch.execute(
        "slack_post_message", {"channel_id": "C1", "text": "hi"},
    ))
    assert body["error"] == "Slack API error (chat.postMessage): timed out"


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_error_payload(dispatch, fake_slack):
    fake_slack.responses["get_users"] = RuntimeError("socket closed")
    body = _payload(await dispatch.execute("slack_get_users", {}))
    assert body == {"error": "socket closed"}


@pytest.mark.asyncio
async def test_invalid_limit_becomes_error_payload(dispatch, fake_slack):
    body = _payload(await dispatch.execute("slack_list_channels", {"limit": "many"}))
    assert "limit" in body["error"]
    assert fake_slack.calls == []


@pytest.mark.asyncio
async def test_ok_false_passed_through(dispatch, fake_slack):
    fake_slack.responses["post_message"] = {"ok": False, "error": "channel_not_found"}
    body = _payload(await dispatch.execute(
        "slack_post_message", {"channel_id": "C404", "text": "hi"},
    ))
    assert body == {"ok": False, "error": "channel_not_found"}


@pytest.mark.asyncio
async def test_channel_history_normalized_and_enriched(dispatch, fake_slack):
    fake_slack.add_user("U123", "jdoe", display_name="Janie")
    fake_slack.responses["get_channel_history"] = {
        "ok": True,
        "messages": [
            {"type": "message", "user": "U123", "text": "hello", "ts": "1700000000.123456"},
            {"type": "message", "user": "U123", "text": "again", "ts": "1700000001.000000",
             "thread_ts": "1700000000.123456"},
            {"type": "message", "bot_id": "B1", "text": "beep", "ts": "1700000002.000000"},
        ],
        "has_more": False,
    }
    body = _payload(await dispatch.execute(
        "slack_get_channel_history", {"channel_id": "C1", "limit": 5},
    ))
    messages = body["messages"]
    assert [m["ts"] for m in messages] == [
        "2023-11-14T22:13:20.123Z",
        "2023-11-14T22:13:21.000Z",
        "2023-11-14T22:13:22.000Z",
    ]
    assert messages[1]["thread_ts"] == "2023-11-14T22:13:20.123Z"
    assert messages[0]["user_display_name"] == "Janie"
    assert messages[0]["user_username"] == "jdoe"
    assert "user_display_name" not in messages[2]
    assert fake_slack.calls[0] == {
        "method": "get_channel_history", "channel_id": "C1", "limit": 5,
    }
    assert fake_slack.user_info_calls == ["U123"]


@pytest.mark.asyncio
async def test_thread_replies_enriched(dispatch, fake_slack):
    fake_slack.add_user("U1", "alice")
    fake_slack.responses["get_thread_replies"] = {
        "ok": True,
        "messages": [{"user": "U1", "ts": "1700000000.000000", "reply_users": ["U1"]}],
    }
    body = _payload(await dispatch.execute(
        "slack_get_thread_replies", {"channel_id": "C1", "thread_ts": "1700000000.000000"},
    ))
    assert body["messages"][0]["user_username"] == "alice"
    assert fake_slack.calls[0]["thread_ts"] == "1700000000.000000"


@pytest.mark.asyncio
async def test_search_results_enriched(dispatch, fake_slack):
    fake_slack.add_user("U1", "alice")
    fake_slack.responses["search_messages"] = {
        "ok": True,
        "messages": {"total": 1, "matches": [{"user": "U1", "ts": "1700000000"}]},
    }
    body = _payload(await dispatch.execute("slack_search_messages", {"query": "deploy"}))
    match = body["messages"]["matches"][0]
    assert match["ts"] == "2023-11-14T22:13:20.000Z"
    assert match["user_display_name"] == "alice"


@pytest.mark.asyncio
async def test_history_limit_defaults_to_ten(dispatch, fake_slack):
    await dispatch.execute("slack_get_channel_history", {"channel_id": "C1"})
    assert fake_slack.calls[0]["limit"] == 10


@pytest.mark.asyncio
async def test_list_channels_limit_default_and_cap(dispatch, fake_slack):
    await dispatch.execute("slack_list_channels", {})
    await dispatch.execute("slack_list_channels", {"limit": 500, "cursor": "abc"})
    assert fake_slack.calls[0] == {"method": "get_channels", "limit": 100, "cursor": None}
    assert fake_slack.calls[1] == {"method": "get_channels", "limit": 200, "cursor": "abc"}


@pytest.mark.asyncio
async def test_get_users_limit_cap(dispatch, fake_slack):
    await dispatch.execute("slack_get_users", {"limit": 1000})
    assert fake_slack.calls[0]["limit"] == 200


@pytest.mark.asyncio
async def test_search_count_default_cap_and_options(dispatch, fake_slack):
    await dispatch.execute("slack_search_messages", {"query": "a"})
    await dispatch.execute("slack_search_messages", {
        "query": "b", "count": 500, "highlight": True,
        "sort": "timestamp", "sort_dir": "asc", "cursor": "next",
    })
    assert fake_slack.calls[0] == {
        "method": "search_messages", "query": "a", "count": 20, "cursor": None,
        "highlight": False, "sort": None, "sort_dir": None,
    }
    assert fake_slack.calls[1] == {
        "method": "search_messages", "query": "b", "count": 100, "cursor": "next",
        "highlight": True, "sort": "timestamp", "sort_dir": "asc",
    }


@pytest.mark.asyncio
async def test_write_tools_forward_arguments(dispatch, fake_slack):
    await dispatch.execute("slack_post_message", {"channel_id": "C1", "text": "hi"})
    await dispatch.execute(
        "slack_reply_to_thread", {"channel_id": "C1", "thread_ts": "1.2", "text": "re"},
    )
    await dispatch.execute(
        "slack_add_reaction", {"channel_id": "C1", "timestamp": "1.2", "reaction": "tada"},
    )
    await dispatch.execute("slack_get_user_profile", {"user_id": "U1"})
    assert [c["method"] for c in fake_slack.calls] == [
        "post_message", "post_reply", "add_reaction", "get_user_profile",
    ]
    assert fake_slack.calls[2]["reaction"] == "tada"


@pytest.mark.asyncio
async def test_posted_message_is_normalized(dispatch, fake_slack):
    fake_slack.add_user("U1", "alice")
    fake_slack.responses["post_message"] = {
        "ok": True, "channel": "C1", "ts": "1700000000.000100",
        "message": {"user": "U1", "text": "hi", "ts": "1700000000.000100"},
    }
    body = _payload(await dispatch.execute(
        "slack_post_message", {"channel_id": "C1", "text": "hi"},
    ))
    assert body["ts"] == "2023-11-14T22:13:20.000Z"
    assert body["message"]["user_username"] == "alice"


@pytest.mark.asyncio
async def test_non_ascii_text_kept_readable(dispatch, fake_slack):
    fake_slack.responses["post_message"] = {"ok": True, "message": {"text": "olá 👋"}}
    result = await dispatch.execute("slack_post_message", {"channel_id": "C1", "text": "olá 👋"})
    assert "olá 👋" in result["content"][0]["text"]


@pytest.mark.asyncio
async def test_deeply_nested_payload_fully_processed(dispatch, fake_slack):
    depth = 900
    fake_slack.add_user("U1", "alice")
    fake_slack.responses["get_channel_history"] = (
        '{"user": "U1", "ts": "1700000000", "reply": ' * depth
        + "null"
        + "}" * depth
    )
    body = _payload(await dispatch.execute("slack_get_channel_history", {"channel_id": "C1"}))
    node, levels = body, 0
    while node is not None:
        assert node["ts"] == "2023-11-14T22:13:20.000Z"
        assert node["user_username"] == "alice"
        node = node["reply"]
        levels += 1
    assert levels == depth
    assert fake_slack.user_info_calls == ["U1"]
