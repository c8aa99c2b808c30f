"""Tests for supervisory error reporting."""
from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import httpx

from storefront.core.reporting import ErrorReporter, WebhookAlert


def test_report_invokes_hooks_with_context() -> None:
    calls = []
    reporter = ErrorReporter([lambda exc, context: calls.append((exc, context))])
    error = ValueError("bad state")

    reporter.report(error, source="worker")

    assert calls == [(error, {"source": "worker"})]


def test_failing_hook_does_not_stop_others() -> None:
    def broken(exc, context):
        raise RuntimeError("hook down")

    calls = []
    reporter = ErrorReporter([broken])
    reporter.add_hook(lambda exc, context: calls.append(exc))

    reporter.report(KeyError("missing"))

    assert len(calls) == 1


def test_from_webhook_without_url_has_no_hooks() -> None:
    reporter = ErrorReporter.from_webhook(None)

    assert reporter._hooks == []


def test_webhook_alert_posts_summary() -> None:
    alert = WebhookAlert("https://alerts.example.com/hook", timeout=1.0)
    response = httpx.Response(200, request=httpx.Request("POST", alert.url))

    with patch("storefront.core.reporting.httpx.post", return_value=response) as post:
        alert(RuntimeError("disk full"), {"source": "event_loop"})

    post.assert_called_once()
    args, kwargs = post.call_args
    assert args[0] == "https://alerts.example.com/hook"
    assert kwargs["json"]["error"] == "disk full"
    assert kwargs["json"]["type"] == "RuntimeError"
    assert kwargs["json"]["context"] == {"source": "event_loop"}
    assert kwargs["timeout"] == 1.0


def test_webhook_alert_retries_transport_errors() -> None:
    alert = WebhookAlert("https://alerts.example.com/hook")
    response = httpx.Response(200, request=httpx.Request("POST", alert.url))

    with patch(
        "storefront.core.reporting.httpx.post",
        side_effect=[httpx.ConnectError("connection refused"), response],
    ) as post:
        alert(RuntimeError("disk full"), {})

    assert post.call_count == 2


def test_install_handles_loop_exceptions() -> None:
    hook = MagicMock()
    reporter = ErrorReporter([hook])
    loop = asyncio.new_event_loop()
    try:
        reporter.install(loop)
        error = RuntimeError("orphaned task failed")
        loop.call_exception_handler({"message": "Task exception was never retrieved", "exception": error})
    finally:
        loop.close()

    hook.assert_called_once()
    reported, context = hook.call_args.args
    assert reported is error
    assert context["source"] == "event_loop"


def test_loop_errors_without_exception_skip_hooks() -> None:
    hook = MagicMock()
    reporter = ErrorReporter([hook])

    reporter.handle_loop_exception(MagicMock(), {"message": "slow callback"})

    hook.assert_not_called()
