# tests/core/startup/test_context.py
"""
Testes do StartupContext: log estruturado e warnings.
"""


def test_log_appends_structured_event(make_ctx):
    ctx = make_ctx()
    ctx.log(option="theme", level="INFO", message="applied", elements=2)

    (event,) = ctx.events
    assert event["option"] == "theme"
    assert event["level"] == "INFO"
    assert event["message"] == "applied"
    assert event["elements"] == 2
    assert event["timestamp"].endswith("+00:00")


def test_warnings_are_kept_in_order_and_logged(make_ctx):
    ctx = make_ctx()
    ctx.add_warning(option="loader", message="first")
    ctx.add_warning(option="loader", message="second")

    assert ctx.warnings == ["first", "second"]
    assert [e["level"] for e in ctx.events] == ["WARNING", "WARNING"]
