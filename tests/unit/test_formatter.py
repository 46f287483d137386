"""
Unit tests for the JSON property-filter formatter
(formatting/json_property_filter.py).

Covers:
- Output shape and member ordering
- Conditional members (RenderedMessage, TraceId, SpanId, Exception, Properties)
- Property filtering and the empty Properties object
- Closing delimiter and line termination
- Argument validation and sink error propagation
"""

import io
import json
from datetime import datetime, timedelta, timezone

import pytest

from jsonpropfilter.config import FormatterSettings
from jsonpropfilter.errors import InvalidSettingsError, MissingArgumentError
from jsonpropfilter.events import LogEventLevel
from jsonpropfilter.formatting import (
    JsonPropertyFilterFormatter,
    format_exception,
    format_timestamp,
)


def _format(formatter, event):
    out = io.StringIO()
    formatter.format(event, out)
    return out.getvalue()


def _decode(line):
    assert line.endswith("\n")
    return json.loads(line)


class TestFormatTimestamp:
    def test_utc(self):
        ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert format_timestamp(ts) == "2024-01-01T00:00:00.0000000+00:00"

    def test_sub_second_precision(self):
        ts = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
        assert format_timestamp(ts) == "2024-05-06T07:08:09.1234560+00:00"

    def test_negative_offset(self):
        ts = datetime(2024, 1, 1, 12, tzinfo=timezone(-timedelta(hours=5, minutes=30)))
        assert format_timestamp(ts) == "2024-01-01T12:00:00.0000000-05:30"

    def test_naive_is_utc(self):
        assert format_timestamp(datetime(2024, 1, 1)).endswith("+00:00")


class TestOutputShape:
    def test_end_to_end_example(self, make_event):
        formatter = JsonPropertyFilterFormatter(render_message=True)
        event = make_event("Hello {Name}", {"Name": "World"})

        line = _format(formatter, event)

        assert line == (
            '{"Timestamp":"2024-01-01T00:00:00.0000000+00:00",'
            '"Level":"Information",'
            '"MessageTemplate":"Hello {Name}",'
            '"RenderedMessage":"Hello \\"World\\"",'
            '"Properties":{}}\n'
        )
        decoded = _decode(line)
        assert decoded["RenderedMessage"] == 'Hello "World"'
        assert decoded["Properties"] == {}

    def test_minimal_event_has_no_optional_members(self, make_event):
        decoded = _decode(_format(JsonPropertyFilterFormatter(), make_event("Started")))
        assert list(decoded) == ["Timestamp", "Level", "MessageTemplate"]

    def test_member_order_with_everything(self, make_event):
        try:
            raise RuntimeError("boom")
        except RuntimeError as exc:
            error = exc

        event = make_event(
            "Request {RequestId} failed",
            {"RequestId": "r-1"},
            level=LogEventLevel.Error,
            trace_id="4bf92f3577b34da6a3ce929d0e0e4736",
            span_id="00f067aa0ba902b7",
            exception=error,
        )
        decoded = _decode(_format(JsonPropertyFilterFormatter(render_message=True), event))

        assert list(decoded) == [
            "Timestamp",
            "Level",
            "MessageTemplate",
            "RenderedMessage",
            "TraceId",
            "SpanId",
            "Exception",
            "Properties",
        ]
        assert decoded["Level"] == "Error"
        assert decoded["TraceId"] == "4bf92f3577b34da6a3ce929d0e0e4736"
        assert decoded["SpanId"] == "00f067aa0ba902b7"
        assert decoded["RenderedMessage"] == 'Request "r-1" failed'
        assert decoded["Properties"] == {"RequestId": "r-1"}

    def test_exception_includes_traceback(self, make_event):
        try:
            raise ValueError('bad "value"')
        except ValueError as exc:
            error = exc

        decoded = _decode(_format(JsonPropertyFilterFormatter(), make_event("x", exception=error)))
        assert decoded["Exception"] == format_exception(error)
        assert decoded["Exception"].startswith("Traceback (most recent call last):")
        assert decoded["Exception"].endswith('ValueError: bad "value"')

    def test_render_message_disabled_by_default(self, make_event):
        decoded = _decode(_format(JsonPropertyFilterFormatter(), make_event()))
        assert "RenderedMessage" not in decoded

    @pytest.mark.parametrize(
        "template",
        [
            'He said "hi"',
            "C:\\path\\to\\file {Name}",
            "Ünïcödé 日本語 {Name}",
            "tab\there\nnewline",
            "{{escaped}} braces",
        ],
    )
    def test_message_template_round_trips(self, make_event, template):
        line = _format(JsonPropertyFilterFormatter(), make_event(template))
        assert _decode(line)["MessageTemplate"] == template
        assert line.count("\n") == 1

    def test_output_is_one_line(self, make_event):
        event = make_event("multi\nline {Name}", {"RequestId": "a\nb"})
        line = _format(JsonPropertyFilterFormatter(render_message=True), event)
        assert line.count("\n") == 1


class TestPropertyFiltering:
    def test_no_properties_omits_member(self, make_event):
        decoded = _decode(_format(JsonPropertyFilterFormatter(allow_properties="*"), make_event("x", {})))
        assert "Properties" not in decoded

    def test_all_filtered_writes_empty_object(self, make_event):
        event = make_event("x", {"Name": "World", "Secret": "s"})
        line = _format(JsonPropertyFilterFormatter(), event)
        assert line.endswith(',"Properties":{}}\n')

    def test_default_allow_list(self, make_event):
        event = make_event(
            "x", {"StatusCode": 200, "Password": "hunter2", "requestid": "r-1"}
        )
        decoded = _decode(_format(JsonPropertyFilterFormatter(), event))
        assert decoded["Properties"] == {"StatusCode": 200, "requestid": "r-1"}

    def test_wildcard_keeps_everything_in_order(self, make_event):
        event = make_event("x", {"b": 1, "a": [1, 2], "c": {"k": None}})
        line = _format(JsonPropertyFilterFormatter(allow_properties="*"), event)
        assert line.endswith(',"Properties":{"b":1,"a":[1,2],"c":{"k":null}}}\n')

    def test_clear_with_names(self, make_event):
        event = make_event("x", {"UserId": 7, "StatusCode": 200, "Tenant": "t"})
        formatter = JsonPropertyFilterFormatter(allow_properties="clear, userid, Tenant")
        decoded = _decode(_format(formatter, event))
        assert decoded["Properties"] == {"UserId": 7, "Tenant": "t"}

    def test_clear_alone_filters_defaults(self, make_event):
        event = make_event("x", {"StatusCode": 200})
        decoded = _decode(_format(JsonPropertyFilterFormatter(allow_properties="clear"), event))
        assert decoded["Properties"] == {}

    def test_clear_with_wildcard_keeps_everything(self, make_event):
        event = make_event("x", {"Other": 1})
        decoded = _decode(_format(JsonPropertyFilterFormatter(allow_properties="clear,*"), event))
        assert decoded["Properties"] == {"Other": 1}

    def test_plain_list_behaves_like_defaults(self, make_event):
        event = make_event("x", {"Foo": 1, "StatusCode": 200})
        decoded = _decode(_format(JsonPropertyFilterFormatter(allow_properties="Foo"), event))
        assert decoded["Properties"] == {"StatusCode": 200}

    def test_filtered_properties_still_render_in_message(self, make_event):
        event = make_event("Hello {Name:l}", {"Name": "World"})
        decoded = _decode(_format(JsonPropertyFilterFormatter(render_message=True), event))
        assert decoded["RenderedMessage"] == "Hello World"
        assert decoded["Properties"] == {}

    def test_property_keys_are_escaped(self, make_event):
        event = make_event("x", {'we"ird\\key': 1})
        decoded = _decode(_format(JsonPropertyFilterFormatter(allow_properties="*"), event))
        assert decoded["Properties"] == {'we"ird\\key': 1}


class TestClosingDelimiter:
    def test_default_has_nothing_after_brace(self, make_event):
        line = _format(JsonPropertyFilterFormatter(), make_event("x"))
        assert line.endswith("}\n")

    def test_empty_string(self, make_event):
        line = _format(JsonPropertyFilterFormatter(closing_delimiter=""), make_event("x"))
        assert line.endswith('"x"}\n')

    def test_custom_delimiter(self, make_event):
        line = _format(JsonPropertyFilterFormatter(closing_delimiter=","), make_event("x"))
        assert line.endswith("},\n")


class TestErrors:
    def test_missing_event(self, sink):
        with pytest.raises(MissingArgumentError) as exc:
            JsonPropertyFilterFormatter().format(None, sink)
        assert exc.value.details == {"argument": "event"}
        assert sink.getvalue() == ""

    def test_missing_output(self, make_event):
        with pytest.raises(ValueError) as exc:
            JsonPropertyFilterFormatter().format(make_event(), None)
        assert exc.value.code == "MISSING_ARGUMENT"

    @pytest.mark.parametrize(
        "kwargs,setting",
        [
            ({"closing_delimiter": 1}, "closing_delimiter"),
            ({"format_provider": "not callable"}, "format_provider"),
            ({"allow_properties": ["a", "b"]}, "allow_properties"),
        ],
    )
    def test_invalid_settings(self, kwargs, setting):
        with pytest.raises(InvalidSettingsError) as exc:
            JsonPropertyFilterFormatter(**kwargs)
        assert exc.value.details["setting"] == setting

    def test_sink_errors_propagate(self, make_event):
        class BrokenSink:
            def write(self, text):
                raise OSError("disk full")

        with pytest.raises(OSError, match="disk full"):
            JsonPropertyFilterFormatter().format(make_event(), BrokenSink())


class TestConstruction:
    def test_format_provider_is_used(self, make_event):
        formatter = JsonPropertyFilterFormatter(
            render_message=True, format_provider=lambda value, spec: f"#{value}"
        )
        decoded = _decode(_format(formatter, make_event("{Count} items", {"Count": 3})))
        assert decoded["RenderedMessage"] == "#3 items"

    def test_from_settings(self, make_event):
        settings = FormatterSettings(
            CLOSING_DELIMITER=";", RENDER_MESSAGE=True, ALLOW_PROPERTIES="clear,Name"
        )
        formatter = JsonPropertyFilterFormatter.from_settings(settings)
        line = _format(formatter, make_event("Hello {Name}", {"Name": "World"}))
        assert line.endswith('"Properties":{"Name":"World"}};\n')
        assert formatter.render_message is True
        assert formatter.closing_delimiter == ";"

    def test_from_environment(self, monkeypatch, make_event):
        monkeypatch.setenv("JSONPROPFILTER_ALLOW_PROPERTIES", "*")
        formatter = JsonPropertyFilterFormatter.from_settings()
        assert formatter.allow_list.wildcard

    def test_format_to_string(self, make_event):
        line = JsonPropertyFilterFormatter().format_to_string(make_event("x"))
        assert line.startswith('{"Timestamp":') and line.endswith("}\n")

    def test_formatter_is_reusable(self, make_event):
        formatter = JsonPropertyFilterFormatter(allow_properties="*")
        first = formatter.format_to_string(make_event("x", {"A": 1}))
        second = formatter.format_to_string(make_event("x", {"A": 1}))
        assert first == second
