"""Tests for message composition."""

from telenotify.domain.message import DEFAULT_PARSE_MODE, OutboundMessage, ParseMode, compose_message


class TestComposeMessage:
    def test_subject_is_title_line(self):
        msg = compose_message("Alert", "disk is full")
        assert msg.text == "Alert\ndisk is full"

    def test_default_parse_mode_is_html(self):
        assert DEFAULT_PARSE_MODE == ParseMode.HTML
        assert compose_message("a", "b").parse_mode == ParseMode.HTML

    def test_same_input_same_output(self):
        assert compose_message("a", "<i>b</i>") == compose_message("a", "<i>b</i>")

    def test_empty_parts(self):
        assert compose_message("", "").text == "\n"

    def test_parse_mode_from_string(self):
        msg = compose_message("a", "b", parse_mode="MarkdownV2")
        assert msg.parse_mode is ParseMode.MARKDOWN_V2

    def test_parse_mode_value(self):
        assert ParseMode.HTML.value == "HTML"
        assert OutboundMessage(text="x").parse_mode == ParseMode.HTML
