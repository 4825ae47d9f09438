"""Tests for pipeline composition and the builder."""

import logging

import pytest

from pincel import highlight
from pincel.config import KeywordConfig, PipelineConfig, UuidConfig
from pincel.highlighters import (
    BUILTIN_ORDER,
    KeywordHighlighter,
    NumberHighlighter,
    UuidHighlighter,
)
from pincel.pipeline import (
    Pipeline,
    PipelineBuilder,
    apply_only_to_unhighlighted,
    apply_pipeline,
    create_default_pipeline,
    create_full_pipeline,
    create_pipeline_with_defaults,
)
from pincel.protocols import FunctionHighlighter
from pincel.style import Color, Style

UUIDS = [
    "123e4567-e89b-12d3-a456-426614174000",
    "f47ac10b-58cc-4372-a567-0e02b2c3d479",
]

BLUE_GREEN_RED = UuidConfig(
    number=Style(fg=Color.BLUE),
    letter=Style(fg=Color.GREEN),
    dash=Style(fg=Color.RED),
)


def names(pipeline: Pipeline) -> list[str]:
    return [h.name for h in pipeline]  # type: ignore[attr-defined]


class TestApplyOnlyToUnhighlighted:
    def test_styled_segments_are_copied_verbatim(self) -> None:
        text = "\x1b[31m42\x1b[0m and 7"
        result = apply_only_to_unhighlighted(text, NumberHighlighter())
        assert result == "\x1b[31m42\x1b[0m and \x1b[36m7\x1b[0m"

    def test_highlighter_never_sees_markup(self) -> None:
        seen: list[str] = []

        def record(text: str) -> str:
            seen.append(text)
            return text

        apply_only_to_unhighlighted("a\x1b[1mb\x1b[0mc", FunctionHighlighter(record))
        assert seen == ["a", "c"]

    def test_unterminated_markup_is_protected(self) -> None:
        text = "x \x1b[31m42 and 7"
        assert apply_only_to_unhighlighted(text, NumberHighlighter()) == text

    def test_empty_text(self) -> None:
        assert apply_only_to_unhighlighted("", NumberHighlighter()) == ""


class TestApplyPipeline:
    def test_no_highlighters_is_identity(self) -> None:
        assert apply_pipeline("took 42 ms", []) == "took 42 ms"

    @pytest.mark.parametrize(
        "keyword_first,expected",
        [(True, "took [bold+red]42[reset]"), (False, "took [cyan]42[reset]")],
    )
    def test_earlier_highlighter_wins(self, convert, keyword_first: bool, expected: str) -> None:
        keyword = KeywordHighlighter(KeywordConfig(words=("42",)))
        number = NumberHighlighter()
        order = [keyword, number] if keyword_first else [number, keyword]
        assert convert(apply_pipeline("took 42", order)) == expected

    def test_uuid_first_claims_whole_uuid(self, convert) -> None:
        text = "123e4567-e89b-12d3-a456-426614174000"
        result = apply_pipeline(text, [UuidHighlighter(), NumberHighlighter()])
        assert "[cyan]" not in convert(result)
        assert result == UuidHighlighter().apply(text)

    @pytest.mark.parametrize("uuid", UUIDS)
    def test_number_first_still_leaves_uuid_whole(self, convert, uuid: str) -> None:
        """Digit-only UUID groups are not standalone numbers."""
        number = NumberHighlighter()
        uuid_highlighter = UuidHighlighter(BLUE_GREEN_RED)

        result = apply_pipeline(f"n 42 id {uuid}", [number, uuid_highlighter])

        assert result == "n " + number.apply("42") + " id " + uuid_highlighter.apply(uuid)
        assert convert(result).startswith("n [cyan]42[reset] id ")

    def test_number_first_on_all_digit_group(self, convert) -> None:
        text = "123e4567-e89b-12d3-a456-426614174000"
        order = [NumberHighlighter(), UuidHighlighter(BLUE_GREEN_RED)]
        result = convert(apply_pipeline(text, order))
        assert "[cyan]" not in result
        assert result.endswith(
            "[red]-[reset][blue]4[reset][blue]2[reset][blue]6[reset][blue]6[reset]"
            "[blue]1[reset][blue]4[reset][blue]1[reset][blue]7[reset][blue]4[reset]"
            "[blue]0[reset][blue]0[reset][blue]0[reset]"
        )

    @pytest.mark.parametrize("uuid", UUIDS)
    @pytest.mark.parametrize("uuid_first", [True, False])
    def test_disjoint_tokens_do_not_depend_on_order(
        self, convert, uuid: str, uuid_first: bool
    ) -> None:
        uuid_highlighter = UuidHighlighter(BLUE_GREEN_RED)
        number = NumberHighlighter()
        order = [uuid_highlighter, number] if uuid_first else [number, uuid_highlighter]

        result = apply_pipeline(f"id {uuid} took 42", order)

        assert convert(result) == (
            "id " + convert(uuid_highlighter.apply(uuid)) + " took [cyan]42[reset]"
        )


class TestPipeline:
    def test_passthrough(self) -> None:
        pipeline = create_default_pipeline()
        assert pipeline.apply("No match here!") == "No match here!"
        assert pipeline.apply("") == ""

    def test_prestyled_input(self, convert) -> None:
        text = "\x1b[31m2023-06-24\x1b[0m, number 12345."
        result = create_default_pipeline().apply(text)
        assert convert(result) == "[red]2023-06-24[reset], number [cyan]12345[reset]."

    @pytest.mark.parametrize(
        "text",
        [
            "\x1b[36m42\x1b[0m",
            "\x1b[31munterminated 42 and 123e4567-e89b-12d3-a456-426614174000",
        ],
    )
    def test_styled_input_is_unchanged(self, text: str) -> None:
        assert create_full_pipeline().apply(text) == text

    def test_pipeline_is_reusable(self) -> None:
        pipeline = create_default_pipeline()
        first = pipeline.apply("took 42 ms")
        second = pipeline.apply("took 42 ms")
        assert first == second
        assert len(pipeline) == 2

    def test_call_is_apply(self) -> None:
        pipeline = create_default_pipeline()
        assert pipeline("took 42 ms") == pipeline.apply("took 42 ms")

    def test_empty_pipeline(self) -> None:
        pipeline = PipelineBuilder().build()
        assert len(pipeline) == 0
        assert pipeline.apply("took 42 ms") == "took 42 ms"

    def test_highlighters_tuple(self) -> None:
        pipeline = create_default_pipeline()
        assert isinstance(pipeline.highlighters, tuple)
        assert list(pipeline) == list(pipeline.highlighters)

    def test_repr(self) -> None:
        assert repr(create_default_pipeline()) == "Pipeline([number, uuid])"


class TestPipelineBuilder:
    def test_chaining_returns_builder(self) -> None:
        builder = PipelineBuilder()
        assert builder.with_number_highlighter() is builder
        assert builder.add(NumberHighlighter()) is builder

    def test_build_freezes_highlighters(self) -> None:
        builder = PipelineBuilder().with_number_highlighter()
        pipeline = builder.build()
        builder.with_uuid_highlighter()

        assert len(pipeline) == 1
        assert len(builder) == 2

    def test_every_named_method(self) -> None:
        pipeline = (
            PipelineBuilder()
            .with_url_highlighter()
            .with_time_highlighter()
            .with_ipv6_highlighter()
            .with_ipv4_highlighter()
            .with_uuid_highlighter()
            .with_unix_process_highlighter()
            .with_unix_path_highlighter()
            .with_key_value_highlighter()
            .with_quote_highlighter()
            .with_number_highlighter()
            .with_keyword_highlighter(KeywordConfig(words=("ERROR",)))
            .build()
        )
        assert names(pipeline) == [*BUILTIN_ORDER, "keyword"]

    def test_plain_function(self) -> None:
        def shout(text: str) -> str:
            return text.upper()

        pipeline = PipelineBuilder().add(shout).build()

        assert pipeline.apply("a\x1b[31mb\x1b[0mc") == "A\x1b[31mb\x1b[0mC"
        assert repr(pipeline) == "Pipeline([shout])"

    def test_add_all(self) -> None:
        builder = PipelineBuilder().add_all([UuidHighlighter(), NumberHighlighter()])
        assert names(builder.build()) == ["uuid", "number"]

    def test_rejects_non_highlighters(self) -> None:
        with pytest.raises(TypeError):
            PipelineBuilder().add(42)  # type: ignore[arg-type]

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            PipelineBuilder().with_highlighter("nope")

    def test_regex_highlighter(self, convert) -> None:
        pipeline = (
            PipelineBuilder()
            .with_regex_highlighter(r"\bWARN\b", Style(fg=Color.YELLOW))
            .with_number_highlighter()
            .build()
        )
        assert convert(pipeline.apply("WARN 3")) == "[yellow]WARN[reset] [cyan]3[reset]"

    def test_build_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pincel"):
            PipelineBuilder().with_number_highlighter().build()
        assert "Pipeline([number])" in caplog.text


class TestDefaults:
    def test_default_pipeline_is_cached(self) -> None:
        assert create_default_pipeline() is create_default_pipeline()

    def test_default_order(self) -> None:
        assert names(create_default_pipeline()) == ["number", "uuid"]

    @pytest.mark.parametrize("uuid", UUIDS)
    def test_default_pipeline_paints_whole_uuid(self, uuid: str) -> None:
        expected = f"n {NumberHighlighter().apply('42')} id {UuidHighlighter().apply(uuid)}"
        assert highlight(f"n 42 id {uuid}") == expected

    def test_pipeline_with_defaults_is_fresh_builder(self) -> None:
        first = create_pipeline_with_defaults()
        second = create_pipeline_with_defaults()
        first.with_url_highlighter()

        assert len(first) == 3
        assert len(second) == 2

    def test_full_pipeline_order(self) -> None:
        assert names(create_full_pipeline()) == list(BUILTIN_ORDER)

    def test_full_pipeline_on_log_line(self, convert, strip) -> None:
        text = "2023-06-24T10:00:00Z sshd[1234]: user=alice from 192.168.0.1 took 42 ms"
        result = create_full_pipeline().apply(text)
        converted = convert(result)

        assert strip(result) == text
        assert converted.startswith("[blue]2023[reset][faint]-[reset]")
        assert "[yellow]1234[reset]" in converted
        assert "[faint]user[reset][white]=[reset]alice" in converted
        assert "[italic+blue]192[reset][red].[reset]" in converted
        assert converted.endswith("took [cyan]42[reset] ms")

    def test_highlight_helper(self, convert) -> None:
        assert convert(highlight("took 42 ms")) == "took [cyan]42[reset] ms"

    def test_highlight_with_empty_pipeline(self) -> None:
        assert highlight("took 42 ms", pipeline=Pipeline()) == "took 42 ms"


class TestFromConfig:
    def test_default_config(self) -> None:
        pipeline = PipelineBuilder.from_config(PipelineConfig()).build()
        assert names(pipeline) == ["number", "uuid"]

    def test_order_and_styles(self, convert) -> None:
        config = PipelineConfig.from_dict(
            {"highlighters": ["url", "number"], "number": {"number": "bold yellow"}}
        )
        pipeline = PipelineBuilder.from_config(config).build()

        assert names(pipeline) == ["url", "number"]
        assert convert(pipeline.apply("took 42")) == "took [bold+yellow]42[reset]"

    def test_keywords_go_first_when_not_placed(self, convert) -> None:
        config = PipelineConfig(
            highlighters=("number",), keywords=(KeywordConfig(words=("42",)),)
        )
        pipeline = PipelineBuilder.from_config(config).build()

        assert names(pipeline) == ["keyword", "number"]
        assert convert(pipeline.apply("took 42")) == "took [bold+red]42[reset]"

    def test_keywords_at_their_position(self, convert) -> None:
        config = PipelineConfig(
            highlighters=("number", "keyword"),
            keywords=(
                KeywordConfig(words=("42",)),
                KeywordConfig(words=("ERROR",), style=Style(fg=Color.MAGENTA)),
            ),
        )
        pipeline = PipelineBuilder.from_config(config).build()

        assert names(pipeline) == ["number", "keyword", "keyword"]
        assert convert(pipeline.apply("ERROR 42")) == "[magenta]ERROR[reset] [cyan]42[reset]"

    def test_keyword_slot_without_keywords(self) -> None:
        config = PipelineConfig(highlighters=("keyword", "number"))
        assert names(PipelineBuilder.from_config(config).build()) == ["number"]

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            PipelineBuilder.from_config(PipelineConfig(highlighters=("nope",)))

    def test_logs_assembled_names(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pincel"):
            PipelineBuilder.from_config(PipelineConfig())
        assert "number, uuid" in caplog.text
