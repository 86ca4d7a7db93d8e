import asyncio
from typing import Any, Dict

import pytest

from labelsheet.config import DEFAULT_CONFIG, get_config
from labelsheet.exceptions import (
    EmptyInputError,
    EncodingError,
    MalformedBulkInputError,
    TemplateError,
)
from labelsheet.model.enums import ArtifactFormat, Symbology
from labelsheet.model.sheet import CustomTemplate, PresetTemplate, PRESET_TEMPLATES
from labelsheet.session import (
    LabelSession,
    build_print_document,
    generate_many,
    generate_one,
)


@pytest.fixture
def config() -> Dict[str, Any]:
    return dict(DEFAULT_CONFIG)


@pytest.fixture
def session(config: Dict[str, Any]) -> LabelSession:
    return LabelSession(template_choice=PresetTemplate("a4_65"), config=config)


class TestTemplateSelection:
    def test_default_template_from_config(self, config: Dict[str, Any]) -> None:
        assert LabelSession(config=config).template is PRESET_TEMPLATES["a4_65"]

    def test_sessions_do_not_share_config(self) -> None:
        baseline = get_config()["qr_size"]
        first = LabelSession()
        first.config["qr_size"] = baseline + 1
        second = LabelSession()
        assert second.config["qr_size"] == baseline
        assert get_config()["qr_size"] == baseline
        assert second.config is not first.config
        assert get_config() is not first.config

    def test_select_preset(self, session: LabelSession) -> None:
        template = session.select_preset("a4_10")
        assert template is PRESET_TEMPLATES["a4_10"]
        assert session.template_choice == PresetTemplate("a4_10")

    def test_unknown_preset_keeps_previous_choice(self, session: LabelSession) -> None:
        with pytest.raises(TemplateError):
            session.select_preset("letter")
        assert session.template_choice == PresetTemplate("a4_65")

    def test_custom_template(self, session: LabelSession) -> None:
        template = session.set_custom_template("2", "1", "abc", "5")
        assert session.template_choice == CustomTemplate("2", "1", "abc", "5")
        assert template.width == "2in"
        assert template.columns == 1
        assert template.rows == 5


class TestGenerateOne:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input(self, session: LabelSession, text: str) -> None:
        with pytest.raises(EmptyInputError, match="valid input"):
            asyncio.run(generate_one(session, text))
        assert session.artifacts == []

    def test_detects_symbology(self, session: LabelSession) -> None:
        artifact = asyncio.run(generate_one(session, "4221735075026"))
        assert artifact.format is ArtifactFormat.PNG
        assert session.artifacts == [artifact]

    def test_explicit_symbology(self, session: LabelSession) -> None:
        artifact = asyncio.run(generate_one(session, "ABC123", Symbology.QR))
        assert artifact.format is ArtifactFormat.SVG

    def test_replaces_previous_artifacts(self, session: LabelSession) -> None:
        asyncio.run(generate_many(session, "A, B, C"))
        asyncio.run(generate_one(session, "hello"))
        assert len(session.artifacts) == 1

    def test_failure_keeps_previous_artifacts(self, session: LabelSession) -> None:
        first = asyncio.run(generate_one(session, "ABC123"))
        with pytest.raises(EncodingError):
            asyncio.run(generate_one(session, "12345", Symbology.EAN13))
        assert session.artifacts == [first]


class TestGenerateMany:
    def test_bulk_replaces_artifacts(self, session: LabelSession) -> None:
        artifacts = asyncio.run(
            generate_many(session, "4221735075026, ABC123, hello world")
        )
        assert [a.format for a in artifacts] == [
            ArtifactFormat.PNG,
            ArtifactFormat.PNG,
            ArtifactFormat.SVG,
        ]
        assert session.artifacts == artifacts

    def test_malformed_input(self, session: LabelSession) -> None:
        with pytest.raises(MalformedBulkInputError):
            asyncio.run(generate_many(session, " , ,"))

    def test_failure_leaves_session_untouched(self, session: LabelSession) -> None:
        before = asyncio.run(generate_many(session, "ABC"))
        with pytest.raises(EncodingError) as exc_info:
            asyncio.run(generate_many(session, "ABC, " + "Z" * 81))
        assert exc_info.value.index == 1
        assert session.artifacts == before


class TestPrintDocument:
    def test_uses_session_template_and_artifacts(self, session: LabelSession) -> None:
        session.select_preset("a4_21")
        asyncio.run(generate_many(session, "A1, B2, C3, D4"))
        document = build_print_document(session)
        assert document.template is PRESET_TEMPLATES["a4_21"]
        assert document.cell_count == 4
        assert "repeat(3, 1fr)" in document.html
        assert "<title>Print barcodes and labels</title>" in document.html

    def test_title_from_config(self, config: Dict[str, Any]) -> None:
        config["print_title"] = "Warehouse"
        session = LabelSession(config=config)
        assert "<title>Warehouse</title>" in build_print_document(session).html

    def test_explicit_title_wins(self, session: LabelSession) -> None:
        assert "<title>Shelf</title>" in build_print_document(session, "Shelf").html

    def test_empty_session(self, session: LabelSession) -> None:
        document = build_print_document(session)
        assert document.cell_count == 0

    def test_clear(self, session: LabelSession) -> None:
        asyncio.run(generate_one(session, "ABC"))
        session.clear()
        assert build_print_document(session).cell_count == 0
