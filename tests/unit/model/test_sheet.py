import pytest

from labelsheet.exceptions import TemplateError
from labelsheet.model.sheet import (
    CUSTOM_KEY,
    MAX_GRID_COUNT,
    PRESET_TEMPLATES,
    CustomTemplate,
    PresetTemplate,
    SheetTemplate,
    coerce_count,
    localized_preset_name,
    normalize_length,
    preset_keys,
    resolve_template,
)


class TestSheetTemplate:
    @pytest.mark.parametrize("columns,rows", [(0, 1), (1, 0), (-2, 3), (3, -1)])
    def test_counts_below_one_rejected(self, columns: int, rows: int) -> None:
        with pytest.raises(TemplateError):
            SheetTemplate("Bad", "1in", "1in", columns, rows)

    def test_non_integer_counts_rejected(self) -> None:
        with pytest.raises(TemplateError):
            SheetTemplate("Bad", "1in", "1in", "3", 1)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "width,height",
        [
            ("1in;}</style><script>alert(1)</script>", "1in"),
            ("1in", "red; background: url(x)"),
            ("2", "1in"),
            ("1 in", "1in"),
            ("", "auto"),
        ],
    )
    def test_lengths_must_be_css_lengths(self, width: str, height: str) -> None:
        with pytest.raises(TemplateError, match="CSS length"):
            SheetTemplate("Bad", width, height, 1, 1)

    @pytest.mark.parametrize("length", ["auto", "2in", "38.1mm", ".5cm", "72PT", "100px"])
    def test_valid_lengths_accepted(self, length: str) -> None:
        template = SheetTemplate("Ok", length, length, 1, 1)
        assert template.width == length

    def test_capacity_and_rows(self) -> None:
        template = SheetTemplate("T", "1in", "1in", 3, 11)
        assert template.capacity == 33
        assert template.rows_for(0) == 0
        assert template.rows_for(3) == 1
        assert template.rows_for(4) == 2
        assert template.sheets_for(33) == 1
        assert template.sheets_for(34) == 2


class TestPresetCatalog:
    def test_catalog_keys(self) -> None:
        assert preset_keys() == ["a4_65", "a4_21", "a4_10", "a4_full", CUSTOM_KEY]

    @pytest.mark.parametrize(
        "key,width,height,columns,rows",
        [
            ("a4_65", "1.5in", "0.83in", 3, 11),
            ("a4_21", "2.5in", "1.5in", 3, 7),
            ("a4_10", "3.9in", "2.25in", 2, 5),
            ("a4_full", "8.27in", "11.7in", 1, 1),
        ],
    )
    def test_preset_values(
        self, key: str, width: str, height: str, columns: int, rows: int
    ) -> None:
        template = PRESET_TEMPLATES[key]
        assert (template.width, template.height) == (width, height)
        assert (template.columns, template.rows) == (columns, rows)

    def test_every_preset_is_valid(self) -> None:
        for template in PRESET_TEMPLATES.values():
            assert template.columns >= 1 and template.rows >= 1

    def test_localized_names(self) -> None:
        assert localized_preset_name("a4_full", "pt") == "A4 Página Toda (210 x 297 mm)"
        assert localized_preset_name(CUSTOM_KEY, "pt") == "Personalizado"
        assert localized_preset_name("a4_65").startswith("A4 65-label")

    def test_localized_name_unknown_key(self) -> None:
        with pytest.raises(TemplateError):
            localized_preset_name("letter")


class TestFieldNormalization:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("4", 4),
            (" 2 ", 2),
            ("007", 7),
            ("abc", 1),
            ("", 1),
            ("0", 1),
            ("-3", 1),
            ("2.5", 1),
            ("1_0", 1),
            ("+3", 1),
            ("٣", 1),
            ("100", 100),
            ("101", MAX_GRID_COUNT),
            ("9" * 50, MAX_GRID_COUNT),
        ],
    )
    def test_coerce_count(self, raw: str, expected: int) -> None:
        assert coerce_count(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("2", "2in"),
            ("1.5", "1.5in"),
            (".5", ".5in"),
            ("38.1mm", "38.1mm"),
            ("3 cm", "3cm"),
            ("72PT", "72pt"),
            ("100px", "100px"),
            ("2in", "2in"),
            ("", "auto"),
            ("   ", "auto"),
            ("wide", "auto"),
            ("2em", "auto"),
            ("-1in", "auto"),
            ("2in; color: red", "auto"),
        ],
    )
    def test_normalize_length(self, raw: str, expected: str) -> None:
        assert normalize_length(raw) == expected


class TestResolveTemplate:
    def test_preset(self) -> None:
        assert resolve_template(PresetTemplate("a4_21")) is PRESET_TEMPLATES["a4_21"]

    def test_unknown_preset(self) -> None:
        with pytest.raises(TemplateError, match="Unknown sheet preset"):
            resolve_template(PresetTemplate("letter"))

    def test_custom_full(self) -> None:
        template = resolve_template(CustomTemplate("2", "1", "4", "10"))
        assert template.width == "2in"
        assert template.height == "1in"
        assert template.columns == 4
        assert template.rows == 10
        assert template.name == "Custom"

    def test_custom_invalid_counts_become_one(self) -> None:
        template = resolve_template(CustomTemplate("2", "1", "abc", ""))
        assert template.columns == 1
        assert template.rows == 1

    def test_custom_blank_fields(self) -> None:
        template = resolve_template(CustomTemplate())
        assert (template.width, template.height) == ("auto", "auto")
        assert (template.columns, template.rows) == (1, 1)

    def test_custom_preset_key_is_the_auto_template(self) -> None:
        template = resolve_template(PresetTemplate(CUSTOM_KEY))
        assert template.width == "auto"
        assert template.columns == 1

    def test_wrong_choice_type(self) -> None:
        with pytest.raises(TypeError):
            resolve_template("a4_65")  # type: ignore[arg-type]
