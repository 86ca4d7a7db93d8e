import pytest

from labelsheet.model.enums import (
    GENERAL_ALIAS,
    LINEAR_SYMBOLOGIES,
    ArtifactFormat,
    Symbology,
)


class TestArtifactFormat:
    def test_mime_types(self) -> None:
        assert ArtifactFormat.PNG.mime_type == "image/png"
        assert ArtifactFormat.SVG.mime_type == "image/svg+xml"

    def test_data_uri_prefix(self) -> None:
        assert ArtifactFormat.PNG.data_uri_prefix == "data:image/png;base64,"
        assert ArtifactFormat.SVG.data_uri_prefix == "data:image/svg+xml;base64,"

    def test_extensions(self) -> None:
        assert ArtifactFormat.PNG.file_extension == "png"
        assert ArtifactFormat.SVG.file_extension == "svg"

    def test_is_raster(self) -> None:
        assert ArtifactFormat.PNG.is_raster
        assert not ArtifactFormat.SVG.is_raster


class TestSymbology:
    def test_members(self) -> None:
        assert [s.value for s in Symbology] == ["CODE128", "EAN13", "UPC", "EAN8", "QR"]

    @pytest.mark.parametrize(
        "symbology", [Symbology.CODE128, Symbology.EAN13, Symbology.UPC, Symbology.EAN8]
    )
    def test_linear_render_to_png(self, symbology: Symbology) -> None:
        assert symbology.is_linear
        assert symbology.artifact_format is ArtifactFormat.PNG
        assert symbology in LINEAR_SYMBOLOGIES

    def test_qr_renders_to_svg(self) -> None:
        assert not Symbology.QR.is_linear
        assert Symbology.QR.artifact_format is ArtifactFormat.SVG
        assert Symbology.QR not in LINEAR_SYMBOLOGIES

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("CODE128", Symbology.CODE128),
            ("ean13", Symbology.EAN13),
            (" Upc ", Symbology.UPC),
            ("EAN8", Symbology.EAN8),
            ("qr", Symbology.QR),
            (GENERAL_ALIAS, Symbology.CODE128),
            ("general", Symbology.CODE128),
        ],
    )
    def test_from_tag(self, tag: str, expected: Symbology) -> None:
        assert Symbology.from_tag(tag) is expected

    @pytest.mark.parametrize("tag", ["", "PDF417", "EAN-13", "CODE 128"])
    def test_from_tag_unknown(self, tag: str) -> None:
        with pytest.raises(ValueError, match="Unknown symbology tag"):
            Symbology.from_tag(tag)

    def test_general_is_not_a_member(self) -> None:
        assert GENERAL_ALIAS not in [s.value for s in Symbology]

    def test_localized_names(self) -> None:
        assert Symbology.QR.localized_name() == "QR code"
        assert Symbology.QR.localized_name("pt") == "Código QR"
        assert Symbology.UPC.localized_name("pt") == "UPC-A"
