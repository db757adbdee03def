"""End-to-end sizing scenarios through the public dispatcher."""

from unittest.mock import MagicMock

from rastersize.core import calculate_image_sizes, get_sizes, get_srcset, variant_filename
from rastersize.domain import ImageDimensions, SizeConstraints, SrcSetEntry


class TestScenarios:
    """Reference scenarios for both layout families."""

    def test_fixed_default_width(self) -> None:
        """1000x500 fixed with nothing requested."""
        reporter = MagicMock()
        result = calculate_image_sizes(
            ImageDimensions(1000, 500), SizeConstraints(), "fixed", reporter=reporter
        )
        assert result.sizes == (400, 800)
        assert result.aspect_ratio == 2.0
        assert result.presentation_width == 400
        assert result.presentation_height == 200
        reporter.warn.assert_not_called()

    def test_fixed_request_larger_than_source(self) -> None:
        """500x500 fixed with a 1000px request falls back and warns."""
        reporter = MagicMock()
        result = calculate_image_sizes(
            ImageDimensions(500, 500),
            SizeConstraints(width=1000),
            "fixed",
            reporter=reporter,
        )
        assert result.sizes == (1000,)
        reporter.warn.assert_called_once()
        assert "width" in reporter.warn.call_args[0][0]

    def test_fluid_defaults(self) -> None:
        """1600x800 fluid with nothing requested."""
        result = calculate_image_sizes(
            ImageDimensions(1600, 800), SizeConstraints(), "fluid", reporter=MagicMock()
        )
        assert result.sizes == (200, 400, 800, 1600)
        assert result.presentation_width == 800
        assert result.presentation_height == 400

    def test_fluid_clamped_maximum(self) -> None:
        """300x300 fluid with a maximum beyond the source."""
        result = calculate_image_sizes(
            ImageDimensions(300, 300),
            SizeConstraints(max_width=1000),
            "fluid",
            reporter=MagicMock(),
        )
        assert result.sizes == (75, 150, 300)

    def test_markup_from_result(self) -> None:
        """Sizes and srcset values build from a constrained result."""
        result = calculate_image_sizes(
            ImageDimensions(1600, 800),
            SizeConstraints(max_width=600),
            "constrained",
            reporter=MagicMock(),
        )
        entries = [
            SrcSetEntry(variant_filename("img/hero.jpg", size), size) for size in result.sizes
        ]

        assert get_sizes(result.presentation_width) == "(max-width: 600px) 100vw, 600px"
        assert get_srcset(entries).splitlines() == [
            "hero-150w.jpg 150w",
            "hero-300w.jpg 300w",
            "hero-600w.jpg 600w",
            "hero-1200w.jpg 1200w",
        ]
